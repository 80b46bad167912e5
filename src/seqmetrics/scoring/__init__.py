from . import reports
from .reports import load_results, summarise, write_report

__all__ = ["load_results", "reports", "summarise", "write_report"]
