"""seqmetrics package."""
from importlib.metadata import version, PackageNotFoundError

from .metrics import damerau_levenshtein, tversky

try:
    __version__ = version("seqmetrics")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = ["__version__", "damerau_levenshtein", "tversky"]
