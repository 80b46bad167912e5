from __future__ import annotations

"""Helpers normalising operands into symbol sequences."""

from typing import Any, List, Sequence, Union


def seq(target: Union[str, Sequence[Any]]) -> Sequence[Any]:
    """Return *target* as a sequence of symbols (strings become character lists)."""

    if isinstance(target, str):
        return list(target)
    return target


def squeeze(target: Union[str, Sequence[Any]]) -> Union[str, List[Any]]:
    """Drop consecutive duplicate symbols from *target*.

    A string input gives back a string, anything else a list.
    """

    squeezed: List[Any] = []
    for symbol in seq(target):
        if not squeezed or symbol != squeezed[-1]:
            squeezed.append(symbol)
    if isinstance(target, str):
        return "".join(squeezed)
    return squeezed
