"""Reading whitespace-separated integers from text and files."""

from __future__ import annotations

import os
import re

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_NEXT_INT = re.compile(r"\s*([+-]?[0-9]+)", re.ASCII)


def parse_ints(text: str) -> list[int]:
    """Return the leading run of integers in ``text``.

    Reading stops at the first thing that is not a 32-bit integer,
    so ``"1 2 x 3"`` gives ``[1, 2]``.
    """
    values: list[int] = []
    position = 0
    while (match := _NEXT_INT.match(text, position)) is not None:
        value = int(match.group(1))
        if not INT_MIN <= value <= INT_MAX:
            break
        values.append(value)
        position = match.end()
    return values


def read_int_file(path: str | os.PathLike[str]) -> list[int]:
    """Read the integers at the start of the file at ``path``.

    Raises ``OSError`` (such as ``FileNotFoundError``) if the file cannot be read.
    """
    with open(path, encoding="utf-8") as handle:
        return parse_ints(handle.read())