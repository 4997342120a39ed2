from __future__ import annotations

from typing import NamedTuple

from .errors import ParseError


class LoadAverage(NamedTuple):
    one: str
    five: str
    fifteen: str


def parse_loadavg(text: str) -> LoadAverage:
    """Take the 1, 5 and 15 minute figures from ``/proc/loadavg`` as written."""
    tokens = text.split()
    if len(tokens) < 3:
        raise ParseError(f"expected 3 load average fields, got {len(tokens)}")
    return LoadAverage(tokens[0], tokens[1], tokens[2])
