from __future__ import annotations


class ParseError(ValueError):
    """A system source did not contain the value it is expected to carry."""
