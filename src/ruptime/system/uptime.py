from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .errors import ParseError

SECONDS_PER_DAY = 86400
SECONDS_PER_HOUR = 3600
SECONDS_PER_MINUTE = 60

# Plain ASCII decimal or exponent notation, no digit separators
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


class UptimeFormat(Enum):
    COMPACT = "compact"
    VERBOSE = "verbose"


@dataclass(frozen=True)
class ElapsedTime:
    days: int
    hours: int
    minutes: int
    # Whole seconds the value was derived from; not part of equality.
    total_seconds: Optional[int] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.days < 0:
            raise ValueError(f"days must be >= 0, got {self.days}")
        if not 0 <= self.hours <= 23:
            raise ValueError(f"hours must be in [0, 23], got {self.hours}")
        if not 0 <= self.minutes <= 59:
            raise ValueError(f"minutes must be in [0, 59], got {self.minutes}")
        covered = (
            self.days * SECONDS_PER_DAY
            + self.hours * SECONDS_PER_HOUR
            + self.minutes * SECONDS_PER_MINUTE
        )
        if self.total_seconds is None:
            object.__setattr__(self, "total_seconds", covered)
        elif not covered <= self.total_seconds < covered + SECONDS_PER_MINUTE:
            raise ValueError(
                f"{self.total_seconds} seconds does not match "
                f"{self.days}d {self.hours}h {self.minutes}m"
            )

    @classmethod
    def from_seconds(cls, seconds: int) -> "ElapsedTime":
        days, rem = divmod(seconds, SECONDS_PER_DAY)
        hours, rem = divmod(rem, SECONDS_PER_HOUR)
        minutes = rem // SECONDS_PER_MINUTE
        return cls(days=days, hours=hours, minutes=minutes, total_seconds=seconds)


def parse_uptime(text: str) -> ElapsedTime:
    """
    Parse the contents of ``/proc/uptime``.

    Only the first token (seconds since boot) is used. Fractional seconds
    are truncated.
    """
    tokens = text.split(maxsplit=1)
    if not tokens:
        raise ParseError("uptime source is empty")
    token = tokens[0]
    if not _NUMBER_RE.fullmatch(token):
        raise ParseError(f"invalid uptime value: {token!r}")
    value = float(token)
    if not math.isfinite(value) or value < 0:
        raise ParseError(f"invalid uptime value: {token!r}")
    return ElapsedTime.from_seconds(int(value))


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def format_uptime(elapsed: ElapsedTime, kind: UptimeFormat = UptimeFormat.COMPACT) -> str:
    prefix = f"{_plural(elapsed.days, 'day')}, " if elapsed.days > 0 else ""
    if kind is UptimeFormat.COMPACT:
        if elapsed.hours == 0:
            rest = f"{elapsed.minutes} min"
        else:
            rest = f"{elapsed.hours}:{elapsed.minutes:02d}"
    else:
        if elapsed.hours == 0:
            rest = f"{elapsed.minutes} minutes"
        else:
            rest = f"{elapsed.hours} hours, {elapsed.minutes} minutes"
    return prefix + rest
