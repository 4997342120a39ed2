from __future__ import annotations

"""
Readers for the host state files behind ``uptime``.

Each source is read whole in a single call and handed to the matching parser;
nothing is streamed and nothing is retried.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ruptime.config import SourceSettings
from ruptime.logging import get_logger

from .errors import ParseError
from .loadavg import LoadAverage, parse_loadavg
from .sessions import count_sessions
from .uptime import ElapsedTime, parse_uptime

log = get_logger("ruptime")


@dataclass(frozen=True)
class HostStatus:
    elapsed: ElapsedTime
    load: LoadAverage
    users: int


def read_text(path: Path) -> str:
    try:
        data = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(f"{path}: not valid UTF-8 text ({e.reason})") from None
    log.debug("read %s (%d chars)", path, len(data))
    return data


def read_bytes(path: Path) -> bytes:
    data = path.read_bytes()
    log.debug("read %s (%d bytes)", path, len(data))
    return data


def read_elapsed(settings: Optional[SourceSettings] = None) -> ElapsedTime:
    settings = settings or SourceSettings()
    return parse_uptime(read_text(settings.uptime_path))


def collect_status(settings: Optional[SourceSettings] = None) -> HostStatus:
    settings = settings or SourceSettings()
    elapsed = read_elapsed(settings)
    load = parse_loadavg(read_text(settings.loadavg_path))
    users = count_sessions(read_bytes(settings.utmp_path))
    return HostStatus(elapsed=elapsed, load=load, users=users)
