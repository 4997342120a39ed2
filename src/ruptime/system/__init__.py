from __future__ import annotations

from .errors import ParseError
from .uptime import ElapsedTime, UptimeFormat, parse_uptime, format_uptime
from .loadavg import LoadAverage, parse_loadavg
from .sessions import UTMP_RECORD_SIZE, USER_PROCESS, count_sessions, format_users
from .sources import HostStatus, collect_status, read_elapsed

__all__ = [
    "ParseError",
    "ElapsedTime",
    "UptimeFormat",
    "parse_uptime",
    "format_uptime",
    "LoadAverage",
    "parse_loadavg",
    "UTMP_RECORD_SIZE",
    "USER_PROCESS",
    "count_sessions",
    "format_users",
    "HostStatus",
    "collect_status",
    "read_elapsed",
]
