from __future__ import annotations

from datetime import datetime, timedelta

from ruptime.system import (
    ElapsedTime,
    HostStatus,
    LoadAverage,
    UptimeFormat,
    format_uptime,
    format_users,
)

from .logging import console

SINCE_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_loadavg(load: LoadAverage) -> str:
    return ", ".join(load)


def build_status_line(status: HostStatus, now: datetime) -> str:
    return (
        f" {now:%H:%M:%S} up {format_uptime(status.elapsed, UptimeFormat.COMPACT)}, "
        f"{format_users(status.users)}, load average: {format_loadavg(status.load)}"
    )


def build_pretty_line(elapsed: ElapsedTime) -> str:
    return f"up {format_uptime(elapsed, UptimeFormat.VERBOSE)}"


def build_since_line(elapsed: ElapsedTime, now: datetime) -> str:
    booted = now - timedelta(seconds=elapsed.total_seconds)
    return booted.strftime(SINCE_FORMAT)


def print_line(text: str) -> None:
    console().print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)
