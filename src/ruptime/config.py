from __future__ import annotations

from pydantic import BaseModel
from pathlib import Path

PROG_NAME = "ruptime"
VERSION = "0.1.0"

class SourceSettings(BaseModel):
    # Kernel counters and the login accounting file
    uptime_path: Path = Path("/proc/uptime")
    loadavg_path: Path = Path("/proc/loadavg")
    utmp_path: Path = Path("/var/run/utmp")
