from __future__ import annotations

# struct utmp on Linux (glibc, 64-bit and 32-bit alike)
UTMP_RECORD_SIZE = 384
# ut_type value of a normal logged-in session
USER_PROCESS = 7


def count_sessions(buf: bytes, record_size: int = UTMP_RECORD_SIZE) -> int:
    count = 0
    for offset in range(0, len(buf), record_size):
        # trailing partial record is not a session
        if offset + record_size > len(buf):
            break
        if buf[offset] == USER_PROCESS:
            count += 1
    return count


def format_users(count: int) -> str:
    return "1 user" if count == 1 else f"{count} users"
