from ruptime.system import USER_PROCESS, UTMP_RECORD_SIZE, count_sessions, format_users


def _record(kind: int) -> bytes:
    return bytes([kind]) + b"\x01" * (UTMP_RECORD_SIZE - 1)


def test_single_record() -> None:
    assert count_sessions(_record(USER_PROCESS)) == 1
    assert count_sessions(_record(0)) == 0


def test_mixed_records() -> None:
    # BOOT_TIME, LOGIN_PROCESS, two sessions, DEAD_PROCESS
    buf = _record(2) + _record(6) + _record(7) + _record(7) + _record(8)
    assert count_sessions(buf) == 2


def test_trailing_partial_record_ignored() -> None:
    buf = _record(0) + bytes([USER_PROCESS]) * 16
    assert len(buf) == 400
    assert count_sessions(buf) == 0
    assert count_sessions(_record(USER_PROCESS) + bytes(16)) == 1


def test_empty_and_short_buffers() -> None:
    assert count_sessions(b"") == 0
    assert count_sessions(bytes([USER_PROCESS]) * (UTMP_RECORD_SIZE - 1)) == 0


def test_format_users() -> None:
    assert format_users(0) == "0 users"
    assert format_users(1) == "1 user"
    assert format_users(5) == "5 users"
