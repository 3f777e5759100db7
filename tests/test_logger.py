from salonsync.config import logger as log


def test_lines_carry_level_context_and_data(capsys):
    log.set_level("debug")
    try:
        log.info("store", "Appointment created", appointment_id="abc", notes=None)
    finally:
        log.set_level("info")

    err = capsys.readouterr().err
    assert "INFO" in err
    assert "[store]" in err
    assert "Appointment created | appointment_id=abc, notes=None" in err


def test_messages_below_level_are_dropped(capsys):
    log.set_level("warn")
    try:
        log.info("store", "hidden")
        log.warn("store", "shown")
    finally:
        log.set_level("info")

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "shown" in err


def test_long_values_are_truncated(capsys):
    log.error("voice", "Tool call failed", error="x" * 400)

    err = capsys.readouterr().err
    assert "x" * 150 + "..." in err
    assert "x" * 151 not in err


def test_long_lines_are_not_wrapped(capsys):
    log.info("store", "Appointment created", notes="y" * 120, client="Kiss Anna")

    lines = capsys.readouterr().err.splitlines()
    assert len(lines) == 1
    assert lines[0].endswith("client=Kiss Anna")
