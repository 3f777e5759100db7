import json
from datetime import datetime, timezone

import pytest

from salonsync.assistant.tools import (
    book_appointment,
    check_availability,
    parse_tool_date,
    run_book_appointment,
    run_check_availability,
)
from salonsync.domain.appointment import Appointment

from conftest import at


def test_parse_accepts_iso_and_space_separated():
    assert parse_tool_date("2025-03-10T14:30") == at(14, 30)
    assert parse_tool_date("2025-03-10 14:30") == at(14, 30)


def test_parse_converts_offsets_to_local_time():
    expected = datetime(2025, 3, 10, 13, 0, tzinfo=timezone.utc).astimezone().replace(tzinfo=None)

    assert parse_tool_date("2025-03-10T13:00:00Z") == expected
    assert parse_tool_date("2025-03-10T13:00:00+00:00") == expected


def test_parse_rejects_garbage():
    with pytest.raises(ValueError):
        parse_tool_date("next tuesday")


def test_check_availability_reports_free_and_occupied(session, store):
    store.save_appointment(Appointment(id="", client_id="c1", start_time=at(10)))

    busy = json.loads(check_availability.invoke({"date": "2025-03-10T10:15"}))
    free = json.loads(check_availability.invoke({"date": "2025-03-10T10:30"}))

    assert busy == {"available": False, "message": "Occupied / Foglalt"}
    assert free == {"available": True, "message": "Free / Szabad"}


def test_invalid_date_is_reported_not_treated_as_free(session):
    result = json.loads(run_check_availability("holnap"))

    assert "error" in result
    assert "available" not in result


def test_book_appointment_writes_a_voice_booking(session, live):
    result = book_appointment.invoke({"date": "2025-03-10T15:00", "name": "Tóth Lili"})

    assert result == "Appointment confirmed."
    booked = live.appointments[0]
    assert booked.start_time == at(15)
    assert booked.client_name == "Tóth Lili"
    assert booked.client_id == "voice_generated"


def test_book_with_invalid_date_does_not_write(session, live):
    result = json.loads(run_book_appointment("??", "Tóth Lili"))

    assert "error" in result
    assert live.appointments == []


def test_tools_require_a_session():
    with pytest.raises(RuntimeError):
        run_check_availability("2025-03-10T10:00")
