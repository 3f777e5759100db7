"""Receptionist tools: availability check and booking.

The same handlers serve the typed chat agent (as LangChain tools) and the
voice session (dispatched by name from tool calls).
"""

import json
from datetime import datetime

from langchain_core.tools import tool

from ..config import logger as log
from ..session import get_session

BOOKING_CONFIRMED = "Appointment confirmed."


def parse_tool_date(value: str) -> datetime:
    """Parses the model-supplied date into a naive local datetime.

    Accepts ISO 8601 with or without offset and "YYYY-MM-DD HH:MM".

    Raises:
        ValueError: If the value is not a recognizable date.
    """
    value = value.strip()
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def run_check_availability(date: str) -> str:
    try:
        start = parse_tool_date(date)
    except (ValueError, TypeError):
        log.warn("tools", "Invalid date for availability", date=date)
        return json.dumps({"error": f"Invalid date: {date}. Use ISO format (YYYY-MM-DDTHH:MM)."})

    if get_session().store.check_availability(start):
        result = {"available": True, "message": "Free / Szabad"}
    else:
        result = {"available": False, "message": "Occupied / Foglalt"}
    log.debug("tools", "check_availability", date=start.isoformat(), available=result["available"])
    return json.dumps(result)


def run_book_appointment(date: str, name: str) -> str:
    try:
        start = parse_tool_date(date)
    except (ValueError, TypeError):
        log.warn("tools", "Invalid date for booking", date=date)
        return json.dumps({"error": f"Invalid date: {date}. Use ISO format (YYYY-MM-DDTHH:MM)."})

    session = get_session()
    if session.store.book_from_voice(start, name) is None:
        return json.dumps({"error": "Booking failed."})
    log.info("tools", "Appointment booked", date=start.isoformat(), name=name)
    return BOOKING_CONFIRMED


@tool
def check_availability(date: str) -> str:
    """Checks if the professional is free at a specific date and time.

    Args:
        date: The date and time to check (ISO format or YYYY-MM-DD HH:MM).

    Returns:
        JSON with "available" and a short bilingual message.
    """
    return run_check_availability(date)


@tool
def book_appointment(date: str, name: str) -> str:
    """Books a new appointment for a client. Check availability first.

    Args:
        date: The date and time (ISO format).
        name: Name of the client.

    Returns:
        Confirmation message.
    """
    return run_book_appointment(date, name)


TOOL_HANDLERS = {
    "check_availability": run_check_availability,
    "book_appointment": run_book_appointment,
}

tools = [check_availability, book_appointment]
