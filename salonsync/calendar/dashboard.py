"""Dashboard helpers: day navigation, today's count and the next client."""

from datetime import date, datetime, timedelta
from typing import Optional

from ..domain.appointment import Appointment


def next_day(current: date) -> date:
    return current + timedelta(days=1)


def previous_day(current: date) -> date:
    return current - timedelta(days=1)


def is_today(day: date, now: Optional[datetime] = None) -> bool:
    return day == (now or datetime.now()).date()


def todays_appointments(
    appointments: list[Appointment], now: Optional[datetime] = None
) -> list[Appointment]:
    today = (now or datetime.now()).date()
    return [a for a in appointments if a.is_on(today)]


def next_appointment(
    appointments: list[Appointment], now: Optional[datetime] = None
) -> Optional[Appointment]:
    """Soonest appointment later today, if any."""
    now = now or datetime.now()
    upcoming = [a for a in todays_appointments(appointments, now) if a.start_time > now]
    return min(upcoming, key=lambda a: a.start_time, default=None)


def upcoming_appointments(
    appointments: list[Appointment], now: Optional[datetime] = None, limit: int = 5
) -> list[Appointment]:
    """Future appointments in start order, used by the assistant screen."""
    now = now or datetime.now()
    future = sorted((a for a in appointments if a.start_time > now), key=lambda a: a.start_time)
    return future[:limit]
