"""Day view layout: business-hour time grid and appointment blocks.

Positions are in pixels on a vertical scale of a fixed number of pixels
per minute, measured from the start of the business day.
"""

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional

from ..constants.defaults import Scheduling
from ..domain.appointment import Appointment
from ..domain.client import Client
from ..domain.service import Service
from ..scheduling.catalog import appointment_duration, find_service

DEFAULT_BLOCK_COLOR = "white"


@dataclass(frozen=True)
class TimeSlot:
    label: str
    hour: int
    minute: int

    def on(self, day: date) -> datetime:
        """The instant this slot represents on a given day."""
        return datetime.combine(day, time(self.hour, self.minute))


@dataclass(frozen=True)
class AppointmentBlock:
    appointment: Appointment
    top: float
    height: float
    client_name: str
    service_name: str
    color: str

    @property
    def time_label(self) -> str:
        return self.appointment.time_label


@dataclass(frozen=True)
class DayLayout:
    day: date
    height: float
    slots: list[TimeSlot]
    blocks: list[AppointmentBlock]
    now_offset: Optional[float]


def build_time_slots(start_hour: int, end_hour: int) -> list[TimeSlot]:
    """Half-hour slots from start to end; the closing hour only gets :00."""
    slots = []
    for hour in range(start_hour, end_hour + 1):
        slots.append(TimeSlot(f"{hour:02d}:00", hour, 0))
        if hour != end_hour:
            slots.append(TimeSlot(f"{hour:02d}:30", hour, 30))
    return slots


def grid_height(start_hour: int, end_hour: int) -> float:
    return (end_hour - start_hour + 1) * 60 * Scheduling.PIXELS_PER_MINUTE


def minutes_from_open(moment: datetime, start_hour: int) -> int:
    return (moment.hour - start_hour) * 60 + moment.minute


def appointments_on(appointments: list[Appointment], day: date) -> list[Appointment]:
    return [a for a in appointments if a.is_on(day)]


def block_position(
    appointment: Appointment, services: list[Service], start_hour: int
) -> tuple[float, float]:
    """Returns (top, height) in pixels for an appointment block."""
    top = minutes_from_open(appointment.start_time, start_hour) * Scheduling.PIXELS_PER_MINUTE
    height = appointment_duration(appointment, services) * Scheduling.PIXELS_PER_MINUTE
    return top, height


def display_client_name(
    appointment: Appointment, clients: list[Client], fallback: str = "Vendég"
) -> str:
    """Typed name first, then the registered client's name, then the fallback."""
    if appointment.client_name:
        return appointment.client_name
    client = next((c for c in clients if c.id == appointment.client_id), None)
    return client.name if client else fallback


def now_indicator_offset(now: datetime, day: date, start_hour: int) -> Optional[float]:
    """Pixel offset of the current-time line, shown only when viewing today."""
    if now.date() != day:
        return None
    return minutes_from_open(now, start_hour) * Scheduling.PIXELS_PER_MINUTE


def build_day_layout(
    day: date,
    appointments: list[Appointment],
    services: list[Service],
    clients: list[Client],
    start_hour: int,
    end_hour: int,
    now: Optional[datetime] = None,
    guest_label: str = "Vendég",
    general_label: str = "General",
) -> DayLayout:
    blocks = []
    for appointment in sorted(appointments_on(appointments, day), key=lambda a: a.start_time):
        service = find_service(services, appointment.service_id)
        top, height = block_position(appointment, services, start_hour)
        blocks.append(
            AppointmentBlock(
                appointment=appointment,
                top=top,
                height=height,
                client_name=display_client_name(appointment, clients, guest_label),
                service_name=service.name if service else general_label,
                color=service.color if service else DEFAULT_BLOCK_COLOR,
            )
        )

    return DayLayout(
        day=day,
        height=grid_height(start_hour, end_hour),
        slots=build_time_slots(start_hour, end_hour),
        blocks=blocks,
        now_offset=now_indicator_offset(now or datetime.now(), day, start_hour),
    )
