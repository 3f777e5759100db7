"""Appointment entity - represents a booked start time."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass
class Appointment:
    """A booking at a single start instant.

    There is no end time: the duration is derived from the referenced
    service when the calendar is rendered.
    """

    id: str
    client_id: str
    start_time: datetime
    client_name: Optional[str] = None
    service_id: Optional[str] = None
    notes: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Appointment":
        """Creates an Appointment from a dictionary."""
        start_time = data["start_time"]
        if isinstance(start_time, str):
            start_time = datetime.fromisoformat(start_time)

        return cls(
            id=data["id"],
            client_id=data.get("client_id") or "",
            start_time=start_time,
            client_name=data.get("client_name"),
            service_id=data.get("service_id"),
            notes=data.get("notes"),
        )

    def to_dict(self) -> dict:
        """Converts to dictionary."""
        return {
            "id": self.id,
            "client_id": self.client_id,
            "start_time": self.start_time,
            "client_name": self.client_name,
            "service_id": self.service_id,
            "notes": self.notes,
        }

    def is_on(self, day: date) -> bool:
        """Checks if the appointment starts on the given calendar day."""
        return self.start_time.date() == day

    @property
    def time_label(self) -> str:
        """Start time formatted as HH:MM."""
        return self.start_time.strftime("%H:%M")
