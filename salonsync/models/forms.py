"""
Form models for the client, appointment and settings screens.
"""

from datetime import date, datetime, time
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..constants.defaults import ClientIds
from ..domain.appointment import Appointment
from ..domain.client import Client


class ClientForm(BaseModel):
    """
    New client form. The name is the only required field.
    """

    name: str = Field(..., min_length=1, description="Display name")
    phone: str = Field(default="", description="Phone number")
    notes: Optional[str] = Field(default=None, description="Free-text notes")

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name is required")
        return value

    def to_client(self, client_id: str = "") -> Client:
        return Client(
            id=client_id,
            name=self.name,
            phone=self.phone.strip(),
            notes=self.notes or None,
        )


class AppointmentForm(BaseModel):
    """
    Appointment modal state: either a new booking or an edit of an
    existing one (``id`` set).
    """

    id: Optional[str] = Field(None, description="Set when editing")
    client_id: str = Field(default="", description="Selected registered client")
    client_name: str = Field(default="", description="Typed client name")
    service_id: str = Field(default="", description="Selected service, optional")
    appointment_date: date
    appointment_time: time
    notes: str = Field(default="")

    @classmethod
    def for_new(cls, initial: datetime) -> "AppointmentForm":
        """Empty form prefilled with a slot (or the current date)."""
        return cls(
            appointment_date=initial.date(),
            appointment_time=initial.time().replace(second=0, microsecond=0),
        )

    @classmethod
    def for_edit(cls, appointment: Appointment) -> "AppointmentForm":
        """Form prefilled from an existing appointment."""
        return cls(
            id=appointment.id,
            client_id=appointment.client_id,
            client_name=appointment.client_name or "",
            service_id=appointment.service_id or "",
            appointment_date=appointment.start_time.date(),
            appointment_time=appointment.start_time.time().replace(second=0, microsecond=0),
            notes=appointment.notes or "",
        )

    @property
    def is_edit(self) -> bool:
        return self.id is not None

    def select_client(self, client: Client) -> None:
        """Picks a registered client; its name replaces the typed one."""
        self.client_id = client.id
        self.client_name = client.name

    def start_time(self) -> datetime:
        return datetime.combine(self.appointment_date, self.appointment_time)

    def to_appointment(self, clients: list[Client]) -> Appointment:
        """Builds the appointment to save.

        The client name falls back to the selected client's name, then to
        "Unknown"; a missing client id becomes a placeholder id.
        """
        selected = next((c for c in clients if c.id == self.client_id), None)
        client_name = self.client_name or (selected.name if selected else "") or "Unknown"

        return Appointment(
            id=self.id or "",
            client_id=self.client_id or ClientIds.FORM,
            start_time=self.start_time(),
            client_name=client_name,
            service_id=self.service_id or None,
            notes=self.notes,
        )


class BusinessHoursForm(BaseModel):
    """Business-hours inputs of the settings screen."""

    business_start_hour: int = Field(..., ge=0, le=23)
    business_end_hour: int = Field(..., ge=0, le=23)


class DurationOverrideForm(BaseModel):
    """A per-service duration input of the settings screen."""

    service_id: str = Field(..., min_length=1)
    minutes: int = Field(..., ge=0)
