"""Interface for appointment repository."""

from abc import ABC, abstractmethod
from typing import Callable

from ...domain.appointment import Appointment

AppointmentsListener = Callable[[list[Appointment]], None]
Unsubscribe = Callable[[], None]


class IAppointmentRepository(ABC):
    """Contract for the per-user appointments collection."""

    @abstractmethod
    def add(self, user_id: str, appointment: Appointment) -> Appointment:
        """Creates an appointment; returns it with the store-assigned id."""
        pass

    @abstractmethod
    def update(self, user_id: str, appointment_id: str, changes: dict) -> None:
        """Updates fields of an existing appointment (domain field names)."""
        pass

    @abstractmethod
    def delete(self, user_id: str, appointment_id: str) -> None:
        """Deletes an appointment."""
        pass

    @abstractmethod
    def list_all(self, user_id: str) -> list[Appointment]:
        """Gets all appointments of a user."""
        pass

    @abstractmethod
    def watch(self, user_id: str, listener: AppointmentsListener) -> Unsubscribe:
        """Subscribes to the collection; the listener receives the full list on every change."""
        pass
