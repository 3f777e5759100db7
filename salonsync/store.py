"""Store bridge and live view.

``LiveSchedule`` keeps the latest clients and appointments pushed by the
repositories' live queries. Every push replaces the whole list, so readers
always see a complete snapshot.

``SalonStore`` issues writes for one user. Writes are fire-and-forget: the
live view picks up successful changes through its subscription, and failures
are logged and reported once through the ``alert`` callback.
"""

from datetime import datetime
from typing import Callable, Optional

from .config import logger as log
from .constants.defaults import ClientIds
from .constants.translations import t
from .container import Container
from .domain.appointment import Appointment
from .domain.client import Client
from .scheduling.availability import is_available

Alert = Callable[[str], None]
Confirm = Callable[[str], bool]
ChangeListener = Callable[[], None]


class LiveSchedule:
    """Subscribed snapshot of a user's clients and appointments."""

    def __init__(self, container: Container):
        self._container = container
        self._unsubscribers: list[Callable[[], None]] = []
        self._listeners: list[ChangeListener] = []
        self.user_id: Optional[str] = None
        self.appointments: list[Appointment] = []
        self.clients: list[Client] = []

    def start(self, user_id: str) -> None:
        """Subscribes to both collections of user_id, replacing any previous subscription."""
        self.stop()
        self.user_id = user_id
        log.info("live", "Subscribing", user_id=user_id)
        self._unsubscribers = [
            self._container.appointments.watch(user_id, self._set_appointments),
            self._container.clients.watch(user_id, self._set_clients),
        ]

    def stop(self) -> None:
        """Cancels the subscriptions and clears the snapshot."""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        if self._unsubscribers:
            log.info("live", "Unsubscribed", user_id=self.user_id)
        self._unsubscribers = []
        self.user_id = None
        self.appointments = []
        self.clients = []
        self._changed()

    def on_change(self, listener: ChangeListener) -> None:
        self._listeners.append(listener)

    def _set_appointments(self, appointments: list[Appointment]) -> None:
        self.appointments = appointments
        self._changed()

    def _set_clients(self, clients: list[Client]) -> None:
        self.clients = clients
        self._changed()

    def _changed(self) -> None:
        for listener in self._listeners:
            listener()


class SalonStore:
    """Write operations of the signed-in operator."""

    def __init__(
        self,
        container: Container,
        user_id: str,
        live: LiveSchedule,
        alert: Alert,
        confirm: Optional[Confirm] = None,
        lang: str = "hu",
    ):
        self._container = container
        self.user_id = user_id
        self.live = live
        self._alert = alert
        self._confirm = confirm or (lambda message: True)
        self.lang = lang

    def add_client(self, client: Client) -> Optional[Client]:
        try:
            created = self._container.clients.add(self.user_id, client)
            log.info("store", "Client added", client_id=created.id)
            return created
        except Exception as e:
            log.error("store", "Error adding client", error=str(e))
            self._alert(t(self.lang)["saveError"])
            return None

    def save_appointment(self, appointment: Appointment) -> Optional[Appointment]:
        """Updates the appointment when it has an id, creates it otherwise."""
        try:
            if appointment.id:
                changes = appointment.to_dict()
                changes.pop("id")
                self._container.appointments.update(self.user_id, appointment.id, changes)
                log.info("store", "Appointment updated", appointment_id=appointment.id)
                return appointment

            new_appointment = Appointment(
                id="",
                client_id=appointment.client_id or ClientIds.MANUAL,
                start_time=appointment.start_time,
                client_name=appointment.client_name,
                service_id=appointment.service_id,
                notes=appointment.notes,
            )
            created = self._container.appointments.add(self.user_id, new_appointment)
            log.info("store", "Appointment created", appointment_id=created.id)
            return created
        except Exception as e:
            log.error("store", "Failed to save appointment", error=str(e))
            self._alert(t(self.lang)["saveError"])
            return None

    def delete_appointment(self, appointment_id: str) -> bool:
        """Deletes after the operator confirms; returns True when deleted."""
        if not self._confirm(t(self.lang)["deleteConfirm"]):
            return False
        try:
            self._container.appointments.delete(self.user_id, appointment_id)
            log.info("store", "Appointment deleted", appointment_id=appointment_id)
            return True
        except Exception as e:
            log.error("store", "Failed to delete appointment", error=str(e))
            self._alert(t(self.lang)["deleteError"])
            return False

    def book_from_voice(self, start_time: datetime, name: str) -> Optional[Appointment]:
        """Books an appointment requested by the voice agent for a by-name client."""
        return self.save_appointment(
            Appointment(
                id="",
                client_id=ClientIds.VOICE,
                start_time=start_time,
                client_name=name,
                notes="AI Voice Booking",
            )
        )

    def check_availability(self, start_time: datetime) -> bool:
        """Advisory buffer-window check against the live snapshot."""
        return is_available(self.live.appointments, start_time)
