"""In-memory implementation of AppointmentRepository."""

from ..interfaces.appointment_repository import (
    AppointmentsListener,
    IAppointmentRepository,
    Unsubscribe,
)
from ...domain.appointment import Appointment
from ...config import logger as log
from .database import InMemoryDatabase

COLLECTION = "appointments"


class MemoryAppointmentRepository(IAppointmentRepository):
    """In-memory implementation of appointment repository."""

    def __init__(self, database: InMemoryDatabase):
        self._db = database

    def add(self, user_id: str, appointment: Appointment) -> Appointment:
        log.debug("repo.appointment", "add", user_id=user_id, start=appointment.start_time)
        data = appointment.to_dict()
        data.pop("id")
        appointment_id = self._db.insert(user_id, COLLECTION, data)
        return Appointment.from_dict({**data, "id": appointment_id})

    def update(self, user_id: str, appointment_id: str, changes: dict) -> None:
        log.debug("repo.appointment", "update", appointment_id=appointment_id, fields=list(changes))
        changes = {k: v for k, v in changes.items() if k != "id"}
        self._db.update(user_id, COLLECTION, appointment_id, changes)

    def delete(self, user_id: str, appointment_id: str) -> None:
        log.debug("repo.appointment", "delete", appointment_id=appointment_id)
        self._db.remove(user_id, COLLECTION, appointment_id)

    def list_all(self, user_id: str) -> list[Appointment]:
        return [Appointment.from_dict(doc) for doc in self._db.documents(user_id, COLLECTION)]

    def watch(self, user_id: str, listener: AppointmentsListener) -> Unsubscribe:
        log.debug("repo.appointment", "watch", user_id=user_id)
        return self._db.listen(
            user_id,
            COLLECTION,
            lambda docs: listener([Appointment.from_dict(doc) for doc in docs]),
        )
