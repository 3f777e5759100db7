"""Firestore implementation of AppointmentRepository.

Documents keep the field names of the SalonSync web client (clientId,
clientName, serviceId, startTime, notes) so both clients share data.
"""

from firebase_admin import firestore

from ..interfaces.appointment_repository import (
    AppointmentsListener,
    IAppointmentRepository,
    Unsubscribe,
)
from ...domain.appointment import Appointment
from ...config import logger as log
from .connection import FirestoreConnection, from_timestamp, to_timestamp

COLLECTION = "appointments"

FIELD_NAMES = {
    "client_id": "clientId",
    "client_name": "clientName",
    "service_id": "serviceId",
    "start_time": "startTime",
    "notes": "notes",
}


def _to_document(fields: dict, clear_missing: bool = False) -> dict:
    """Maps domain fields to document fields.

    None values are left out, or turned into field deletes when clear_missing
    is set (updates), so clearing a value in an edit removes it from the store.
    """
    doc = {}
    for name, value in fields.items():
        if name not in FIELD_NAMES:
            continue
        if value is None:
            if clear_missing:
                doc[FIELD_NAMES[name]] = firestore.DELETE_FIELD
            continue
        if name == "start_time":
            value = to_timestamp(value)
        doc[FIELD_NAMES[name]] = value
    return doc


def _from_snapshot(snapshot) -> Appointment:
    data = snapshot.to_dict()
    return Appointment(
        id=snapshot.id,
        client_id=data.get("clientId", ""),
        start_time=from_timestamp(data["startTime"]),
        client_name=data.get("clientName"),
        service_id=data.get("serviceId"),
        notes=data.get("notes"),
    )


class FirestoreAppointmentRepository(IAppointmentRepository):
    """Firestore implementation of appointment repository."""

    def __init__(self, connection: FirestoreConnection):
        self._conn = connection

    def add(self, user_id: str, appointment: Appointment) -> Appointment:
        log.debug("repo.appointment", "add", user_id=user_id, start=appointment.start_time)
        collection = self._conn.user_collection(user_id, COLLECTION)
        _, ref = collection.add(_to_document(appointment.to_dict()))
        return Appointment.from_dict({**appointment.to_dict(), "id": ref.id})

    def update(self, user_id: str, appointment_id: str, changes: dict) -> None:
        log.debug("repo.appointment", "update", appointment_id=appointment_id, fields=list(changes))
        ref = self._conn.user_collection(user_id, COLLECTION).document(appointment_id)
        ref.update(_to_document(changes, clear_missing=True))

    def delete(self, user_id: str, appointment_id: str) -> None:
        log.debug("repo.appointment", "delete", appointment_id=appointment_id)
        self._conn.user_collection(user_id, COLLECTION).document(appointment_id).delete()

    def list_all(self, user_id: str) -> list[Appointment]:
        log.debug("repo.appointment", "list_all", user_id=user_id)
        return [
            _from_snapshot(doc)
            for doc in self._conn.user_collection(user_id, COLLECTION).stream()
        ]

    def watch(self, user_id: str, listener: AppointmentsListener) -> Unsubscribe:
        log.debug("repo.appointment", "watch", user_id=user_id)

        def on_snapshot(docs, changes, read_time):
            appointments = [_from_snapshot(doc) for doc in docs]
            log.debug("repo.appointment", "snapshot", count=len(appointments))
            listener(appointments)

        watch = self._conn.user_collection(user_id, COLLECTION).on_snapshot(on_snapshot)
        return watch.unsubscribe
