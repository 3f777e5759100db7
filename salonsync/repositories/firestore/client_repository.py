"""Firestore implementation of ClientRepository."""

from ..interfaces.client_repository import ClientsListener, IClientRepository, Unsubscribe
from ...domain.client import Client
from ...config import logger as log
from .connection import FirestoreConnection

COLLECTION = "clients"


def _to_document(client: Client) -> dict:
    doc = {"name": client.name, "phone": client.phone}
    if client.notes:
        doc["notes"] = client.notes
    return doc


def _from_snapshot(snapshot) -> Client:
    return Client.from_dict({**snapshot.to_dict(), "id": snapshot.id})


class FirestoreClientRepository(IClientRepository):
    """Firestore implementation of client repository."""

    def __init__(self, connection: FirestoreConnection):
        self._conn = connection

    def add(self, user_id: str, client: Client) -> Client:
        log.debug("repo.client", "add", user_id=user_id, name=client.name)
        _, ref = self._conn.user_collection(user_id, COLLECTION).add(_to_document(client))
        return Client(id=ref.id, name=client.name, phone=client.phone, notes=client.notes)

    def list_all(self, user_id: str) -> list[Client]:
        log.debug("repo.client", "list_all", user_id=user_id)
        results = [
            _from_snapshot(doc) for doc in self._conn.user_collection(user_id, COLLECTION).stream()
        ]
        log.debug("repo.client", "list_all result", count=len(results))
        return results

    def watch(self, user_id: str, listener: ClientsListener) -> Unsubscribe:
        log.debug("repo.client", "watch", user_id=user_id)

        def on_snapshot(docs, changes, read_time):
            listener([_from_snapshot(doc) for doc in docs])

        watch = self._conn.user_collection(user_id, COLLECTION).on_snapshot(on_snapshot)
        return watch.unsubscribe
