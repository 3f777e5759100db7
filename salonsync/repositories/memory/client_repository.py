"""In-memory implementation of ClientRepository."""

from ..interfaces.client_repository import ClientsListener, IClientRepository, Unsubscribe
from ...domain.client import Client
from ...config import logger as log
from .database import InMemoryDatabase

COLLECTION = "clients"


class MemoryClientRepository(IClientRepository):
    """In-memory implementation of client repository."""

    def __init__(self, database: InMemoryDatabase):
        self._db = database

    def add(self, user_id: str, client: Client) -> Client:
        log.debug("repo.client", "add", user_id=user_id, name=client.name)
        data = client.to_dict()
        data.pop("id")
        client_id = self._db.insert(user_id, COLLECTION, data)
        return Client.from_dict({**data, "id": client_id})

    def list_all(self, user_id: str) -> list[Client]:
        return [Client.from_dict(doc) for doc in self._db.documents(user_id, COLLECTION)]

    def watch(self, user_id: str, listener: ClientsListener) -> Unsubscribe:
        log.debug("repo.client", "watch", user_id=user_id)
        return self._db.listen(
            user_id,
            COLLECTION,
            lambda docs: listener([Client.from_dict(doc) for doc in docs]),
        )
