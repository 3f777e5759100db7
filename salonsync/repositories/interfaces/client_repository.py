"""Interface for client repository."""

from abc import ABC, abstractmethod
from typing import Callable

from ...domain.client import Client

ClientsListener = Callable[[list[Client]], None]
Unsubscribe = Callable[[], None]


class IClientRepository(ABC):
    """Contract for the per-user clients collection."""

    @abstractmethod
    def add(self, user_id: str, client: Client) -> Client:
        """Adds a client; returns it with the store-assigned id."""
        pass

    @abstractmethod
    def list_all(self, user_id: str) -> list[Client]:
        """Gets all clients of a user."""
        pass

    @abstractmethod
    def watch(self, user_id: str, listener: ClientsListener) -> Unsubscribe:
        """Subscribes to the collection; the listener receives the full list on every change."""
        pass
