"""In-process document database with live listeners."""

import threading
import uuid
from collections import defaultdict
from typing import Callable


class InMemoryDatabase:
    """Per-user collections of documents, notifying listeners on every write.

    Listeners receive the whole collection, mirroring the live queries of
    the remote store.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._collections: dict[tuple[str, str], dict[str, dict]] = defaultdict(dict)
        self._listeners: dict[tuple[str, str], list[Callable[[list[dict]], None]]] = defaultdict(list)
        self._profiles: dict[str, dict] = defaultdict(dict)

    @staticmethod
    def new_id() -> str:
        return uuid.uuid4().hex[:20]

    def documents(self, user_id: str, name: str) -> list[dict]:
        with self._lock:
            return [dict(doc) for doc in self._collections[(user_id, name)].values()]

    def insert(self, user_id: str, name: str, document: dict) -> str:
        doc_id = self.new_id()
        with self._lock:
            self._collections[(user_id, name)][doc_id] = {**document, "id": doc_id}
        self._notify(user_id, name)
        return doc_id

    def update(self, user_id: str, name: str, doc_id: str, changes: dict) -> None:
        with self._lock:
            docs = self._collections[(user_id, name)]
            if doc_id not in docs:
                raise KeyError(f"No document {doc_id} in {name}")
            docs[doc_id] = {**docs[doc_id], **changes, "id": doc_id}
        self._notify(user_id, name)

    def remove(self, user_id: str, name: str, doc_id: str) -> None:
        with self._lock:
            self._collections[(user_id, name)].pop(doc_id, None)
        self._notify(user_id, name)

    def listen(self, user_id: str, name: str, listener: Callable[[list[dict]], None]) -> Callable[[], None]:
        """Registers a listener and delivers the current snapshot immediately."""
        key = (user_id, name)
        with self._lock:
            self._listeners[key].append(listener)
        listener(self.documents(user_id, name))

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners[key]:
                    self._listeners[key].remove(listener)

        return unsubscribe

    def profile(self, user_id: str) -> dict:
        with self._lock:
            return self._profiles[user_id]

    def _notify(self, user_id: str, name: str) -> None:
        with self._lock:
            listeners = list(self._listeners[(user_id, name)])
        snapshot = self.documents(user_id, name)
        for listener in listeners:
            listener(snapshot)
