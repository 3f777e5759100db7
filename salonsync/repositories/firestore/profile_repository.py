"""Firestore implementation of ProfileRepository."""

from typing import Optional

from ..interfaces.profile_repository import IProfileRepository
from ...constants.defaults import ProfileKeys
from ...domain.settings import AppSettings
from ...config import logger as log
from .connection import FirestoreConnection


class FirestoreProfileRepository(IProfileRepository):
    """Stores settings and scalar values on the users/{uid} document."""

    def __init__(self, connection: FirestoreConnection):
        self._conn = connection

    def _data(self, user_id: str) -> dict:
        snapshot = self._conn.user_document(user_id).get()
        if not snapshot.exists:
            return {}
        return snapshot.to_dict() or {}

    def get_settings(self, user_id: str) -> Optional[AppSettings]:
        data = self._data(user_id).get(ProfileKeys.SETTINGS)
        log.debug("repo.profile", "get_settings", user_id=user_id, found=data is not None)
        return AppSettings.from_dict(data) if data else None

    def save_settings(self, user_id: str, settings: AppSettings) -> None:
        log.debug("repo.profile", "save_settings", user_id=user_id)
        self._conn.user_document(user_id).set(
            {ProfileKeys.SETTINGS: settings.to_dict()}, merge=True
        )

    def get_value(self, user_id: str, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._data(user_id).get(key, default)

    def set_value(self, user_id: str, key: str, value) -> None:
        self._conn.user_document(user_id).set({key: value}, merge=True)
