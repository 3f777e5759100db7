"""In-memory implementation of ProfileRepository."""

from typing import Optional

from ..interfaces.profile_repository import IProfileRepository
from ...constants.defaults import ProfileKeys
from ...domain.settings import AppSettings
from .database import InMemoryDatabase


class MemoryProfileRepository(IProfileRepository):
    """In-memory implementation of profile repository."""

    def __init__(self, database: InMemoryDatabase):
        self._db = database

    def get_settings(self, user_id: str) -> Optional[AppSettings]:
        data = self._db.profile(user_id).get(ProfileKeys.SETTINGS)
        return AppSettings.from_dict(data) if data else None

    def save_settings(self, user_id: str, settings: AppSettings) -> None:
        self._db.profile(user_id)[ProfileKeys.SETTINGS] = settings.to_dict()

    def get_value(self, user_id: str, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._db.profile(user_id).get(key, default)

    def set_value(self, user_id: str, key: str, value) -> None:
        self._db.profile(user_id)[key] = value
