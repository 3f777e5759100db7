"""Interface for the per-user profile repository."""

from abc import ABC, abstractmethod
from typing import Optional

from ...domain.settings import AppSettings


class IProfileRepository(ABC):
    """Contract for the user profile document (settings, language, onboarding)."""

    @abstractmethod
    def get_settings(self, user_id: str) -> Optional[AppSettings]:
        """Gets stored settings, or None if the user never saved any."""
        pass

    @abstractmethod
    def save_settings(self, user_id: str, settings: AppSettings) -> None:
        """Stores the settings."""
        pass

    @abstractmethod
    def get_value(self, user_id: str, key: str, default: Optional[str] = None) -> Optional[str]:
        """Gets a scalar profile value by key."""
        pass

    @abstractmethod
    def set_value(self, user_id: str, key: str, value) -> None:
        """Sets a scalar profile value."""
        pass
