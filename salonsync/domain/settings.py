"""AppSettings entity - per-salon preferences."""

from dataclasses import dataclass, field, replace
from typing import Literal

from ..constants.defaults import SettingsDefaults

Language = Literal["hu", "en", "ro"]
Specialization = Literal["women", "men", "unisex"]
Profession = Literal["hair", "nails", "cosmetics"]
Theme = Literal["dark", "light"]


@dataclass(frozen=True)
class AppSettings:
    """Business hours, catalog selection and display preferences.

    Instances are immutable; every change produces a new object so that
    rendering code never observes a half-updated settings value.
    """

    business_start_hour: int = SettingsDefaults.BUSINESS_START_HOUR
    business_end_hour: int = SettingsDefaults.BUSINESS_END_HOUR
    specialization: Specialization = SettingsDefaults.SPECIALIZATION
    profession: Profession = SettingsDefaults.PROFESSION
    default_duration: int = SettingsDefaults.DEFAULT_DURATION
    theme: Theme = SettingsDefaults.THEME
    wake_word_enabled: bool = SettingsDefaults.WAKE_WORD_ENABLED
    service_duration_overrides: dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> "AppSettings":
        """Creates AppSettings from a stored dictionary, filling defaults."""
        return cls(
            business_start_hour=int(
                data.get("business_start_hour", SettingsDefaults.BUSINESS_START_HOUR)
            ),
            business_end_hour=int(
                data.get("business_end_hour", SettingsDefaults.BUSINESS_END_HOUR)
            ),
            specialization=data.get("specialization", SettingsDefaults.SPECIALIZATION),
            profession=data.get("profession", SettingsDefaults.PROFESSION),
            default_duration=int(
                data.get("default_duration", SettingsDefaults.DEFAULT_DURATION)
            ),
            theme=data.get("theme", SettingsDefaults.THEME),
            wake_word_enabled=bool(
                data.get("wake_word_enabled", SettingsDefaults.WAKE_WORD_ENABLED)
            ),
            service_duration_overrides={
                k: int(v)
                for k, v in (data.get("service_duration_overrides") or {}).items()
            },
        )

    def to_dict(self) -> dict:
        """Converts to dictionary."""
        return {
            "business_start_hour": self.business_start_hour,
            "business_end_hour": self.business_end_hour,
            "specialization": self.specialization,
            "profession": self.profession,
            "default_duration": self.default_duration,
            "theme": self.theme,
            "wake_word_enabled": self.wake_word_enabled,
            "service_duration_overrides": dict(self.service_duration_overrides),
        }

    def with_changes(self, **changes) -> "AppSettings":
        """Returns a copy with the given fields replaced."""
        return replace(self, **changes)

    def with_override(self, service_id: str, minutes: int) -> "AppSettings":
        """Returns a copy with one service duration overridden."""
        overrides = dict(self.service_duration_overrides)
        overrides[service_id] = minutes
        return replace(self, service_duration_overrides=overrides)
