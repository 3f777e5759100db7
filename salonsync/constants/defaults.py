"""Scheduling constants and settings defaults."""


class Scheduling:
    """Fixed values of the booking and calendar model."""

    # Two starts closer than this are reported as a conflict
    BUFFER_MINUTES = 30

    # Duration used when an appointment has no (known) service
    FALLBACK_DURATION_MINUTES = 30

    SLOT_MINUTES = 30
    PIXELS_PER_MINUTE = 1.6

    # Upper bounds (exclusive) of the light and moderate month-view buckets
    LIGHT_DAY_LIMIT = 4
    MODERATE_DAY_LIMIT = 8

    # Appointments sent to the schedule analysis prompt
    ANALYSIS_LIMIT = 10


class ClientIds:
    """Placeholder client ids for appointments without a registered client."""

    MANUAL = "temp"
    FORM = "temp_id"
    VOICE = "voice_generated"


class SettingsDefaults:
    """Default values for AppSettings."""

    BUSINESS_START_HOUR = 8
    BUSINESS_END_HOUR = 20
    SPECIALIZATION = "women"
    PROFESSION = "hair"
    DEFAULT_DURATION = 30
    THEME = "dark"
    WAKE_WORD_ENABLED = True
    LANGUAGE = "hu"


class ProfileKeys:
    """Field names of the per-user profile document."""

    SETTINGS = "settings"
    LANGUAGE = "language"
    HAS_ONBOARDED = "hasOnboarded"
