"""Environment variables configuration."""

import os
from typing import Optional


def get_agent_name() -> str:
    """Returns the voice receptionist name from environment variable."""
    return os.getenv("AGENT_NAME", "Sync")


def get_gemini_api_key() -> Optional[str]:
    """Returns the Gemini API key, accepting the common variable names."""
    return (
        os.getenv("GEMINI_API_KEY")
        or os.getenv("GOOGLE_API_KEY")
        or os.getenv("API_KEY")
    )


def get_text_model() -> str:
    return os.getenv("SALONSYNC_TEXT_MODEL", "gemini-2.5-flash")


def get_live_model() -> str:
    return os.getenv(
        "SALONSYNC_LIVE_MODEL", "gemini-2.5-flash-native-audio-preview-09-2025"
    )


def get_ai_temperature() -> float:
    return float(os.getenv("SALONSYNC_AI_TEMPERATURE", "0.7"))


def get_firebase_project_id() -> Optional[str]:
    return os.getenv("FIREBASE_PROJECT_ID")


def get_firebase_credentials_path() -> Optional[str]:
    """Returns the service account file path, if one is configured."""
    return os.getenv("FIREBASE_CREDENTIALS_PATH") or os.getenv(
        "GOOGLE_APPLICATION_CREDENTIALS"
    )


def get_firebase_web_api_key() -> Optional[str]:
    """Returns the web API key used for email/password sign-in."""
    return os.getenv("FIREBASE_WEB_API_KEY")


def get_backend() -> str:
    """Returns the repository backend: 'firestore' or 'memory'."""
    return os.getenv("SALONSYNC_BACKEND", "firestore").lower()
