"""Active operator session shared by the assistant tools."""

from dataclasses import dataclass
from typing import Optional

from .domain.settings import AppSettings
from .domain.user import AuthUser
from .scheduling.catalog import resolve_services
from .store import LiveSchedule, SalonStore


@dataclass
class SalonSession:
    """The signed-in user together with their store, live view and preferences."""

    user: AuthUser
    store: SalonStore
    live: LiveSchedule
    settings: AppSettings
    lang: str = "hu"

    @property
    def services(self):
        return resolve_services(self.settings)


_session: Optional[SalonSession] = None


def get_session() -> SalonSession:
    """Returns the active session.

    Raises:
        RuntimeError: If nobody is signed in.
    """
    if _session is None:
        raise RuntimeError("No active session. Sign in before using the assistant.")
    return _session


def set_session(session: SalonSession) -> None:
    global _session
    _session = session


def reset_session() -> None:
    """Clears the active session (sign-out, tests)."""
    global _session
    _session = None
