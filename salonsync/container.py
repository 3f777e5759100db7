"""Process-wide holder of the repository backend.

The console sets it once at startup; screens and stores receive it
explicitly, tests build their own from the in-memory repositories.
"""

from dataclasses import dataclass
from typing import Optional

from .repositories.interfaces.appointment_repository import IAppointmentRepository
from .repositories.interfaces.client_repository import IClientRepository
from .repositories.interfaces.profile_repository import IProfileRepository


@dataclass
class Container:
    """Repositories of one backend (Firestore or in-memory)."""

    clients: IClientRepository
    appointments: IAppointmentRepository
    profiles: IProfileRepository


_container: Optional[Container] = None


def get_container() -> Container:
    """
    Raises:
        RuntimeError: If no backend was configured with set_container().
    """
    if _container is None:
        raise RuntimeError("No repository backend configured; call set_container() first.")
    return _container


def set_container(container: Container) -> None:
    global _container
    _container = container


def reset_container() -> None:
    global _container
    _container = None
