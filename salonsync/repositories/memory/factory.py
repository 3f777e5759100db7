"""Factory for creating Container with the in-memory implementation."""

from typing import Optional

from ...container import Container
from .database import InMemoryDatabase
from .client_repository import MemoryClientRepository
from .appointment_repository import MemoryAppointmentRepository
from .profile_repository import MemoryProfileRepository


def create_memory_container(database: Optional[InMemoryDatabase] = None) -> Container:
    """Creates a Container backed by an in-process database.

    Args:
        database: Existing database to share. A new one is created if not given.

    Returns:
        Container: Configured with in-memory repositories.
    """
    database = database or InMemoryDatabase()

    return Container(
        clients=MemoryClientRepository(database),
        appointments=MemoryAppointmentRepository(database),
        profiles=MemoryProfileRepository(database),
    )
