"""Factory for creating Container with the Firestore implementation."""

from typing import Optional

from ...container import Container
from .connection import FirestoreConnection
from .client_repository import FirestoreClientRepository
from .appointment_repository import FirestoreAppointmentRepository
from .profile_repository import FirestoreProfileRepository


def create_firestore_container(
    project_id: Optional[str] = None, credentials_path: Optional[str] = None
) -> Container:
    """Creates a Container with Firestore repository implementations.

    Args:
        project_id: Firebase project. Read from the environment if not given.
        credentials_path: Service account file. Application default credentials if not given.

    Returns:
        Container: Configured with Firestore repositories.
    """
    connection = FirestoreConnection(project_id, credentials_path)

    return Container(
        clients=FirestoreClientRepository(connection),
        appointments=FirestoreAppointmentRepository(connection),
        profiles=FirestoreProfileRepository(connection),
    )
