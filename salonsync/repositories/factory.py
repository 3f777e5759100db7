"""Selects the repository backend for the application entry points."""

from typing import Optional

from ..config.env import get_backend
from ..container import Container
from .firestore.factory import create_firestore_container
from .memory.factory import create_memory_container


def create_container(backend: Optional[str] = None) -> Container:
    """Creates the Container for the configured backend ('firestore' or 'memory')."""
    backend = (backend or get_backend()).lower()
    if backend == "memory":
        return create_memory_container()
    if backend == "firestore":
        return create_firestore_container()
    raise ValueError(f"Unknown backend: {backend}")
