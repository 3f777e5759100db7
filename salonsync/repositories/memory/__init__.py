"""
In-memory backend with live subscriptions, used offline and in tests
"""
from .database import InMemoryDatabase
from .factory import create_memory_container

__all__ = ["InMemoryDatabase", "create_memory_container"]
