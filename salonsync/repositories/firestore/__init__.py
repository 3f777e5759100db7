"""
Firestore backend (firebase-admin)
"""
from .connection import FirestoreConnection
from .factory import create_firestore_container

__all__ = ["FirestoreConnection", "create_firestore_container"]
