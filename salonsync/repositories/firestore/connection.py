"""Firestore connection management."""

from datetime import datetime
from typing import Optional

import firebase_admin
from firebase_admin import credentials, firestore

from ...config import logger as log
from ...config.env import get_firebase_credentials_path, get_firebase_project_id


def to_timestamp(value: datetime) -> datetime:
    """Converts a naive local datetime into an aware one for storage."""
    return value.astimezone() if value.tzinfo is None else value


def from_timestamp(value) -> datetime:
    """Converts a stored timestamp back into a naive local datetime."""
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    if value.tzinfo is not None:
        value = value.astimezone().replace(tzinfo=None)
    return value


class FirestoreConnection:
    """Initializes the Firebase Admin app once and hands out collection references."""

    def __init__(self, project_id: Optional[str] = None, credentials_path: Optional[str] = None):
        self.project_id = project_id or get_firebase_project_id()
        self.credentials_path = credentials_path or get_firebase_credentials_path()
        self._app = self._init_app()
        self._client = firestore.client(app=self._app)

    def _init_app(self):
        try:
            return firebase_admin.get_app()
        except ValueError:
            pass

        options = {"projectId": self.project_id} if self.project_id else None
        if self.credentials_path:
            cred = credentials.Certificate(self.credentials_path)
            log.info("firestore", "Initializing with service account", project=self.project_id)
        else:
            cred = credentials.ApplicationDefault()
            log.info("firestore", "Initializing with default credentials", project=self.project_id)
        return firebase_admin.initialize_app(cred, options)

    def user_collection(self, user_id: str, name: str):
        """Returns the reference of users/{user_id}/{name}."""
        return self._client.collection("users").document(user_id).collection(name)

    def user_document(self, user_id: str):
        """Returns the reference of the profile document users/{user_id}."""
        return self._client.collection("users").document(user_id)
