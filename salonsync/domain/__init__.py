"""
Domain entities for SalonSync
"""
from .client import Client
from .appointment import Appointment
from .service import Service
from .settings import AppSettings
from .user import AuthUser

__all__ = [
    "Client",
    "Appointment",
    "Service",
    "AppSettings",
    "AuthUser",
]
