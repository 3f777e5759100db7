"""Service catalog selection and appointment durations."""

from typing import Optional

from ..constants.catalog import (
    SERVICES_COSMETICS,
    SERVICES_MEN,
    SERVICES_NAILS,
    SERVICES_WOMEN,
)
from ..constants.defaults import Scheduling
from ..domain.appointment import Appointment
from ..domain.service import Service
from ..domain.settings import AppSettings


def base_catalog(settings: AppSettings) -> list[dict]:
    """Picks the fixed catalog for the profession (and, for hair, the specialization)."""
    if settings.profession == "nails":
        return SERVICES_NAILS
    if settings.profession == "cosmetics":
        return SERVICES_COSMETICS
    if settings.specialization == "men":
        return SERVICES_MEN
    if settings.specialization == "women":
        return SERVICES_WOMEN
    return SERVICES_MEN + SERVICES_WOMEN


def resolve_services(settings: AppSettings) -> list[Service]:
    """Returns the active services with per-salon duration overrides applied.

    An override of 0 is treated as unset and keeps the catalog duration.
    """
    overrides = settings.service_duration_overrides
    return [
        Service.from_dict({**item, "duration": overrides.get(item["id"]) or item["duration"]})
        for item in base_catalog(settings)
    ]


def find_service(services: list[Service], service_id: Optional[str]) -> Optional[Service]:
    if not service_id:
        return None
    return next((s for s in services if s.id == service_id), None)


def appointment_duration(appointment: Appointment, services: list[Service]) -> int:
    """Derives the duration of an appointment from its service, else the fallback."""
    service = find_service(services, appointment.service_id)
    return (service.duration if service else 0) or Scheduling.FALLBACK_DURATION_MINUTES
