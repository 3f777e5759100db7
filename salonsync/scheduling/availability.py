"""Availability check used by manual booking and the voice tools.

A candidate start is free when no existing appointment starts within the
buffer window of it. Durations are not taken into account: a long service
that started more than the buffer before the candidate is not a conflict.
The check is advisory and never blocks a write.
"""

from datetime import datetime, timedelta
from typing import Iterable, Optional

from ..constants.defaults import Scheduling
from ..domain.appointment import Appointment

BUFFER_WINDOW = timedelta(minutes=Scheduling.BUFFER_MINUTES)


def find_conflict(
    appointments: Iterable[Appointment],
    candidate: datetime,
    exclude_id: Optional[str] = None,
) -> Optional[Appointment]:
    """Returns the first appointment starting strictly within the buffer of candidate.

    Args:
        appointments: Current appointment snapshot.
        candidate: Proposed start time.
        exclude_id: Appointment to ignore (the one being edited).
    """
    for appointment in appointments:
        if exclude_id and appointment.id == exclude_id:
            continue
        if abs(appointment.start_time - candidate) < BUFFER_WINDOW:
            return appointment
    return None


def is_available(
    appointments: Iterable[Appointment],
    candidate: datetime,
    exclude_id: Optional[str] = None,
) -> bool:
    """Checks whether candidate is free under the buffer-window rule."""
    return find_conflict(appointments, candidate, exclude_id) is None
