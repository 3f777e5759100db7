"""
Form models for the SalonSync screens
"""
from .forms import AppointmentForm, BusinessHoursForm, ClientForm, DurationOverrideForm

__all__ = [
    "ClientForm",
    "AppointmentForm",
    "BusinessHoursForm",
    "DurationOverrideForm",
]
