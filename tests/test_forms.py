from datetime import date, time

import pytest
from pydantic import ValidationError

from salonsync.domain.client import Client
from salonsync.models.forms import (
    AppointmentForm,
    BusinessHoursForm,
    ClientForm,
    DurationOverrideForm,
)

from conftest import appointment, at


def test_client_name_is_required():
    with pytest.raises(ValidationError):
        ClientForm(name="   ")


def test_client_form_strips_name():
    client = ClientForm(name="  Kiss Anna ", phone=" 0630 ").to_client()

    assert client.name == "Kiss Anna"
    assert client.phone == "0630"
    assert client.notes is None


def test_new_form_is_prefilled_from_slot():
    form = AppointmentForm.for_new(at(9, 30))

    assert not form.is_edit
    assert form.appointment_date == date(2025, 3, 10)
    assert form.appointment_time == time(9, 30)


def test_typed_name_wins():
    form = AppointmentForm.for_new(at(9))
    form.client_name = "Nagy Béla"

    result = form.to_appointment([])

    assert result.client_name == "Nagy Béla"
    assert result.client_id == "temp_id"
    assert result.id == ""


def test_selected_client_name_is_used():
    anna = Client(id="c1", name="Kiss Anna")
    form = AppointmentForm.for_new(at(9))
    form.select_client(anna)

    result = form.to_appointment([anna])

    assert result.client_id == "c1"
    assert result.client_name == "Kiss Anna"


def test_missing_name_becomes_unknown():
    result = AppointmentForm.for_new(at(9)).to_appointment([])

    assert result.client_name == "Unknown"
    assert result.service_id is None


def test_edit_form_round_trips_the_appointment():
    original = appointment(at(16, 30), service_id="w_cut", appointment_id="a9", notes="rövid")

    form = AppointmentForm.for_edit(original)
    form.appointment_time = time(17, 0)
    result = form.to_appointment([])

    assert form.is_edit
    assert result.id == "a9"
    assert result.service_id == "w_cut"
    assert result.start_time == at(17)
    assert result.notes == "rövid"


def test_business_hours_are_bounded():
    assert BusinessHoursForm(business_start_hour=0, business_end_hour=23)

    with pytest.raises(ValidationError):
        BusinessHoursForm(business_start_hour=8, business_end_hour=24)


def test_negative_duration_is_rejected():
    with pytest.raises(ValidationError):
        DurationOverrideForm(service_id="w_cut", minutes=-5)
