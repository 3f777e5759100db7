from datetime import datetime

import pytest

from salonsync.calendar.day_view import (
    build_day_layout,
    build_time_slots,
    grid_height,
    now_indicator_offset,
)
from salonsync.domain.client import Client
from salonsync.domain.settings import AppSettings
from salonsync.scheduling.catalog import resolve_services

from conftest import DAY, appointment, at

SERVICES = resolve_services(AppSettings())


def test_slots_every_half_hour_with_closing_hour_only_on_the_hour():
    slots = build_time_slots(8, 20)

    assert len(slots) == 25
    assert [s.label for s in slots[:3]] == ["08:00", "08:30", "09:00"]
    assert slots[-1].label == "20:00"
    assert slots[-2].label == "19:30"


def test_slot_maps_to_an_instant_on_the_day():
    slot = build_time_slots(8, 9)[1]

    assert slot.on(DAY) == at(8, 30)


def test_grid_height_covers_the_closing_hour():
    assert grid_height(8, 20) == pytest.approx(13 * 60 * 1.6)


def test_block_position_and_height_follow_service_duration():
    layout = build_day_layout(
        DAY, [appointment(at(9, 30), service_id="w_color")], SERVICES, [], 8, 20, now=at(7)
    )

    block = layout.blocks[0]
    assert block.top == pytest.approx(90 * 1.6)
    assert block.height == pytest.approx(120 * 1.6)
    assert block.service_name == "Festés / Coloring"
    assert block.color == "red"


def test_unknown_service_renders_thirty_minutes_as_general():
    layout = build_day_layout(DAY, [appointment(at(8))], SERVICES, [], 8, 20, now=at(7))

    block = layout.blocks[0]
    assert block.top == pytest.approx(0)
    assert block.height == pytest.approx(48)
    assert block.service_name == "General"


def test_client_name_fallbacks():
    clients = [Client(id="c1", name="Kiss Anna")]
    appointments = [
        appointment(at(9), appointment_id="typed", client_name="Nagy Béla"),
        appointment(at(10), appointment_id="registered"),
        appointment(at(11), appointment_id="unknown", client_id="temp"),
    ]

    layout = build_day_layout(DAY, appointments, SERVICES, clients, 8, 20, now=at(7))

    assert [b.client_name for b in layout.blocks] == ["Nagy Béla", "Kiss Anna", "Vendég"]


def test_only_appointments_of_the_day_are_placed_in_start_order():
    other_day = datetime(2025, 3, 11, 9, 0)
    appointments = [
        appointment(at(12), appointment_id="late"),
        appointment(other_day, appointment_id="tomorrow"),
        appointment(at(9), appointment_id="early"),
    ]

    layout = build_day_layout(DAY, appointments, SERVICES, [], 8, 20, now=at(7))

    assert [b.appointment.id for b in layout.blocks] == ["early", "late"]


def test_now_indicator_only_on_today():
    assert now_indicator_offset(at(10, 15), DAY, 8) == pytest.approx(135 * 1.6)
    assert now_indicator_offset(datetime(2025, 3, 11, 10, 15), DAY, 8) is None
