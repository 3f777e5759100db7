import pytest

from salonsync.container import Container, get_container, reset_container, set_container
from salonsync.domain.appointment import Appointment
from salonsync.domain.client import Client
from salonsync.repositories.memory.appointment_repository import MemoryAppointmentRepository
from salonsync.repositories.memory.client_repository import MemoryClientRepository
from salonsync.repositories.memory.profile_repository import MemoryProfileRepository
from salonsync.store import LiveSchedule, SalonStore

from conftest import USER_ID, at


class FailingAppointmentRepository(MemoryAppointmentRepository):
    def add(self, user_id, appointment):
        raise ConnectionError("offline")

    def update(self, user_id, appointment_id, changes):
        raise ConnectionError("offline")

    def delete(self, user_id, appointment_id):
        raise PermissionError("denied")


def failing_store(database, alerts, confirm=None, lang="hu"):
    container = Container(
        clients=MemoryClientRepository(database),
        appointments=FailingAppointmentRepository(database),
        profiles=MemoryProfileRepository(database),
    )
    live = LiveSchedule(container)
    live.start(USER_ID)
    return SalonStore(container, USER_ID, live, alerts.append, confirm, lang)


def test_live_view_receives_created_appointment(store, live):
    created = store.save_appointment(
        Appointment(id="", client_id="", start_time=at(10), client_name="Anna")
    )

    assert created.id
    assert [a.id for a in live.appointments] == [created.id]
    assert live.appointments[0].client_id == "temp"


def test_update_keeps_the_id_and_changes_fields(store, live):
    created = store.save_appointment(Appointment(id="", client_id="c1", start_time=at(10)))

    created.start_time = at(11)
    created.notes = "Festés is"
    store.save_appointment(created)

    assert len(live.appointments) == 1
    assert live.appointments[0].start_time == at(11)
    assert live.appointments[0].notes == "Festés is"


def test_add_client_appears_in_live_view(store, live):
    client = store.add_client(Client(id="", name="Kiss Anna", phone="+36301234567"))

    assert [c.id for c in live.clients] == [client.id]


def test_save_failure_alerts_once_and_returns_none(database, alerts):
    store = failing_store(database, alerts)

    result = store.save_appointment(Appointment(id="", client_id="", start_time=at(10)))

    assert result is None
    assert alerts == ["Hiba a mentés során."]


def test_update_failure_alerts_in_selected_language(database, alerts):
    store = failing_store(database, alerts, lang="en")

    store.save_appointment(Appointment(id="a1", client_id="c1", start_time=at(10)))

    assert alerts == ["Could not save the booking."]


def test_delete_requires_confirmation(container, live, alerts):
    prompts = []

    def decline(message):
        prompts.append(message)
        return False

    store = SalonStore(container, USER_ID, live, alerts.append, confirm=decline)
    created = store.save_appointment(Appointment(id="", client_id="", start_time=at(10)))

    assert store.delete_appointment(created.id) is False
    assert prompts == ["Biztosan törölni szeretnéd?"]
    assert len(live.appointments) == 1


def test_delete_failure_alerts(database, alerts):
    store = failing_store(database, alerts)

    assert store.delete_appointment("a1") is False
    assert alerts == ["Hiba a törlés során."]


def test_voice_booking_uses_placeholder_client(store, live):
    store.book_from_voice(at(14), "Szabó Éva")

    booked = live.appointments[0]
    assert booked.client_id == "voice_generated"
    assert booked.client_name == "Szabó Éva"
    assert booked.notes == "AI Voice Booking"


def test_check_availability_reads_the_live_snapshot(store):
    store.book_from_voice(at(14), "Szabó Éva")

    assert not store.check_availability(at(14, 15))
    assert store.check_availability(at(14, 30))


def test_stop_clears_snapshot_and_unsubscribes(store, live):
    store.save_appointment(Appointment(id="", client_id="", start_time=at(10)))
    live.stop()

    store.save_appointment(Appointment(id="", client_id="", start_time=at(11)))

    assert live.appointments == []
    assert live.user_id is None


def test_change_listeners_run_on_every_push(store, live):
    calls = []
    live.on_change(lambda: calls.append(len(live.appointments)))

    store.save_appointment(Appointment(id="", client_id="", start_time=at(10)))
    store.save_appointment(Appointment(id="", client_id="", start_time=at(12)))

    assert calls == [1, 2]


def test_global_container_lifecycle(container):
    set_container(container)
    assert get_container() is container

    reset_container()
    with pytest.raises(RuntimeError):
        get_container()
