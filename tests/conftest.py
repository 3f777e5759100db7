"""Shared fixtures: an in-memory backend with a signed-in operator."""

from datetime import date, datetime

import httpx
import pytest

from salonsync.auth.client import FirebaseAuthClient
from salonsync.container import reset_container, set_container
from salonsync.domain.appointment import Appointment
from salonsync.domain.settings import AppSettings
from salonsync.domain.user import AuthUser
from salonsync.repositories.memory import InMemoryDatabase, create_memory_container
from salonsync.session import SalonSession, reset_session, set_session
from salonsync.store import LiveSchedule, SalonStore
from salonsync.ui.state import AppState

USER_ID = "user-1"
DAY = date(2025, 3, 10)


def at(hour: int, minute: int = 0, day: date = DAY) -> datetime:
    return datetime(day.year, day.month, day.day, hour, minute)


def appointment(start: datetime, service_id=None, appointment_id="a1", **fields) -> Appointment:
    return Appointment(
        id=appointment_id,
        client_id=fields.pop("client_id", "c1"),
        start_time=start,
        service_id=service_id,
        **fields,
    )


@pytest.fixture
def database():
    return InMemoryDatabase()


@pytest.fixture
def container(database):
    container = create_memory_container(database)
    set_container(container)
    yield container
    reset_container()


@pytest.fixture
def alerts():
    return []


@pytest.fixture
def live(container):
    live = LiveSchedule(container)
    live.start(USER_ID)
    yield live
    live.stop()


@pytest.fixture
def store(container, live, alerts):
    return SalonStore(container, USER_ID, live, alerts.append)


@pytest.fixture
def session(store, live):
    session = SalonSession(
        user=AuthUser(uid=USER_ID, email="salon@example.com"),
        store=store,
        live=live,
        settings=AppSettings(),
    )
    set_session(session)
    yield session
    reset_session()


def offline_auth():
    transport = httpx.MockTransport(lambda request: httpx.Response(500))
    return FirebaseAuthClient(api_key="test-key", http=httpx.Client(transport=transport))


@pytest.fixture
def app(container, alerts):
    """Application state signed in as USER_ID at 09:00 on DAY."""
    auth = offline_auth()
    state = AppState(container, auth, alerts.append, clock=lambda: at(9))
    auth.restore(AuthUser(uid=USER_ID, email="salon@example.com"))
    yield state
    state.close()
