"""View and navigation state of the application shell.

``AppState`` owns everything the screens render from: the signed-in user,
the live schedule, preferences, the current view and date, the appointment
modal and the voice overlay with its wake word listener. Rendering reads
derived values (day layout, month grid, services) on demand, so changing a
preference takes effect on the next render without touching stored appointments.
"""

from datetime import date, datetime
from enum import Enum
from typing import Callable, Optional

from ..auth.client import FirebaseAuthClient
from ..calendar.dashboard import next_appointment, next_day, previous_day, todays_appointments
from ..calendar.day_view import DayLayout, build_day_layout, display_client_name
from ..calendar.month_view import MonthGrid, build_month, shift_month
from ..config import logger as log
from ..constants.defaults import ProfileKeys, SettingsDefaults
from ..constants.translations import LANGUAGES, t
from ..container import Container
from ..domain.appointment import Appointment
from ..domain.client import Client
from ..domain.service import Service
from ..domain.settings import AppSettings
from ..domain.user import AuthUser
from ..models.forms import AppointmentForm, BusinessHoursForm, ClientForm, DurationOverrideForm
from ..scheduling.availability import is_available
from ..scheduling.catalog import find_service, resolve_services
from ..session import SalonSession, reset_session, set_session
from ..store import Alert, Confirm, LiveSchedule, SalonStore
from ..voice.wake_word import WakeWordListener


class ViewMode(str, Enum):
    DASHBOARD = "DASHBOARD"
    MONTH = "MONTH"
    CLIENTS = "CLIENTS"
    SETTINGS = "SETTINGS"


class AppState:
    """State holder shared by all screens."""

    def __init__(
        self,
        container: Container,
        auth: FirebaseAuthClient,
        alert: Alert,
        confirm: Optional[Confirm] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._container = container
        self._alert = alert
        self._confirm = confirm
        self._clock = clock
        self.auth = auth
        self.live = LiveSchedule(container)
        self.store: Optional[SalonStore] = None
        self.user: Optional[AuthUser] = None

        self.lang: str = SettingsDefaults.LANGUAGE
        self.settings = AppSettings()
        self.has_onboarded = False
        self.view = ViewMode.DASHBOARD
        self.current_date: date = clock().date()

        self.modal: Optional[AppointmentForm] = None
        self.voice_active = False
        self.wake = WakeWordListener(self.open_voice, self.lang, self.settings.wake_word_enabled)

        self._unsubscribe_auth = auth.on_auth_state_changed(self._on_auth_changed)

    # --- Auth ---

    def _on_auth_changed(self, user: Optional[AuthUser]) -> None:
        self.user = user
        if user is None:
            self.live.stop()
            self.store = None
            self.modal = None
            self.close_voice()
            reset_session()
            return

        profiles = self._container.profiles
        self.settings = profiles.get_settings(user.uid) or AppSettings()
        stored_lang = profiles.get_value(user.uid, ProfileKeys.LANGUAGE)
        if stored_lang in LANGUAGES:
            self.lang = stored_lang
        self.has_onboarded = bool(profiles.get_value(user.uid, ProfileKeys.HAS_ONBOARDED, False))
        self.wake.lang = self.lang
        self.wake.enabled = self.settings.wake_word_enabled

        self.live.start(user.uid)
        self.store = SalonStore(
            self._container, user.uid, self.live, self._alert, self._confirm, self.lang
        )
        self._publish_session()
        log.info("ui", "Signed in", uid=user.uid, onboarded=self.has_onboarded)

    def _publish_session(self) -> None:
        if self.user is None or self.store is None:
            return
        set_session(
            SalonSession(
                user=self.user,
                store=self.store,
                live=self.live,
                settings=self.settings,
                lang=self.lang,
            )
        )

    def close(self) -> None:
        self._unsubscribe_auth()
        self.live.stop()
        reset_session()

    # --- Derived data ---

    @property
    def strings(self) -> dict:
        return t(self.lang)

    @property
    def appointments(self) -> list[Appointment]:
        return self.live.appointments

    @property
    def clients(self) -> list[Client]:
        return self.live.clients

    @property
    def services(self) -> list[Service]:
        return resolve_services(self.settings)

    def day_layout(self) -> DayLayout:
        return build_day_layout(
            self.current_date,
            self.appointments,
            self.services,
            self.clients,
            self.settings.business_start_hour,
            self.settings.business_end_hour,
            now=self._clock(),
            guest_label=self.strings["guest"],
            general_label=self.strings["general"],
        )

    def month_grid(self) -> MonthGrid:
        return build_month(self.current_date.year, self.current_date.month, self.appointments)

    def todays_count(self) -> int:
        return len(todays_appointments(self.appointments, self._clock()))

    def next_client(self) -> Optional[Appointment]:
        return next_appointment(self.appointments, self._clock())

    def next_client_label(self) -> Optional[str]:
        """Next client today as "HH:MM name · service", with the day view fallbacks."""
        appointment = self.next_client()
        if appointment is None:
            return None
        name = display_client_name(appointment, self.clients, self.strings["guest"])
        service = find_service(self.services, appointment.service_id)
        service_name = service.name if service else self.strings["general"]
        return f"{appointment.time_label} {name} · {service_name}"

    def is_slot_free(self, start: datetime, exclude_id: Optional[str] = None) -> bool:
        return is_available(self.appointments, start, exclude_id)

    # --- Navigation ---

    def set_view(self, view: ViewMode) -> None:
        self.view = view

    def next_day(self) -> None:
        self.current_date = next_day(self.current_date)

    def previous_day(self) -> None:
        self.current_date = previous_day(self.current_date)

    def go_to_today(self) -> None:
        self.current_date = self._clock().date()

    def shift_month(self, delta: int) -> None:
        self.current_date = shift_month(self.current_date, delta)

    def select_day(self, day: date) -> None:
        """Month view tap: open the day on the dashboard."""
        self.current_date = day
        self.view = ViewMode.DASHBOARD

    # --- Preferences ---

    def set_language(self, lang: str) -> None:
        if lang not in LANGUAGES:
            raise ValueError(f"Unsupported language: {lang}")
        self.lang = lang
        self.wake.lang = lang
        if self.store is not None:
            self.store.lang = lang
        self._persist_value(ProfileKeys.LANGUAGE, lang)
        self._publish_session()

    def complete_onboarding(self, lang: str, profession: str, specialization: Optional[str] = None) -> None:
        """Stores the onboarding choices; specialization only applies to hair."""
        self.set_language(lang)
        changes = {"profession": profession}
        if profession == "hair" and specialization:
            changes["specialization"] = specialization
        self.update_settings(**changes)
        self.has_onboarded = True
        self._persist_value(ProfileKeys.HAS_ONBOARDED, True)

    def update_settings(self, **changes) -> AppSettings:
        """Replaces settings with an updated copy and persists it."""
        self.settings = self.settings.with_changes(**changes)
        self.wake.enabled = self.settings.wake_word_enabled
        self._persist_settings()
        return self.settings

    def set_theme(self, theme: str) -> None:
        self.update_settings(theme=theme)

    def toggle_wake_word(self) -> bool:
        self.update_settings(wake_word_enabled=not self.settings.wake_word_enabled)
        return self.settings.wake_word_enabled

    def set_business_hours(self, start_hour: int, end_hour: int) -> None:
        """
        Raises:
            ValidationError: If an hour is outside 0-23.
        """
        form = BusinessHoursForm(business_start_hour=start_hour, business_end_hour=end_hour)
        self.update_settings(
            business_start_hour=form.business_start_hour,
            business_end_hour=form.business_end_hour,
        )

    def set_duration_override(self, service_id: str, minutes: int) -> None:
        form = DurationOverrideForm(service_id=service_id, minutes=minutes)
        self.settings = self.settings.with_override(form.service_id, form.minutes)
        self._persist_settings()

    def _persist_settings(self) -> None:
        if self.user is not None:
            try:
                self._container.profiles.save_settings(self.user.uid, self.settings)
            except Exception as e:
                log.error("ui", "Failed to save settings", error=str(e))
                self._alert(self.strings["saveError"])
        self._publish_session()

    def _persist_value(self, key: str, value) -> None:
        if self.user is None:
            return
        try:
            self._container.profiles.set_value(self.user.uid, key, value)
        except Exception as e:
            log.error("ui", "Failed to save profile value", key=key, error=str(e))

    # --- Appointment modal ---

    def open_new_appointment(self, slot: Optional[datetime] = None) -> AppointmentForm:
        """Opens the modal for a slot, or for the current date at the current time."""
        if slot is None:
            now = self._clock()
            slot = datetime.combine(self.current_date, now.time())
        self.modal = AppointmentForm.for_new(slot)
        return self.modal

    def open_edit_appointment(self, appointment_id: str) -> Optional[AppointmentForm]:
        appointment = next((a for a in self.appointments if a.id == appointment_id), None)
        if appointment is None:
            return None
        self.modal = AppointmentForm.for_edit(appointment)
        return self.modal

    def close_modal(self) -> None:
        self.modal = None

    def save_modal(self) -> Optional[Appointment]:
        """Saves the open form; the modal closes whether or not the write succeeds."""
        if self.modal is None or self.store is None:
            return None
        appointment = self.modal.to_appointment(self.clients)
        self.modal = None
        return self.store.save_appointment(appointment)

    def delete_modal(self) -> bool:
        if self.modal is None or not self.modal.is_edit or self.store is None:
            return False
        deleted = self.store.delete_appointment(self.modal.id)
        if deleted:
            self.modal = None
        return deleted

    # --- Clients ---

    def search_clients(self, query: str) -> list[Client]:
        return [c for c in self.clients if c.matches(query)]

    def add_client(self, name: str, phone: str = "", notes: Optional[str] = None) -> Optional[Client]:
        """
        Raises:
            ValidationError: If the name is empty.
        """
        if self.store is None:
            return None
        form = ClientForm(name=name, phone=phone, notes=notes)
        return self.store.add_client(form.to_client())

    # --- Voice overlay ---

    def hear(self, transcript: str) -> bool:
        """Feeds a recognizer transcript; True when the wake word opened the overlay."""
        return self.wake.feed(transcript)

    def open_voice(self) -> None:
        self.voice_active = True
        self.wake.overlay_active = True

    def close_voice(self) -> None:
        """Dismisses the overlay; the wake word listens again."""
        self.voice_active = False
        self.wake.overlay_active = False
