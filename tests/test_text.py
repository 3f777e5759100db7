import json
from datetime import datetime

from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.messages import AIMessage

from salonsync.assistant.prompts import format_appointment_time, get_receptionist_prompt
from salonsync.assistant.text import (
    analyze_schedule,
    analyze_upcoming,
    generate_client_message,
    reminder_for,
    schedule_summary,
)
from salonsync.domain.settings import AppSettings
from salonsync.scheduling.catalog import resolve_services

from conftest import appointment, at

SERVICES = resolve_services(AppSettings())


class RecordingLLM:
    def __init__(self, content="ok"):
        self.content = content
        self.prompts = []

    def invoke(self, messages):
        self.prompts.append(messages[-1].content)
        return AIMessage(content=self.content)


class BrokenLLM:
    def invoke(self, messages):
        raise ConnectionError("quota exceeded")


def test_reminder_returns_generated_text():
    llm = FakeListChatModel(responses=["Kedves Anna, várunk holnap 10:00-kor!"])

    text = generate_client_message("Anna", at(10), "Hajvágás", llm=llm)

    assert text == "Kedves Anna, várunk holnap 10:00-kor!"


def test_reminder_prompt_mentions_client_time_and_service():
    llm = RecordingLLM()

    generate_client_message("Anna", at(10, 30), "Festés", lang="hu", llm=llm)

    prompt = llm.prompts[0]
    assert "Anna" in prompt
    assert "március 10. 10:30" in prompt
    assert "Festés" in prompt


def test_empty_answer_uses_fallback():
    assert generate_client_message("Anna", at(10), "Festés", llm=RecordingLLM("  ")) == (
        "Nem sikerült az üzenet generálása."
    )


def test_provider_failure_uses_error_message():
    assert generate_client_message("Anna", at(10), "Festés", llm=BrokenLLM()) == (
        "Hiba történt az AI kapcsolatban."
    )
    assert analyze_schedule([], SERVICES, llm=BrokenLLM()) == "Hiba történt az elemzés során."


def test_analysis_fallback_in_english():
    assert analyze_schedule([], SERVICES, lang="en", llm=RecordingLLM("")) == (
        "Could not analyze the schedule."
    )


def test_schedule_summary_describes_each_appointment():
    rows = json.loads(
        schedule_summary(
            [appointment(at(9), service_id="w_cut"), appointment(at(11, 30), service_id="gone")],
            SERVICES,
        )
    )

    assert rows == [
        {"start": "09:00", "service": "Női hajvágás / Women's Cut", "duration": 60},
        {"start": "11:30", "service": "Ismeretlen", "duration": 0},
    ]


def test_analysis_covers_next_ten_future_appointments():
    appointments = [appointment(at(8), appointment_id="past")] + [
        appointment(datetime(2025, 3, 10 + i, 12), appointment_id=str(i)) for i in range(12)
    ]
    llm = RecordingLLM("- Ebédszünet 12 és 13 között")

    result = analyze_upcoming(appointments, SERVICES, now=at(10), llm=llm)

    assert result == "- Ebédszünet 12 és 13 között"
    schedule = llm.prompts[0].split("Mai beosztás:")[1]
    assert schedule.count('"start"') == 10
    assert '"08:00"' not in schedule


def test_reminder_for_stored_appointment_uses_fallback_names():
    llm = RecordingLLM()

    reminder_for(appointment(at(10)), SERVICES, llm=llm)

    assert "Vendég neve: Vendég" in llm.prompts[0]
    assert "Szolgáltatás: Hajvágás" in llm.prompts[0]


def test_time_formatting_per_language():
    moment = datetime(2025, 3, 10, 14, 5)

    assert format_appointment_time(moment, "hu") == "március 10. 14:05"
    assert format_appointment_time(moment, "en") == "March 10, 14:05"
    assert format_appointment_time(moment, "ro") == "10 martie, 14:05"


def test_receptionist_prompt():
    prompt = get_receptionist_prompt("Sync", "en", today=datetime(2025, 3, 10).date())

    assert "You are 'Sync'" in prompt
    assert "English" in prompt
    assert "2025-03-10" in prompt
    assert "ALWAYS check availability first" in prompt


def test_schedule_summary_names_unknown_services_in_the_language():
    rows = json.loads(schedule_summary([appointment(at(9), service_id="gone")], SERVICES, "en"))

    assert rows[0]["service"] == "Unknown"
