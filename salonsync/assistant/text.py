"""One-shot text generation: client reminders and schedule analysis.

Both helpers never raise. An empty model answer yields the localized
fallback string and any failure (missing key, network, quota) yields the
localized error string, so the screens can always show something.
"""

import json
from datetime import datetime
from typing import Optional

from langchain_core.messages import HumanMessage

from ..calendar.dashboard import upcoming_appointments
from ..config import logger as log
from ..constants.defaults import Scheduling
from ..constants.translations import t
from ..domain.appointment import Appointment
from ..domain.service import Service
from ..scheduling.catalog import find_service
from .llm import create_llm, message_text
from .prompts import get_analysis_prompt, get_reminder_prompt


def generate_client_message(
    client_name: str,
    appointment_time: datetime,
    service_name: str,
    lang: str = "hu",
    llm=None,
) -> str:
    """Writes a short reminder SMS for one appointment.

    Args:
        client_name: Name the message is addressed to.
        appointment_time: Start of the appointment.
        service_name: Human readable service name.
        lang: Language of the message.
        llm: Chat model to use; created from configuration when omitted.

    Returns:
        The generated text, or a localized fallback/error string.
    """
    strings = t(lang)
    try:
        llm = llm or create_llm()
        prompt = get_reminder_prompt(client_name, appointment_time, service_name, lang)
        response = llm.invoke([HumanMessage(content=prompt)])
        text = message_text(response).strip()
        return text or strings["messageFallback"]
    except Exception as e:
        log.error("text", "Error generating message", error=str(e))
        return strings["messageError"]


def schedule_summary(
    appointments: list[Appointment], services: list[Service], lang: str = "hu"
) -> str:
    """JSON summary of appointments handed to the analysis prompt."""
    unknown = t(lang)["unknownService"]
    rows = []
    for appointment in appointments:
        service = find_service(services, appointment.service_id)
        rows.append(
            {
                "start": appointment.time_label,
                "service": service.name if service else unknown,
                "duration": service.duration if service else 0,
            }
        )
    return json.dumps(rows, ensure_ascii=False)


def analyze_schedule(
    appointments: list[Appointment],
    services: list[Service],
    lang: str = "hu",
    llm=None,
) -> str:
    """Asks the model for a short Markdown analysis of a schedule."""
    strings = t(lang)
    try:
        llm = llm or create_llm()
        prompt = get_analysis_prompt(schedule_summary(appointments, services, lang), lang)
        response = llm.invoke([HumanMessage(content=prompt)])
        text = message_text(response).strip()
        return text or strings["analysisFallback"]
    except Exception as e:
        log.error("text", "Error analyzing schedule", error=str(e))
        return strings["analysisError"]


def analyze_upcoming(
    appointments: list[Appointment],
    services: list[Service],
    lang: str = "hu",
    now: Optional[datetime] = None,
    llm=None,
) -> str:
    """Analyzes the next few future appointments in start order."""
    upcoming = upcoming_appointments(appointments, now, limit=Scheduling.ANALYSIS_LIMIT)
    return analyze_schedule(upcoming, services, lang, llm=llm)


def reminder_for(
    appointment: Appointment,
    services: list[Service],
    lang: str = "hu",
    llm=None,
) -> str:
    """Reminder for a stored appointment, filling in guest and service names."""
    service = find_service(services, appointment.service_id)
    return generate_client_message(
        appointment.client_name or t(lang)["guest"],
        appointment.start_time,
        service.short_name if service else t(lang)["defaultService"],
        lang,
        llm=llm,
    )
