"""
Prompts for the text helpers and the receptionist agent.
"""

from datetime import date, datetime

from ..constants.translations import LANGUAGE_NAMES

MONTHS = {
    "hu": ["január", "február", "március", "április", "május", "június",
           "július", "augusztus", "szeptember", "október", "november", "december"],
    "en": ["January", "February", "March", "April", "May", "June",
           "July", "August", "September", "October", "November", "December"],
    "ro": ["ianuarie", "februarie", "martie", "aprilie", "mai", "iunie",
           "iulie", "august", "septembrie", "octombrie", "noiembrie", "decembrie"],
}


def format_appointment_time(moment: datetime, lang: str = "hu") -> str:
    """Month name, day and HH:MM in the conventional order of the language."""
    month = MONTHS.get(lang, MONTHS["hu"])[moment.month - 1]
    clock = moment.strftime("%H:%M")
    if lang == "hu":
        return f"{month} {moment.day}. {clock}"
    if lang == "en":
        return f"{month} {moment.day}, {clock}"
    return f"{moment.day} {month}, {clock}"


REMINDER_PROMPTS = {
    "hu": """
Írj egy rövid, kedves, professzionális emlékeztető SMS üzenetet magyarul egy fodrász nevében.
Vendég neve: {client_name}
Időpont: {when}
Szolgáltatás: {service_name}

Az üzenet legyen közvetlen, de udvarias. Ne legyen túl hosszú.
Ne használj idézőjeleket az outputban.
""",
    "en": """
Write a short, friendly, professional reminder SMS in English on behalf of a hairdresser.
Client name: {client_name}
Appointment: {when}
Service: {service_name}

Keep it personal but polite, and not too long.
Do not use quotation marks in the output.
""",
    "ro": """
Scrie un SMS scurt, prietenos și profesionist de reamintire, în limba română, în numele unui coafor.
Numele clientului: {client_name}
Programare: {when}
Serviciu: {service_name}

Mesajul să fie direct, dar politicos, și nu prea lung.
Nu folosi ghilimele în răspuns.
""",
}

ANALYSIS_PROMPTS = {
    "hu": """
Te egy profi szalon menedzser vagy. Elemezd a mai fodrász beosztást és adj 3 rövid tippet vagy összefoglalót magyarul.

Mai beosztás:
{schedule}

Fókuszálj a következőkre:
1. Mikor van nagyobb szünet (ebédszünet lehetőség)?
2. Mennyire sűrű a nap?
3. Van-e optimalizálási lehetőség?

Formázd Markdown listaként.
""",
    "en": """
You are an experienced salon manager. Analyze today's schedule and give 3 short tips or a summary in English.

Today's schedule:
{schedule}

Focus on:
1. When is there a longer break (lunch opportunity)?
2. How busy is the day?
3. Is there room for optimization?

Format it as a Markdown list.
""",
    "ro": """
Ești un manager de salon cu experiență. Analizează programul de azi și oferă 3 sfaturi scurte sau un rezumat în limba română.

Programul de azi:
{schedule}

Concentrează-te pe:
1. Când există o pauză mai lungă (posibilă pauză de prânz)?
2. Cât de aglomerată este ziua?
3. Există posibilități de optimizare?

Formatează răspunsul ca listă Markdown.
""",
}


def get_reminder_prompt(client_name: str, when: datetime, service_name: str, lang: str = "hu") -> str:
    template = REMINDER_PROMPTS.get(lang, REMINDER_PROMPTS["hu"])
    return template.format(
        client_name=client_name,
        when=format_appointment_time(when, lang),
        service_name=service_name,
    )


def get_analysis_prompt(schedule_json: str, lang: str = "hu") -> str:
    template = ANALYSIS_PROMPTS.get(lang, ANALYSIS_PROMPTS["hu"])
    return template.format(schedule=schedule_json)


def get_receptionist_prompt(agent_name: str, lang: str = "hu", today: date | None = None) -> str:
    """
    System instruction for the receptionist, shared by the voice session and
    the typed chat.

    Args:
        agent_name: Name the receptionist introduces itself with
        lang: Conversation language code
        today: Reference date for relative expressions ("tomorrow at 2")
    """
    today = today or date.today()
    language = LANGUAGE_NAMES.get(lang, "Hungarian")
    return f"""You are '{agent_name}', a high-end AI receptionist for a beauty salon.
You have full access to the calendar.
Speak briefly and elegantly in {language}.
Today is {today.isoformat()} ({today.strftime('%A')}). Pass dates to the tools in ISO format (YYYY-MM-DDTHH:MM).
If booking, ALWAYS check availability first. If the time is free, book it; otherwise suggest another time."""
