"""
AI assistant: text helpers, receptionist tools and the typed chat agent.
"""

from .text import analyze_schedule, analyze_upcoming, generate_client_message, reminder_for
from .tools import book_appointment, check_availability

__all__ = [
    # Text
    "generate_client_message",
    "analyze_schedule",
    "analyze_upcoming",
    "reminder_for",
    # Tools
    "check_availability",
    "book_appointment",
]
