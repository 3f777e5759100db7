"""Wake word detection over speech recognition transcripts.

The recognizer itself is external; it feeds final transcripts to the
listener, which fires the activation callback when the wake word is heard.
"""

from typing import Callable

from ..config import logger as log
from ..constants.translations import LOCALES

WAKE_WORD = "sync"


def recognizer_locale(lang: str) -> str:
    return LOCALES.get(lang, LOCALES["en"])


class WakeWordListener:
    """Listens only while enabled and while the voice overlay is closed."""

    def __init__(self, on_activate: Callable[[], None], lang: str = "hu", enabled: bool = True):
        self._on_activate = on_activate
        self.lang = lang
        self.enabled = enabled
        self.overlay_active = False

    @property
    def locale(self) -> str:
        return recognizer_locale(self.lang)

    @property
    def listening(self) -> bool:
        return self.enabled and not self.overlay_active

    def feed(self, transcript: str) -> bool:
        """Checks one transcript; returns True when it activated the overlay."""
        if not self.listening:
            return False
        if WAKE_WORD not in transcript.lower():
            return False
        log.info("wake_word", "Wake word detected", locale=self.locale)
        self.overlay_active = True
        self._on_activate()
        return True
