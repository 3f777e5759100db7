"""
Voice assistant: PCM codec, live session bridge and wake word listener.
"""

from .audio import PlaybackScheduler, create_blob, float_to_pcm16, pcm16_to_float
from .bridge import VoiceBridge, VoiceSessionError
from .wake_word import WakeWordListener

__all__ = [
    "PlaybackScheduler",
    "create_blob",
    "float_to_pcm16",
    "pcm16_to_float",
    "VoiceBridge",
    "VoiceSessionError",
    "WakeWordListener",
]
