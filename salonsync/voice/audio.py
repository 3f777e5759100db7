"""PCM audio helpers for the live voice session.

Microphone frames arrive as floats in [-1, 1] at 16 kHz. The model answers
with 16-bit little-endian mono PCM at 24 kHz.
"""

import struct
from typing import Sequence

from google.genai import types

INPUT_SAMPLE_RATE = 16000
OUTPUT_SAMPLE_RATE = 24000
INPUT_MIME_TYPE = f"audio/pcm;rate={INPUT_SAMPLE_RATE}"

_PCM_MAX = 32767
_PCM_MIN = -32768


def float_to_pcm16(samples: Sequence[float]) -> bytes:
    """Scales float samples to signed 16-bit PCM, clamping out-of-range values."""
    values = []
    for sample in samples:
        value = int(sample * 32768)
        values.append(max(_PCM_MIN, min(_PCM_MAX, value)))
    return struct.pack(f"<{len(values)}h", *values)


def pcm16_to_float(data: bytes) -> list[float]:
    """Converts 16-bit PCM back to floats in [-1, 1)."""
    count = len(data) // 2
    return [value / 32768.0 for value in struct.unpack(f"<{count}h", data[: count * 2])]


def create_blob(samples: Sequence[float]) -> types.Blob:
    """One microphone frame as a realtime input blob; the client base64-encodes it on the wire."""
    return types.Blob(data=float_to_pcm16(samples), mime_type=INPUT_MIME_TYPE)


def pcm_duration(data: bytes, sample_rate: int = OUTPUT_SAMPLE_RATE) -> float:
    """Playback length in seconds of mono 16-bit PCM."""
    return len(data) / 2 / sample_rate


class PlaybackScheduler:
    """Queues output chunks back to back on a playback clock.

    A chunk starts when the previous one ends, or now if the queue has
    drained, so audio never overlaps and never starts in the past.
    """

    def __init__(self):
        self.next_start = 0.0

    def schedule(self, duration: float, now: float) -> float:
        """Returns the start time for a chunk of the given duration."""
        self.next_start = max(self.next_start, now)
        start = self.next_start
        self.next_start += duration
        return start

    def reset(self) -> None:
        self.next_start = 0.0
