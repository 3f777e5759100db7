import struct

import pytest

from salonsync.voice.audio import (
    PlaybackScheduler,
    create_blob,
    float_to_pcm16,
    pcm16_to_float,
    pcm_duration,
)


def samples(data: bytes) -> list[int]:
    return list(struct.unpack(f"<{len(data) // 2}h", data))


def test_float_to_pcm16_scales_and_clamps():
    data = float_to_pcm16([0.0, 0.5, -0.5, 1.0, -1.0, 1.7, -3.0])

    assert samples(data) == [0, 16384, -16384, 32767, -32768, 32767, -32768]


def test_pcm16_is_little_endian():
    assert float_to_pcm16([0.5]) == b"\x00\x40"


def test_pcm16_to_float():
    assert pcm16_to_float(b"\x00\x40\x00\xc0") == [0.5, -0.5]


def test_pcm16_to_float_ignores_a_trailing_odd_byte():
    assert pcm16_to_float(b"\x00\x40\x01") == [0.5]


def test_blob_carries_pcm_at_16khz():
    blob = create_blob([0.25, -0.25])

    assert blob.mime_type == "audio/pcm;rate=16000"
    assert samples(blob.data) == [8192, -8192]


def test_output_duration_at_24khz():
    assert pcm_duration(b"\x00\x00" * 24000) == pytest.approx(1.0)


def test_chunks_play_back_to_back():
    scheduler = PlaybackScheduler()

    assert scheduler.schedule(0.5, now=10.0) == 10.0
    assert scheduler.schedule(0.5, now=10.1) == 10.5
    assert scheduler.schedule(0.2, now=10.2) == 11.0


def test_drained_queue_starts_now():
    scheduler = PlaybackScheduler()
    scheduler.schedule(0.5, now=1.0)

    assert scheduler.schedule(0.5, now=5.0) == 5.0
