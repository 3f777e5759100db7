import asyncio
import contextlib
import json
from types import SimpleNamespace

import pytest

from salonsync.voice.bridge import VoiceBridge, VoiceSessionError, build_live_config

from conftest import at


class FakeSession:
    def __init__(self, messages, expect_audio=0):
        self.messages = list(messages)
        self.expect_audio = expect_audio
        self.tool_responses = []
        self.audio = []
        self.closed = False
        self._audio_received = asyncio.Event()

    async def receive(self):
        if self.expect_audio:
            await asyncio.wait_for(self._audio_received.wait(), timeout=2)
        messages, self.messages = self.messages, []
        for message in messages:
            yield message

    async def send_tool_response(self, function_responses):
        self.tool_responses.extend(function_responses)

    async def send_realtime_input(self, audio):
        self.audio.append(audio)
        if len(self.audio) >= self.expect_audio:
            self._audio_received.set()

    async def close(self):
        self.closed = True


class FakeLive:
    def __init__(self, session):
        self.session = session
        self.connections = []

    @contextlib.asynccontextmanager
    async def connect(self, model, config):
        self.connections.append((model, config))
        yield self.session


def fake_client(session):
    return SimpleNamespace(aio=SimpleNamespace(live=FakeLive(session)))


def tool_call(name, args, call_id="call-1"):
    call = SimpleNamespace(id=call_id, name=name, args=args)
    return SimpleNamespace(tool_call=SimpleNamespace(function_calls=[call]), server_content=None)


def audio_message(data):
    part = SimpleNamespace(inline_data=SimpleNamespace(data=data))
    content = SimpleNamespace(model_turn=SimpleNamespace(parts=[part]))
    return SimpleNamespace(tool_call=None, server_content=content)


def test_tool_calls_are_answered_on_the_session():
    session = FakeSession([tool_call("check_availability", {"date": "2025-03-10T10:00"})])
    handlers = {"check_availability": lambda date: json.dumps({"available": True})}
    bridge = VoiceBridge(client=fake_client(session), handlers=handlers)

    asyncio.run(bridge.run())

    [response] = session.tool_responses
    assert response.id == "call-1"
    assert response.name == "check_availability"
    assert response.response == {"result": json.dumps({"available": True})}
    assert not bridge.active


def test_booking_through_the_real_tools(session, live):
    messages = [
        tool_call("check_availability", {"date": "2025-03-10T16:00"}, "c1"),
        tool_call("book_appointment", {"date": "2025-03-10T16:00", "name": "Fekete Zoé"}, "c2"),
    ]
    fake = FakeSession(messages)
    bridge = VoiceBridge(client=fake_client(fake))

    asyncio.run(bridge.run())

    check, booking = fake.tool_responses
    assert json.loads(check.response["result"])["available"] is True
    assert booking.response == {"result": "Appointment confirmed."}
    assert live.appointments[0].start_time == at(16)
    assert live.appointments[0].notes == "AI Voice Booking"


def test_failing_or_unknown_tools_do_not_break_the_session():
    def broken(date):
        raise RuntimeError("boom")

    session = FakeSession(
        [tool_call("check_availability", {"date": "x"}, "c1"), tool_call("dance", {}, "c2")]
    )
    bridge = VoiceBridge(client=fake_client(session), handlers={"check_availability": broken})

    asyncio.run(bridge.run())

    failed, unknown = session.tool_responses
    assert failed.response["result"].startswith("Error")
    assert unknown.response == {"result": "Done"}


def test_audio_chunks_are_scheduled_back_to_back():
    chunk = b"\x00\x00" * 2400  # 0.1 s at 24 kHz
    session = FakeSession([audio_message(chunk), audio_message(chunk)])
    played = []
    bridge = VoiceBridge(
        client=fake_client(session),
        audio_sink=lambda data, start_at: played.append((len(data), start_at)),
        clock=lambda: 5.0,
    )

    asyncio.run(bridge.run())

    assert [size for size, _ in played] == [4800, 4800]
    assert played[0][1] == pytest.approx(5.0)
    assert played[1][1] == pytest.approx(5.1)


def test_microphone_frames_are_sent_as_pcm_blobs():
    session = FakeSession([], expect_audio=2)

    async def microphone():
        yield [0.5, -0.5]
        yield [0.0]

    bridge = VoiceBridge(client=fake_client(session))
    asyncio.run(bridge.run(microphone()))

    assert [blob.data for blob in session.audio] == [b"\x00\x40\x00\xc0", b"\x00\x00"]
    assert session.audio[0].mime_type == "audio/pcm;rate=16000"


def test_only_one_session_at_a_time():
    bridge = VoiceBridge(client=fake_client(FakeSession([])))
    bridge.active = True

    with pytest.raises(VoiceSessionError):
        asyncio.run(bridge.run())


class HangingSession(FakeSession):
    def __init__(self):
        super().__init__([])
        self.started = asyncio.Event()
        self._closed = asyncio.Event()

    async def receive(self):
        self.started.set()
        await self._closed.wait()
        for message in []:
            yield message

    async def close(self):
        self.closed = True
        self._closed.set()


def test_stop_closes_the_session():
    fake = HangingSession()
    bridge = VoiceBridge(client=fake_client(fake))

    async def scenario():
        task = asyncio.create_task(bridge.run())
        await asyncio.wait_for(fake.started.wait(), timeout=2)
        assert bridge.active
        await bridge.stop()
        await asyncio.wait_for(task, timeout=2)

    asyncio.run(scenario())

    assert fake.closed
    assert not bridge.active


def test_missing_api_key_is_reported(monkeypatch):
    for name in ("GEMINI_API_KEY", "GOOGLE_API_KEY", "API_KEY"):
        monkeypatch.delenv(name, raising=False)

    with pytest.raises(VoiceSessionError):
        asyncio.run(VoiceBridge().run())


def test_live_config_declares_both_tools_and_audio():
    config = build_live_config("ro")

    names = [d.name for d in config.tools[0].function_declarations]
    assert names == ["check_availability", "book_appointment"]
    assert "Romanian" in str(config.system_instruction)
    assert config.response_modalities == ["AUDIO"]
