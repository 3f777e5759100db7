"""Live voice session with the receptionist model.

The bridge streams microphone frames to a Gemini Live session, answers the
model's tool calls with the receptionist tools and hands returned audio to
a playback sink, scheduled back to back. Audio devices are not managed
here: the microphone is any async iterable of float frames and the sink is
any callable taking PCM bytes and a start time.
"""

import asyncio
import time
from typing import AsyncIterable, Callable, Optional, Sequence

from google import genai
from google.genai import types

from ..assistant.prompts import get_receptionist_prompt
from ..assistant.tools import TOOL_HANDLERS
from ..config import logger as log
from ..config.env import get_agent_name, get_gemini_api_key, get_live_model
from .audio import PlaybackScheduler, create_blob, pcm_duration

AudioSink = Callable[[bytes, float], None]

FUNCTION_DECLARATIONS = [
    types.FunctionDeclaration(
        name="check_availability",
        description="Checks if the professional is free at a specific date and time.",
        parameters=types.Schema(
            type=types.Type.OBJECT,
            properties={
                "date": types.Schema(
                    type=types.Type.STRING,
                    description="The date and time (ISO format)",
                ),
            },
            required=["date"],
        ),
    ),
    types.FunctionDeclaration(
        name="book_appointment",
        description="Books a new appointment.",
        parameters=types.Schema(
            type=types.Type.OBJECT,
            properties={
                "date": types.Schema(
                    type=types.Type.STRING,
                    description="The date and time (ISO format)",
                ),
                "name": types.Schema(type=types.Type.STRING, description="Client name"),
            },
            required=["date", "name"],
        ),
    ),
]


class VoiceSessionError(Exception):
    """Raised when a voice session cannot be started."""


def build_live_config(lang: str = "hu") -> types.LiveConnectConfig:
    return types.LiveConnectConfig(
        response_modalities=[types.Modality.AUDIO],
        tools=[types.Tool(function_declarations=FUNCTION_DECLARATIONS)],
        system_instruction=get_receptionist_prompt(get_agent_name(), lang),
    )


class VoiceBridge:
    """Runs at most one live session at a time."""

    def __init__(
        self,
        lang: str = "hu",
        audio_sink: Optional[AudioSink] = None,
        client=None,
        model: Optional[str] = None,
        clock: Callable[[], float] = time.monotonic,
        handlers: Optional[dict] = None,
    ):
        self.lang = lang
        self.model = model or get_live_model()
        self._client = client
        self._sink = audio_sink
        self._clock = clock
        self._handlers = handlers if handlers is not None else TOOL_HANDLERS
        self._scheduler = PlaybackScheduler()
        self._session = None
        self._stopped = asyncio.Event()
        self.active = False

    def _get_client(self):
        if self._client is None:
            api_key = get_gemini_api_key()
            if not api_key:
                raise VoiceSessionError("GEMINI_API_KEY is not configured")
            self._client = genai.Client(api_key=api_key)
        return self._client

    async def run(self, microphone: Optional[AsyncIterable[Sequence[float]]] = None) -> None:
        """Opens the session and serves it until stopped or closed by the server.

        Raises:
            VoiceSessionError: If a session is already active or no API key is set.
        """
        if self.active:
            raise VoiceSessionError("A voice session is already active")

        client = self._get_client()
        self.active = True
        self._stopped = asyncio.Event()
        self._scheduler.reset()
        log.info("voice", "Opening live session", model=self.model, lang=self.lang)

        try:
            async with client.aio.live.connect(
                model=self.model, config=build_live_config(self.lang)
            ) as session:
                self._session = session
                sender = (
                    asyncio.create_task(self._send_audio(session, microphone))
                    if microphone is not None
                    else None
                )
                try:
                    await self._receive(session)
                finally:
                    if sender is not None:
                        sender.cancel()
                        await asyncio.gather(sender, return_exceptions=True)
        finally:
            self._session = None
            self.active = False
            log.info("voice", "Live session closed")

    async def stop(self) -> None:
        """Ends the active session, if any."""
        self._stopped.set()
        if self._session is not None:
            await self._session.close()

    async def _send_audio(self, session, microphone: AsyncIterable[Sequence[float]]) -> None:
        async for frame in microphone:
            if self._stopped.is_set():
                break
            await session.send_realtime_input(audio=create_blob(frame))

    async def _receive(self, session) -> None:
        while not self._stopped.is_set():
            received = 0
            async for message in session.receive():
                received += 1
                await self.handle_message(session, message)
                if self._stopped.is_set():
                    break
            if received == 0:
                break

    async def handle_message(self, session, message) -> None:
        """Answers tool calls and forwards audio from one server message."""
        tool_call = getattr(message, "tool_call", None)
        if tool_call and tool_call.function_calls:
            responses = [self._call_tool(call) for call in tool_call.function_calls]
            await session.send_tool_response(function_responses=responses)

        server_content = getattr(message, "server_content", None)
        model_turn = getattr(server_content, "model_turn", None) if server_content else None
        if model_turn and model_turn.parts:
            for part in model_turn.parts:
                inline_data = getattr(part, "inline_data", None)
                if inline_data and inline_data.data:
                    self._play(inline_data.data)

    def _call_tool(self, call) -> types.FunctionResponse:
        handler = self._handlers.get(call.name)
        if handler is None:
            log.warn("voice", "Unknown tool call", name=call.name)
            result = "Done"
        else:
            try:
                result = handler(**(call.args or {}))
            except Exception as e:
                log.error("voice", "Tool call failed", name=call.name, error=str(e))
                result = f"Error: {e}"
        log.debug("voice", "Tool response", name=call.name, result=result)
        return types.FunctionResponse(id=call.id, name=call.name, response={"result": result})

    def _play(self, data: bytes) -> None:
        start_at = self._scheduler.schedule(pcm_duration(data), self._clock())
        if self._sink is not None:
            self._sink(data, start_at)
