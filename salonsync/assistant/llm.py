"""Chat model factory."""

from typing import Optional

from langchain_anthropic import ChatAnthropic
from langchain_core.messages import BaseMessage
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_openai import ChatOpenAI

from ..config.env import get_ai_temperature, get_gemini_api_key, get_text_model


def create_llm(model_name: Optional[str] = None, temperature: Optional[float] = None):
    """Creates LLM instance for the specified model.

    Args:
        model_name: Model identifier (e.g., 'gemini-2.5-flash', 'gpt-4o-mini').
            Defaults to SALONSYNC_TEXT_MODEL.
        temperature: Temperature setting for responses.

    Returns:
        Configured LLM instance.
    """
    model_name = model_name or get_text_model()
    temperature = get_ai_temperature() if temperature is None else temperature

    if model_name.startswith("gpt"):
        return ChatOpenAI(model=model_name, temperature=temperature)
    elif model_name.startswith("claude"):
        return ChatAnthropic(model=model_name, temperature=temperature)
    else:
        return ChatGoogleGenerativeAI(
            model=model_name,
            temperature=temperature,
            google_api_key=get_gemini_api_key(),
        )


def message_text(message: BaseMessage) -> str:
    """Plain text of a model response, joining content blocks if needed."""
    content = message.content
    if isinstance(content, str):
        return content
    parts = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)
