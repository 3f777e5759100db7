"""
Receptionist chat state.

The chat is stateless between invocations: the caller passes the running
history and receives the updated message list back.
"""

from typing import Annotated, Sequence

from langchain_core.messages import AnyMessage
from langgraph.graph import add_messages
from pydantic import BaseModel, Field


class AgentState(BaseModel):
    """State flowing through the receptionist graph."""

    messages: Annotated[Sequence[AnyMessage], add_messages] = Field(
        default_factory=list
    )
    lang: str = "hu"

    class Config:
        arbitrary_types_allowed = True
