"""Typed receptionist agent.

A text counterpart of the voice session: the same system instruction and
the same two tools, driven by a LangGraph tool loop.
"""

from typing import Literal, Optional

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from langchain_core.runnables import RunnableConfig
from langgraph.graph import END, START, StateGraph
from langgraph.prebuilt import ToolNode

from ..config import logger as log
from ..config.env import get_agent_name
from .llm import create_llm, message_text
from .prompts import get_receptionist_prompt
from .state import AgentState
from .tools import tools


def get_state_value(state, key: str, default=None):
    """Reads a field from a dict state or an AgentState."""
    return state.get(key, default) if isinstance(state, dict) else getattr(state, key, default)


def assistant(state, config: RunnableConfig) -> dict:
    """Main assistant node that answers or requests a tool call.

    Args:
        state: Current graph state with messages.
        config: Runnable configuration; ``configurable.llm`` overrides the model.

    Returns:
        dict: State update with the model response.
    """
    configurable = config.get("configurable", {}) if config else {}
    llm = configurable.get("llm") or create_llm()
    llm_with_tools = llm.bind_tools(tools)

    lang = get_state_value(state, "lang", "hu")
    messages = list(get_state_value(state, "messages", []))

    system_prompt = get_receptionist_prompt(get_agent_name(), lang)
    response = llm_with_tools.invoke([SystemMessage(content=system_prompt)] + messages)

    if getattr(response, "tool_calls", None):
        log.debug("agent", "Tool calls requested", tools=[c["name"] for c in response.tool_calls])

    return {"messages": [response]}


def should_continue(state) -> Literal["tools", END]:
    """Routes to the tool node while the model keeps requesting tools."""
    messages = get_state_value(state, "messages", [])
    if messages and getattr(messages[-1], "tool_calls", None):
        return "tools"
    return END


def build_graph():
    """Builds the LangGraph state graph for the receptionist.

    Returns:
        StateGraph: Configured graph ready to compile.
    """
    builder = StateGraph(AgentState)

    builder.add_node("assistant", assistant)
    builder.add_node("tools", ToolNode(tools))

    builder.add_edge(START, "assistant")
    builder.add_conditional_edges(
        "assistant", should_continue, {"tools": "tools", END: END}
    )
    builder.add_edge("tools", "assistant")

    return builder


graph = build_graph().compile()


def final_response(messages: list[BaseMessage]) -> str:
    """Text of the last AI message that is not a tool request."""
    for msg in reversed(messages):
        if isinstance(msg, AIMessage) and msg.content and not getattr(msg, "tool_calls", None):
            return message_text(msg)
    return ""


def chat_sync(
    message: str,
    history: Optional[list[BaseMessage]] = None,
    lang: str = "hu",
    llm=None,
) -> tuple[str, list[BaseMessage]]:
    """Sends one operator message to the receptionist.

    Args:
        message: The operator's message.
        history: Messages returned by the previous call, if any.
        lang: Conversation language.
        llm: Chat model override.

    Returns:
        tuple: Response text and the updated history.
    """
    messages = list(history or []) + [HumanMessage(content=message)]
    config = {"configurable": {"llm": llm}} if llm else {}

    try:
        result = graph.invoke({"messages": messages, "lang": lang}, config)
    except Exception as e:
        log.error("agent", "Error in receptionist chat", error=str(e))
        raise

    return final_response(result["messages"]), list(result["messages"])
