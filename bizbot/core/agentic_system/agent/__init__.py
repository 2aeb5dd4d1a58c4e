"""
Business chat agent module.

Dependencies: bizbot.boundary.llm
System role: Agent module exports
"""

from bizbot.core.agentic_system.agent.chat_agent import ChatAgent
from bizbot.core.agentic_system.agent.chat_agent_prompt import (
    build_fallback_contact_card,
    build_system_prompt,
    ensure_contact_in_context,
)

__all__ = [
    "ChatAgent",
    "build_system_prompt",
    "build_fallback_contact_card",
    "ensure_contact_in_context",
]
