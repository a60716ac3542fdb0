"""Output-item to chat-completion message conversion."""

from chat_bridge.conversion.carry import CarryState, ReasoningCarry
from chat_bridge.conversion.classifier import ItemKind, classify_item
from chat_bridge.conversion.converter import items_to_messages
from chat_bridge.conversion.emitters import ToolCallBatch, emit_assistant_text
from chat_bridge.conversion.thinking import project_thinking_blocks

__all__ = [
    "CarryState",
    "ItemKind",
    "ReasoningCarry",
    "ToolCallBatch",
    "classify_item",
    "emit_assistant_text",
    "items_to_messages",
    "project_thinking_blocks",
]
