"""Tag output items by the role they play in the conversion."""

from enum import Enum

from chat_bridge.types import (
    AssistantMessageItem,
    FunctionCallItem,
    OutputItem,
    ReasoningItem,
    UnknownItem,
)


class ItemKind(str, Enum):
    REASONING = "reasoning"
    TOOL_CALL = "tool_call"
    MESSAGE = "message"
    OTHER = "other"


def classify_item(item: OutputItem) -> ItemKind:
    """Return the kind of ``item``; raise ``TypeError`` for non-item values."""

    if isinstance(item, ReasoningItem):
        return ItemKind.REASONING
    if isinstance(item, FunctionCallItem):
        return ItemKind.TOOL_CALL
    if isinstance(item, AssistantMessageItem):
        return ItemKind.MESSAGE
    if isinstance(item, UnknownItem):
        return ItemKind.OTHER
    raise TypeError(f"Unsupported output item type: {type(item)!r}")


__all__ = ["ItemKind", "classify_item"]
