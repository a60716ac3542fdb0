"""Shared Pydantic models for output items and chat-completion messages."""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


ItemStatus = Literal["in_progress", "completed", "incomplete"]


# ------------------------------------------------------------------ output items


class ReasoningText(BaseModel):
    """One segment of raw reasoning text."""
    model_config = ConfigDict(extra="allow")

    type: Literal["reasoning_text"] = "reasoning_text"
    text: str


class ReasoningItem(BaseModel):
    """Model reasoning trace with an optional provider signature."""
    model_config = ConfigDict(extra="allow")

    type: Literal["reasoning"] = "reasoning"
    segments: List[ReasoningText] = Field(default_factory=list)
    summary: Optional[List[ReasoningText]] = None
    signature: Optional[str] = None


class FunctionCallItem(BaseModel):
    """Function invocation emitted by the model; arguments stay a raw string."""
    type: Literal["function_call"] = "function_call"
    id: str
    name: str
    arguments: str = ""
    status: Optional[ItemStatus] = None


class OutputText(BaseModel):
    type: Literal["output_text"] = "output_text"
    text: str


class Refusal(BaseModel):
    type: Literal["refusal"] = "refusal"
    refusal: str


OutputContentPart = Annotated[Union[OutputText, Refusal], Field(discriminator="type")]


class AssistantMessageItem(BaseModel):
    """Assistant text produced during the turn."""
    type: Literal["message"] = "message"
    role: Literal["assistant"] = "assistant"
    content: List[OutputContentPart] = Field(default_factory=list)
    status: Optional[ItemStatus] = None


class UnknownItem(BaseModel):
    """Item kind this package does not model; forwarded as-is."""
    type: Literal["unknown"] = "unknown"
    provider_data: Dict[str, Any] = Field(default_factory=dict)


OutputItem = Annotated[
    Union[ReasoningItem, FunctionCallItem, AssistantMessageItem, UnknownItem],
    Field(discriminator="type"),
]


# ---------------------------------------------------------------------- messages


class TextBlock(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ThinkingBlock(BaseModel):
    """Reasoning text plus the opaque signature that must be echoed back."""
    type: Literal["thinking"] = "thinking"
    thinking: str
    signature: Optional[str] = None


ContentBlock = Annotated[Union[TextBlock, ThinkingBlock], Field(discriminator="type")]


class ToolCallEntry(BaseModel):
    """One entry of an assistant message's tool_calls list."""
    id: str
    name: str
    arguments: str


class AssistantMessage(BaseModel):
    """Assistant turn in chat-completion form."""
    role: Literal["assistant"] = "assistant"
    content: Optional[List[ContentBlock]] = None
    tool_calls: Optional[List[ToolCallEntry]] = None
    reasoning: Optional[ReasoningItem] = None  # untouched payload for history bookkeeping
    refusal: Optional[str] = None


class RawMessage(BaseModel):
    """Message forwarded verbatim from an item this package does not interpret."""
    payload: Dict[str, Any] = Field(default_factory=dict)


Message = Union[AssistantMessage, RawMessage]


_OUTPUT_ITEM_ADAPTER: TypeAdapter = TypeAdapter(OutputItem)
_OUTPUT_ITEM_TYPES = (ReasoningItem, FunctionCallItem, AssistantMessageItem, UnknownItem)
_MODELLED_KINDS = frozenset(("reasoning", "function_call", "message", "unknown"))


def coerce_output_item(item: OutputItem | Mapping[str, Any]) -> OutputItem:
    """Return ``item`` as an output item model, validating mappings.

    Mappings of a kind this package does not model are wrapped unchanged in
    an ``UnknownItem`` so they pass through.
    """

    if isinstance(item, _OUTPUT_ITEM_TYPES):
        return item
    if isinstance(item, Mapping):
        if item.get("type") not in _MODELLED_KINDS:
            return UnknownItem(provider_data=dict(item))
        return _OUTPUT_ITEM_ADAPTER.validate_python(dict(item))
    raise TypeError(f"Unsupported output item type: {type(item)!r}")


def coerce_message(message: Message | Mapping[str, Any]) -> Message:
    if isinstance(message, (AssistantMessage, RawMessage)):
        return message
    if isinstance(message, Mapping):
        if message.get("role") == "assistant":
            return AssistantMessage(**message)
        return RawMessage(payload=dict(message))
    raise TypeError(f"Unsupported message type: {type(message)!r}")


__all__ = [
    "AssistantMessage",
    "AssistantMessageItem",
    "ContentBlock",
    "FunctionCallItem",
    "ItemStatus",
    "Message",
    "OutputContentPart",
    "OutputItem",
    "OutputText",
    "RawMessage",
    "ReasoningItem",
    "ReasoningText",
    "Refusal",
    "TextBlock",
    "ThinkingBlock",
    "ToolCallEntry",
    "UnknownItem",
    "coerce_message",
    "coerce_output_item",
]
