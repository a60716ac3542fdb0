"""Convert provider-neutral output items into chat-completion messages."""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping

from chat_bridge.conversion.carry import ReasoningCarry
from chat_bridge.conversion.classifier import ItemKind, classify_item
from chat_bridge.conversion.emitters import ToolCallBatch, emit_assistant_text
from chat_bridge.types import Message, OutputItem, RawMessage, coerce_output_item

logger = logging.getLogger(__name__)


def items_to_messages(
    items: Iterable[OutputItem | Mapping[str, Any]],
    preserve_thinking_blocks: bool = False,
) -> List[Message]:
    """Convert one turn's output items into assistant messages.

    Items are scanned once, left to right:
      - reasoning emits a standalone carrier message with the raw payload and
        is held until the next tool call or assistant text;
      - consecutive function calls merge into a single message's tool_calls;
      - assistant text becomes text blocks.
    With ``preserve_thinking_blocks`` the held reasoning is re-encoded as
    leading thinking blocks on the message that consumes it. Unknown items
    are forwarded unchanged as ``RawMessage``s and leave held reasoning alone.
    """

    messages: List[Message] = []
    carry = ReasoningCarry()
    batch = ToolCallBatch()

    def flush_batch() -> None:
        message = batch.close()
        if message is not None:
            messages.append(message)

    count = 0
    for raw_item in items:
        item = coerce_output_item(raw_item)
        kind = classify_item(item)
        count += 1

        if kind is ItemKind.TOOL_CALL:
            batch.add(item, carry.take(preserve_thinking_blocks=preserve_thinking_blocks))
            continue

        flush_batch()

        if kind is ItemKind.REASONING:
            messages.append(carry.hold(item))
        elif kind is ItemKind.MESSAGE:
            blocks = carry.take(preserve_thinking_blocks=preserve_thinking_blocks)
            messages.append(emit_assistant_text(item, blocks))
        elif kind is ItemKind.OTHER:
            logger.debug("Forwarding unsupported item unchanged.")
            messages.append(RawMessage(payload=dict(item.provider_data)))
        else:
            raise TypeError(f"Unhandled item kind: {kind!r}")

    flush_batch()

    logger.debug("Converted %d item(s) into %d message(s).", count, len(messages))
    return messages


__all__ = ["items_to_messages"]
