"""Lightweight helper to keep a conversation's assistant history tidy."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping

from chat_bridge.conversion import items_to_messages
from chat_bridge.types import Message, OutputItem, coerce_message
from chat_bridge.wire import messages_to_payload


class ChatHistory:
    """Stores converted messages and exports them as request payloads."""

    def __init__(self) -> None:
        self._messages: List[Message] = []

    # --------------------------------------------------------------------- setup

    def reset(self) -> None:
        """Drop every recorded message."""

        self._messages = []

    def extend(self, messages: Iterable[Message | Mapping[str, Any]]) -> None:
        """Append a batch of messages in their current order."""

        for message in messages:
            self._messages.append(coerce_message(message))

    # ------------------------------------------------------------------- mutators

    def add(self, message: Message) -> None:
        """Append a single message to the history."""

        self._messages.append(message)

    def extend_output_items(
        self,
        items: Iterable[OutputItem | Mapping[str, Any]],
        *,
        preserve_thinking_blocks: bool = False,
    ) -> List[Message]:
        """Convert a turn's output items and append the resulting messages."""

        converted = items_to_messages(items, preserve_thinking_blocks=preserve_thinking_blocks)
        self._messages.extend(converted)
        return converted

    # -------------------------------------------------------------------- exports

    def to_payload(self) -> List[Dict[str, Any]]:
        """Render the history as chat-completion message dicts."""

        return messages_to_payload(self._messages)

    @property
    def messages(self) -> List[Message]:
        """Return a shallow copy of the recorded messages."""

        return list(self._messages)


__all__ = ["ChatHistory"]
