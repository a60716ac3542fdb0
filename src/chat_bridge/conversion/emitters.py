"""Build assistant messages from tool-call runs and assistant text."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from chat_bridge.types import (
    AssistantMessage,
    AssistantMessageItem,
    ContentBlock,
    FunctionCallItem,
    OutputText,
    Refusal,
    TextBlock,
    ThinkingBlock,
    ToolCallEntry,
)

logger = logging.getLogger(__name__)


class ToolCallBatch:
    """Collects consecutive function calls into one assistant message."""

    def __init__(self) -> None:
        self._thinking: List[ThinkingBlock] = []
        self._calls: List[ToolCallEntry] = []

    @property
    def is_open(self) -> bool:
        return bool(self._calls)

    def add(
        self,
        item: FunctionCallItem,
        thinking_blocks: Optional[Sequence[ThinkingBlock]] = None,
    ) -> None:
        if not self._calls and thinking_blocks:
            self._thinking = list(thinking_blocks)
        self._calls.append(
            ToolCallEntry(id=item.id, name=item.name, arguments=item.arguments)
        )

    def close(self) -> Optional[AssistantMessage]:
        """Return the batched message and reset, or ``None`` if nothing was added."""

        if not self._calls:
            return None

        message = AssistantMessage(
            content=list(self._thinking) or None,
            tool_calls=self._calls,
        )
        logger.debug(
            "Closed tool-call batch with %d call(s) and %d thinking block(s).",
            len(self._calls),
            len(self._thinking),
        )
        self._thinking = []
        self._calls = []
        return message


def emit_assistant_text(
    item: AssistantMessageItem,
    thinking_blocks: Optional[Sequence[ThinkingBlock]] = None,
) -> AssistantMessage:
    """Translate assistant output text, placing thinking blocks first."""

    content: List[ContentBlock] = list(thinking_blocks or [])
    refusals: List[str] = []
    for part in item.content:
        if isinstance(part, OutputText):
            content.append(TextBlock(text=part.text))
        elif isinstance(part, Refusal):
            refusals.append(part.refusal)
        else:
            raise TypeError(f"Unsupported content part: {type(part)!r}")

    return AssistantMessage(
        content=content or None,
        refusal="".join(refusals) if refusals else None,
    )


__all__ = ["ToolCallBatch", "emit_assistant_text"]
