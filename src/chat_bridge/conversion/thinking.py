"""Project reasoning segments into signed thinking blocks."""

from typing import List, Optional, Sequence

from chat_bridge.types import ReasoningText, ThinkingBlock


def project_thinking_blocks(
    segments: Sequence[ReasoningText],
    signature: Optional[str],
) -> List[ThinkingBlock]:
    """Map reasoning segments to thinking blocks, one per segment, in order.

    Every block carries the same ``signature``. No segments means no blocks,
    even when a signature is present.
    """

    return [ThinkingBlock(thinking=segment.text, signature=signature) for segment in segments]


__all__ = ["project_thinking_blocks"]
