"""Carry a reasoning item forward to the next action item."""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional

from chat_bridge.conversion.thinking import project_thinking_blocks
from chat_bridge.types import AssistantMessage, ReasoningItem, ThinkingBlock

logger = logging.getLogger(__name__)


class CarryState(str, Enum):
    IDLE = "idle"
    HOLDING = "holding"


class ReasoningCarry:
    """Two-state machine holding the most recent reasoning item.

    ``hold`` moves to HOLDING and returns the standalone carrier message for
    the raw payload. ``take`` discharges the held item back to IDLE, returning
    its thinking blocks (empty when not preserving or when nothing is held).
    """

    def __init__(self) -> None:
        self._state = CarryState.IDLE
        self._held: Optional[ReasoningItem] = None

    @property
    def state(self) -> CarryState:
        return self._state

    @property
    def held(self) -> Optional[ReasoningItem]:
        return self._held

    def hold(self, item: ReasoningItem) -> AssistantMessage:
        # A previously held item already emitted its carrier; replacing it is
        # the same as holding from IDLE.
        if self._state is CarryState.HOLDING:
            logger.debug("Replacing held reasoning item that no action consumed.")
        self._state = CarryState.HOLDING
        self._held = item
        return AssistantMessage(reasoning=item.model_copy(deep=True))

    def take(self, *, preserve_thinking_blocks: bool) -> List[ThinkingBlock]:
        if self._state is CarryState.IDLE or self._held is None:
            return []

        item = self._held
        self._state = CarryState.IDLE
        self._held = None

        if not preserve_thinking_blocks:
            return []
        blocks = project_thinking_blocks(item.segments, item.signature)
        logger.debug("Discharged held reasoning into %d thinking block(s).", len(blocks))
        return blocks


__all__ = ["CarryState", "ReasoningCarry"]
