"""Provider profiles deciding how reasoning is re-encoded."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from pydantic import BaseModel

from chat_bridge.conversion import items_to_messages
from chat_bridge.types import Message, OutputItem

logger = logging.getLogger(__name__)


class ProviderProfile(BaseModel):
    """Per-provider conversion settings."""
    name: str
    preserve_thinking_blocks: bool = False


_DEFAULT_PROVIDER = "openai"
_PROFILE_REGISTRY: Dict[str, ProviderProfile] = {
    "openai": ProviderProfile(name="openai"),
    # Anthropic models reject assistant turns whose reasoning is not echoed
    # back as leading, signed thinking blocks.
    "anthropic": ProviderProfile(name="anthropic", preserve_thinking_blocks=True),
    "bedrock-anthropic": ProviderProfile(name="bedrock-anthropic", preserve_thinking_blocks=True),
    "vertex-anthropic": ProviderProfile(name="vertex-anthropic", preserve_thinking_blocks=True),
}


def register_provider_profile(profile: ProviderProfile) -> None:
    """Add or replace a profile under its lowercased name."""

    key = profile.name.lower()
    if key in _PROFILE_REGISTRY:
        logger.debug("Replacing provider profile '%s'.", key)
    _PROFILE_REGISTRY[key] = profile


def make_provider_profile(name: Optional[str] = None) -> ProviderProfile:
    """Return a provider profile by name."""

    resolved_name = (name or _DEFAULT_PROVIDER).lower()
    try:
        return _PROFILE_REGISTRY[resolved_name]
    except KeyError as exc:
        raise ValueError(f"Unknown provider '{name}'.") from exc


def convert_for_provider(
    items: Iterable[OutputItem | Mapping[str, Any]],
    provider: Optional[str] = None,
) -> List[Message]:
    profile = make_provider_profile(provider)
    return items_to_messages(items, preserve_thinking_blocks=profile.preserve_thinking_blocks)


__all__ = [
    "ProviderProfile",
    "convert_for_provider",
    "make_provider_profile",
    "register_provider_profile",
]
