"""
Output-item to chat-completion message conversion with thinking-block support.

Only the core entry points are re-exported here; import from submodules for
advanced customization.
  - `conversion` hosts the single-pass item converter and its parts.
  - `types` defines the Pydantic item and message models.
  - `wire` encodes messages as chat-completion request dicts.
  - `providers` maps provider names to conversion settings.
  - `history` accumulates converted turns for multi-turn requests.
"""

__version__ = "0.1.0"

from chat_bridge.conversion import items_to_messages
from chat_bridge.history import ChatHistory
from chat_bridge.providers import ProviderProfile, convert_for_provider, make_provider_profile
from chat_bridge.wire import messages_to_payload

convert = items_to_messages

__all__ = [
    "__version__",
    "ChatHistory",
    "ProviderProfile",
    "convert",
    "convert_for_provider",
    "items_to_messages",
    "make_provider_profile",
    "messages_to_payload",
]
