"""Encode messages as chat-completion request dicts."""

from typing import Any, Dict, Iterable, List

from chat_bridge.types import AssistantMessage, Message, RawMessage


def _assistant_payload(message: AssistantMessage) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"role": message.role}

    if message.content is not None:
        payload["content"] = [block.model_dump(exclude_none=True) for block in message.content]

    if message.tool_calls is not None:
        payload["tool_calls"] = [
            {
                "id": call.id,
                "type": "function",
                "function": {
                    "name": call.name,
                    "arguments": call.arguments,
                },
            }
            for call in message.tool_calls
        ]

    if message.reasoning is not None:
        payload["reasoning"] = message.reasoning.model_dump(exclude_none=True)

    if message.refusal is not None:
        payload["refusal"] = message.refusal

    return payload


def message_to_payload(message: Message) -> Dict[str, Any]:
    """Return the request-body form of a single message."""

    if isinstance(message, AssistantMessage):
        return _assistant_payload(message)
    if isinstance(message, RawMessage):
        return dict(message.payload)
    raise TypeError(f"Unsupported message type: {type(message)!r}")


def messages_to_payload(messages: Iterable[Message]) -> List[Dict[str, Any]]:
    return [message_to_payload(message) for message in messages]


__all__ = ["message_to_payload", "messages_to_payload"]
