"""Thinking blocks must lead assistant turns that follow reasoning."""

from chat_bridge.conversion import items_to_messages
from chat_bridge.types import (
    AssistantMessage,
    AssistantMessageItem,
    FunctionCallItem,
    OutputText,
    ReasoningItem,
    ReasoningText,
    TextBlock,
    ThinkingBlock,
)


def _tool_call_messages(messages):
    return [m for m in messages if isinstance(m, AssistantMessage) and m.tool_calls]


def test_preserves_thinking_block_before_tool_call(weather_reasoning, weather_call):
    messages = items_to_messages([weather_reasoning, weather_call], True)

    assistant = _tool_call_messages(messages)
    assert len(assistant) == 1
    content = assistant[0].content
    assert content[0] == ThinkingBlock(
        thinking="The user is asking about weather. Let me use the weather tool to get this information.",
        signature="TestSignature123",
    )
    assert len(assistant[0].tool_calls) == 1
    assert assistant[0].tool_calls[0].name == "get_weather"
    assert assistant[0].tool_calls[0].id == "call_123"
    assert assistant[0].tool_calls[0].arguments == '{"city": "Tokyo"}'


def test_no_thinking_blocks_when_not_preserving(weather_reasoning, weather_call):
    messages = items_to_messages([weather_reasoning, weather_call], False)

    assistant = _tool_call_messages(messages)
    assert len(assistant) == 1
    assert not assistant[0].content
    for message in messages:
        for block in getattr(message, "content", None) or []:
            assert not isinstance(block, ThinkingBlock)


def test_no_thinking_blocks_anywhere_when_not_preserving():
    items = [
        ReasoningItem(segments=[ReasoningText(text="first")], signature="s1"),
        AssistantMessageItem(content=[OutputText(text="Looking it up.")]),
        ReasoningItem(segments=[ReasoningText(text="second")], signature="s2"),
        FunctionCallItem(id="call_1", name="lookup", arguments="{}"),
    ]

    messages = items_to_messages(items, False)

    blocks = [block for message in messages for block in message.content or []]
    assert blocks == [TextBlock(text="Looking it up.")]
    assert all(isinstance(block, TextBlock) for block in blocks)


def test_multiple_segments_share_signature():
    reasoning = ReasoningItem(
        segments=[ReasoningText(text="First thought"), ReasoningText(text="Second thought")],
        signature="TestSignature456",
    )
    call = FunctionCallItem(id="call_456", name="test_tool", arguments="{}", status="completed")

    assistant = _tool_call_messages(items_to_messages([reasoning, call], True))

    assert assistant[0].content == [
        ThinkingBlock(thinking="First thought", signature="TestSignature456"),
        ThinkingBlock(thinking="Second thought", signature="TestSignature456"),
    ]


def test_reasoning_before_assistant_text():
    reasoning = ReasoningItem(
        segments=[ReasoningText(text="I need to analyze this request carefully.")],
        signature="HistorySignature",
    )
    text = AssistantMessageItem(
        content=[OutputText(text="Let me help you with that.")],
        status="completed",
    )

    messages = items_to_messages([reasoning, text], True)

    assert len(messages) == 2
    carrier, reply = messages
    assert carrier.reasoning == reasoning
    assert carrier.content is None and carrier.tool_calls is None
    assert reply.content == [
        ThinkingBlock(thinking="I need to analyze this request carefully.", signature="HistorySignature"),
        TextBlock(text="Let me help you with that."),
    ]
    assert reply.reasoning is None


def test_empty_segments_produce_no_blocks():
    reasoning = ReasoningItem(segments=[], signature="TestSignature000")
    call = FunctionCallItem(id="call_000", name="test_tool", arguments="{}", status="completed")

    assistant = _tool_call_messages(items_to_messages([reasoning, call], True))

    assert len(assistant) == 1
    assert not assistant[0].content


def test_missing_signature_is_kept_absent():
    reasoning = ReasoningItem(segments=[ReasoningText(text="unsigned")])
    call = FunctionCallItem(id="c1", name="t", arguments="{}")

    assistant = _tool_call_messages(items_to_messages([reasoning, call], True))

    assert assistant[0].content == [ThinkingBlock(thinking="unsigned", signature=None)]


def test_reasoning_carrier_emitted_in_both_modes(weather_reasoning, weather_call):
    for preserve in (True, False):
        messages = items_to_messages([weather_reasoning, weather_call], preserve)
        carriers = [m for m in messages if m.reasoning is not None]
        assert len(carriers) == 1
        assert carriers[0].reasoning.signature == "TestSignature123"
        assert messages.index(carriers[0]) == 0


def test_conversion_is_repeatable(weather_reasoning, weather_call):
    items = [weather_reasoning, weather_call]

    assert items_to_messages(items, True) == items_to_messages(items, True)
    assert items_to_messages(items, False) == items_to_messages(items, False)


def test_carrier_does_not_alias_input(weather_reasoning, weather_call):
    messages = items_to_messages([weather_reasoning, weather_call], True)

    messages[0].reasoning.segments.clear()

    assert len(weather_reasoning.segments) == 1
