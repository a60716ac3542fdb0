import pytest

from chat_bridge.types import FunctionCallItem, ReasoningItem, ReasoningText


@pytest.fixture
def weather_reasoning():
    return ReasoningItem(
        segments=[
            ReasoningText(
                text="The user is asking about weather. Let me use the weather tool to get this information."
            )
        ],
        signature="TestSignature123",
    )


@pytest.fixture
def weather_call():
    return FunctionCallItem(
        id="call_123",
        name="get_weather",
        arguments='{"city": "Tokyo"}',
        status="completed",
    )
