import json

from chat_bridge import ChatHistory, make_provider_profile

if __name__ == "__main__":
    items = [
        {
            "type": "reasoning",
            "segments": [{"text": "The user wants the weather; call the tool."}],
            "signature": "EqQBCkYIBxgCKkDsig",
        },
        {
            "type": "function_call",
            "id": "call_123",
            "name": "get_weather",
            "arguments": '{"city": "Tokyo"}',
            "status": "completed",
        },
    ]

    profile = make_provider_profile("anthropic")
    history = ChatHistory()
    history.extend_output_items(items, preserve_thinking_blocks=profile.preserve_thinking_blocks)
    print(json.dumps(history.to_payload(), indent=2, ensure_ascii=False))
