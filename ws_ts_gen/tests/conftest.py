import json
from pathlib import Path

import pytest

from ws_ts_gen.pipeline import CodeGeneratorConfig

SCHEMA_DIR = Path(__file__).parent / "test_data" / "schemas"


def _message(name: str, schema: str) -> dict:
    return {
        "name": name,
        "title": name.capitalize(),
        "contentType": "application/json",
        "payload": {"$ref": f"#/components/schemas/{schema}"},
    }


def _operation(action: str, *messages: str) -> dict:
    return {
        "action": action,
        "channel": {"$ref": "#/channels/root"},
        "messages": [{"$ref": f"#/components/messages/{m}"} for m in messages],
    }


@pytest.fixture
def ping_pong_document() -> dict:
    """One channel, "ping" sent by the client and "pong" received from the server."""
    return {
        "asyncapi": "3.0.0",
        "info": {"title": "Ping Pong", "version": "1.0.0"},
        "channels": {
            "root": {
                "address": "/",
                "messages": {
                    "ping": {"$ref": "#/components/messages/ping"},
                    "pong": {"$ref": "#/components/messages/pong"},
                },
            }
        },
        "operations": {
            "sendPing": _operation("send", "ping"),
            "receivePong": _operation("receive", "pong"),
        },
        "components": {
            "messages": {
                "ping": _message("ping", "PingMessage"),
                "pong": _message("pong", "PongMessage"),
            },
            "schemas": {
                "PingMessage": {
                    "type": "object",
                    "required": ["type"],
                    "properties": {"type": {"type": "string", "const": "ping"}},
                },
                "PongMessage": {
                    "type": "object",
                    "required": ["type"],
                    "properties": {
                        "type": {"type": "string", "const": "pong"},
                        "timestamp": {"type": "number"},
                    },
                },
            },
        },
    }


@pytest.fixture
def make_operation():
    return _operation


@pytest.fixture
def make_message():
    return _message


@pytest.fixture
def chat_document() -> dict:
    with open(SCHEMA_DIR / "chat.json") as f:
        return json.load(f)


@pytest.fixture
def ping_pong_yaml_path() -> Path:
    return SCHEMA_DIR / "ping_pong.yaml"


@pytest.fixture
def quiet_config() -> CodeGeneratorConfig:
    """Default config without the generation comment, for stable output."""
    config = CodeGeneratorConfig()
    config.add_generation_comment = False
    return config
