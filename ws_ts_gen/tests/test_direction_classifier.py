import pytest

from ws_ts_gen.pipeline.analyzer import Direction, MessageBinding, ResolvedOperation, classify, direction_of
from ws_ts_gen.pipeline.errors import UnknownActionError
from ws_ts_gen.pipeline.schema_ast import ChannelNode, MessageNode, SchemaNode

CHANNEL = ChannelNode(name="root", address="/")


def binding(name: str) -> MessageBinding:
    return MessageBinding(
        name=name,
        message=MessageNode(name=name, title=name),
        schema=SchemaNode(name=f"{name.capitalize()}Message", type_name="object"),
    )


def operation(name: str, action: object, *messages: str) -> ResolvedOperation:
    return ResolvedOperation(
        name=name,
        action=action,
        channel=CHANNEL,
        messages=tuple(binding(m) for m in messages),
    )


def test_direction_of():
    assert direction_of(operation("a", "send")) is Direction.SEND
    assert direction_of(operation("b", "receive")) is Direction.RECEIVE


@pytest.mark.parametrize("action", ["publish", "subscribe", "", None, "SEND"])
def test_unknown_action(action):
    with pytest.raises(UnknownActionError) as exc_info:
        classify([operation("weird", action, "ping")])

    assert exc_info.value.operation == "weird"
    assert exc_info.value.action == action


def test_partition_by_direction():
    result = classify(
        [
            operation("sendPing", "send", "ping"),
            operation("receivePong", "receive", "pong"),
        ]
    )

    assert [b.name for b in result.send] == ["ping"]
    assert [b.name for b in result.receive] == ["pong"]


def test_duplicates_collapse_in_first_seen_order():
    result = classify(
        [
            operation("op1", "send", "join", "chat"),
            operation("op2", "send", "chat", "leave", "join"),
        ]
    )

    assert [b.name for b in result.send] == ["join", "chat", "leave"]
    assert result.receive == ()


def test_first_registration_wins():
    first = operation("op1", "send", "chat")
    second = operation("op2", "send", "chat")

    result = classify([first, second])

    assert result.send == (first.messages[0],)


def test_message_in_both_directions_appears_on_each_side():
    result = classify(
        [
            operation("sendChat", "send", "chat"),
            operation("receiveChat", "receive", "chat", "joined"),
        ]
    )

    assert [b.name for b in result.send] == ["chat"]
    assert [b.name for b in result.receive] == ["chat", "joined"]


def test_operation_without_messages():
    result = classify([operation("noop", "send")])

    assert result.send == ()
