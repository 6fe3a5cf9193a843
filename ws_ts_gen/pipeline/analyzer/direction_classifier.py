"""
Direction classifier.

Partitions resolved operations into the messages a server must handle
("send": client -> server) and the messages a client must listen for
("receive": server -> client). Each side is deduplicated by message name
independently, so a message used in both directions appears once on each
side.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..errors import UnknownActionError
from .ir_nodes import Direction, MessageBinding, ResolvedOperation
from .ordered_registry import OrderedRegistry


@dataclass(frozen=True)
class Classification:
    send: tuple[MessageBinding, ...] = ()
    receive: tuple[MessageBinding, ...] = ()


def direction_of(operation: ResolvedOperation) -> Direction:
    """
    Map an operation's action to a Direction.

    Raises:
        UnknownActionError: If the action is neither "send" nor "receive"
    """
    try:
        return Direction(operation.action)
    except ValueError as exc:
        raise UnknownActionError(operation.name, operation.action) from exc


def classify(operations: Iterable[ResolvedOperation]) -> Classification:
    """
    Split operations by direction.

    Args:
        operations: Resolved operations in document order

    Returns:
        Classification with one entry per message name on each side,
        in order of first appearance
    """
    registries: dict[Direction, OrderedRegistry[str, MessageBinding]] = {
        Direction.SEND: OrderedRegistry(),
        Direction.RECEIVE: OrderedRegistry(),
    }

    for operation in operations:
        registry = registries[direction_of(operation)]
        for binding in operation.messages:
            registry.register(binding.name, binding)

    return Classification(
        send=registries[Direction.SEND].values(),
        receive=registries[Direction.RECEIVE].values(),
    )
