"""
IR (Intermediate Representation) node definitions.

These nodes represent the fully resolved, direction-classified document,
ready for code generation. Every reference is resolved. The model is
built once per run and shared read-only with every backend.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from ..schema_ast.nodes import ChannelNode, InfoNode, MessageNode, SchemaNode, ServerNode


class Direction(str, Enum):
    """Direction of an operation, seen from the client."""

    SEND = "send"  # client -> server, needs a server handler
    RECEIVE = "receive"  # server -> client, needs a client listener


@dataclass(frozen=True)
class MessageBinding:
    """A message name with its resolved message and payload schema."""

    name: str
    message: MessageNode
    schema: SchemaNode

    @property
    def schema_name(self) -> str:
        return self.schema.name


@dataclass(frozen=True)
class ResolvedOperation:
    """An operation with its channel and messages resolved."""

    name: str
    action: object
    channel: ChannelNode
    # Deduplicated by message name, first occurrence wins
    messages: tuple[MessageBinding, ...] = ()
    description: str | None = None


def _empty_mapping() -> Mapping:
    return MappingProxyType({})


@dataclass(frozen=True)
class ResolvedModel:
    """The complete Intermediate Representation."""

    info: InfoNode = field(default_factory=InfoNode)
    asyncapi_version: str = ""

    # Ordered schema name -> schema (global type emission)
    schemas: Mapping[str, SchemaNode] = field(default_factory=_empty_mapping)

    # Ordered message name -> message (everything under components.messages)
    messages: Mapping[str, MessageNode] = field(default_factory=_empty_mapping)

    channels: Mapping[str, ChannelNode] = field(default_factory=_empty_mapping)
    operations: Mapping[str, ResolvedOperation] = field(default_factory=_empty_mapping)
    servers: tuple[ServerNode, ...] = ()

    # Client -> server messages, one entry per message name
    send_operations: tuple[MessageBinding, ...] = ()

    # Server -> client messages, one entry per message name
    receive_operations: tuple[MessageBinding, ...] = ()

    def message_type_union(self) -> tuple[str, ...]:
        """All distinct message names, send messages first, in first-seen order."""
        names: dict[str, None] = {}
        for binding in self.send_operations + self.receive_operations:
            names.setdefault(binding.name)
        return tuple(names)

    def bindings(self) -> tuple[MessageBinding, ...]:
        """One binding per name in message_type_union() order."""
        seen: dict[str, MessageBinding] = {}
        for binding in self.send_operations + self.receive_operations:
            seen.setdefault(binding.name, binding)
        return tuple(seen.values())

    def primary_server(self) -> ServerNode | None:
        """The first declared server, used for connection defaults."""
        return self.servers[0] if self.servers else None

    def has_receive_operations(self) -> bool:
        return bool(self.receive_operations)
