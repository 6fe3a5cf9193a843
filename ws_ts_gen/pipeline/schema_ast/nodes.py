"""
AST node definitions for an AsyncAPI document.

These nodes represent the parsed structure of the document before any
reference resolution. References are kept as raw ``$ref`` strings; an
absent reference is stored as an empty string so the resolver reports it.
Nodes are frozen and their mappings are read-only views.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


def _empty_mapping() -> Mapping:
    return MappingProxyType({})


@dataclass(frozen=True)
class SchemaNode:
    """A payload schema or one of its nested property schemas."""

    name: str = ""  # Component name for top-level schemas, property name otherwise
    type_name: str = ""  # "string", "number", "integer", "boolean", "object", "array" or ""

    # Ordered property name -> nested schema
    properties: Mapping[str, SchemaNode] = field(default_factory=_empty_mapping)
    required: tuple[str, ...] = ()

    # Literal pin (e.g. the discriminator tag of a message)
    const: Any = None
    has_const: bool = False

    items: SchemaNode | None = None
    enum: tuple[Any, ...] = ()

    # Property-level "$ref" to another component schema
    ref: str | None = None

    description: str | None = None

    # Location in the document (for error messages)
    source_path: str = ""

    def is_required(self, property_name: str) -> bool:
        return property_name in self.required


@dataclass(frozen=True)
class MessageNode:
    """A message declared under components.messages."""

    name: str = ""  # Key in components.messages
    title: str = ""
    summary: str | None = None
    content_type: str = "application/json"
    payload_ref: str = ""
    source_path: str = ""


@dataclass(frozen=True)
class ChannelNode:
    """An addressable channel."""

    name: str = ""
    address: str = ""
    # Ordered message key -> message $ref
    message_refs: Mapping[str, str] = field(default_factory=_empty_mapping)
    source_path: str = ""


@dataclass(frozen=True)
class OperationNode:
    """A send or receive operation bound to one channel."""

    name: str = ""
    action: Any = None  # Raw value, checked by the direction classifier
    channel_ref: str = ""
    message_refs: tuple[str, ...] = ()
    description: str | None = None
    source_path: str = ""


@dataclass(frozen=True)
class ServerNode:
    """A server entry, used for connection defaults in generated code."""

    name: str = ""
    host: str = ""
    port: int | None = None
    protocol: str = "ws"
    pathname: str = ""
    description: str | None = None


@dataclass(frozen=True)
class InfoNode:
    title: str = ""
    version: str = ""
    description: str | None = None


@dataclass(frozen=True)
class DocumentAST:
    """The parsed document, references still unresolved."""

    asyncapi_version: str = ""
    info: InfoNode = field(default_factory=InfoNode)
    default_content_type: str = "application/json"
    servers: tuple[ServerNode, ...] = ()
    channels: Mapping[str, ChannelNode] = field(default_factory=_empty_mapping)
    operations: Mapping[str, OperationNode] = field(default_factory=_empty_mapping)
    messages: Mapping[str, MessageNode] = field(default_factory=_empty_mapping)
    schemas: Mapping[str, SchemaNode] = field(default_factory=_empty_mapping)
