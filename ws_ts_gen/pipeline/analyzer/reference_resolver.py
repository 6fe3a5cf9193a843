"""
Reference resolver for $ref resolution.

References have the form ``#/components/<kind>/<name>`` (or
``#/channels/<name>``). The document is shallow by construction
(operation -> message -> schema), so a reference is resolved by taking the
component after the last ``/`` and looking it up in the map of the kind the
caller expects. There is no generic JSON-Pointer walk.

Every lookup returns either :class:`Resolved` or :class:`Dangling`; callers
turn a dangling outcome into :class:`UnresolvedReferenceError` with
:meth:`ReferenceResolver.expect`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Generic, TypeVar

from ..errors import UnresolvedReferenceError
from ..schema_ast.nodes import ChannelNode, DocumentAST, MessageNode, OperationNode, SchemaNode
from .ir_nodes import MessageBinding, ResolvedOperation
from .ordered_registry import OrderedRegistry

T = TypeVar("T")


@dataclass(frozen=True)
class Resolved(Generic[T]):
    """A reference that points to a declared entity."""

    target: T


@dataclass(frozen=True)
class Dangling:
    """A reference whose target is not declared."""

    path: str


Resolution = Resolved | Dangling


def ref_name(ref: str) -> str:
    """Extract the target name of a reference ("#/components/messages/ping" -> "ping")."""
    return ref.rsplit("/", 1)[-1] if ref else ""


class ReferenceResolver:
    """Resolves $ref strings of a parsed document to the entities they name."""

    def __init__(self, ast: DocumentAST):
        """
        Initialize the resolver.

        Args:
            ast: The parsed document
        """
        self.ast = ast
        # One canonical binding per message name
        self._bindings: OrderedRegistry[str, MessageBinding] = OrderedRegistry()

    def _lookup(self, table: Mapping[str, T], ref: str) -> Resolved[T] | Dangling:
        name = ref_name(ref)
        if name and name in table:
            return Resolved(table[name])
        return Dangling(ref)

    def resolve_message(self, ref: str) -> Resolved[MessageNode] | Dangling:
        return self._lookup(self.ast.messages, ref)

    def resolve_schema(self, ref: str) -> Resolved[SchemaNode] | Dangling:
        return self._lookup(self.ast.schemas, ref)

    def resolve_channel(self, ref: str) -> Resolved[ChannelNode] | Dangling:
        return self._lookup(self.ast.channels, ref)

    @staticmethod
    def expect(outcome: Resolved[T] | Dangling, referrer: str) -> T:
        """
        Unwrap a resolution outcome.

        Args:
            outcome: Result of one of the resolve_* methods
            referrer: Description of the entity holding the reference

        Raises:
            UnresolvedReferenceError: If the outcome is Dangling
        """
        if isinstance(outcome, Dangling):
            raise UnresolvedReferenceError(outcome.path, referrer)
        return outcome.target

    def bind_message(self, ref: str, referrer: str) -> MessageBinding:
        """
        Resolve a message reference and the message's payload schema.

        Repeated references to the same message name return the binding
        created the first time.
        """
        message = self.expect(self.resolve_message(ref), referrer)
        binding = self._bindings.get(message.name)
        if binding is None:
            schema = self.expect(self.resolve_schema(message.payload_ref), f"message {message.name}")
            binding = MessageBinding(name=message.name, message=message, schema=schema)
            self._bindings.register(message.name, binding)
        return binding

    def resolve_operation(self, operation: OperationNode) -> ResolvedOperation:
        """Resolve the channel and messages of one operation."""
        referrer = f"operation {operation.name}"
        channel = self.expect(self.resolve_channel(operation.channel_ref), referrer)

        messages: OrderedRegistry[str, MessageBinding] = OrderedRegistry()
        for ref in operation.message_refs:
            binding = self.bind_message(ref, referrer)
            messages.register(binding.name, binding)

        return ResolvedOperation(
            name=operation.name,
            action=operation.action,
            channel=channel,
            messages=messages.values(),
            description=operation.description,
        )

    def check_all(self) -> None:
        """
        Resolve every reference in the document outside of operations.

        Covers channel messages, message payloads and property-level schema
        references, so that no dangling reference survives into the IR.

        Raises:
            UnresolvedReferenceError: On the first dangling reference
        """
        for channel in self.ast.channels.values():
            for ref in channel.message_refs.values():
                self.expect(self.resolve_message(ref), f"channel {channel.name}")

        for message in self.ast.messages.values():
            self.expect(self.resolve_schema(message.payload_ref), f"message {message.name}")

        for schema in self.ast.schemas.values():
            self._check_schema_refs(schema, f"schema {schema.name}")

    def _check_schema_refs(self, schema: SchemaNode, referrer: str) -> None:
        if schema.ref is not None:
            self.expect(self.resolve_schema(schema.ref), referrer)
        for prop in schema.properties.values():
            self._check_schema_refs(prop, referrer)
        if schema.items is not None:
            self._check_schema_refs(schema.items, referrer)

    @property
    def bindings(self) -> tuple[MessageBinding, ...]:
        """Every message binding created so far, in first-reference order."""
        return self._bindings.values()
