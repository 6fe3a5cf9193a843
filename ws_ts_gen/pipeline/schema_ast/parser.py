"""
AsyncAPI document parser that builds an AST.

Turns a validated document tree into typed nodes without resolving any
references or doing language-specific processing. Every mapping key and
``required`` entry is stored as a string, whatever scalar type the loader
produced for it (a YAML key ``200`` arrives as an int).
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from ..errors import SchemaStructureError
from .nodes import (
    ChannelNode,
    DocumentAST,
    InfoNode,
    MessageNode,
    OperationNode,
    SchemaNode,
    ServerNode,
)

DEFAULT_CONTENT_TYPE = "application/json"


class SchemaParser:
    """Parses a validated AsyncAPI document into a DocumentAST."""

    def parse(self, document: Mapping[str, Any]) -> DocumentAST:
        """
        Parse the document.

        Args:
            document: A document that passed validate_document()

        Returns:
            DocumentAST with every section parsed

        Raises:
            SchemaStructureError: If a section has the wrong shape or a
                schema lists a required property it does not declare
        """
        components = self._mapping(document["components"], "components")
        default_content_type = document.get("defaultContentType") or DEFAULT_CONTENT_TYPE

        schemas = {}
        for key, raw in self._mapping(components.get("schemas"), "components.schemas").items():
            name = str(key)
            path = f"#/components/schemas/{name}"
            schemas[name] = self._parse_schema_node(raw, name, path)

        messages = {}
        for key, raw in self._mapping(components.get("messages"), "components.messages").items():
            name = str(key)
            messages[name] = self._parse_message(name, raw, default_content_type)

        channels = {}
        for key, raw in self._mapping(document["channels"], "channels").items():
            name = str(key)
            channels[name] = self._parse_channel(name, raw)

        operations = {}
        for key, raw in self._mapping(document.get("operations"), "operations").items():
            name = str(key)
            operations[name] = self._parse_operation(name, raw)

        return DocumentAST(
            asyncapi_version=str(document["asyncapi"]),
            info=self._parse_info(document["info"]),
            default_content_type=default_content_type,
            servers=self._parse_servers(document.get("servers")),
            channels=MappingProxyType(channels),
            operations=MappingProxyType(operations),
            messages=MappingProxyType(messages),
            schemas=MappingProxyType(schemas),
        )

    def _mapping(self, value: Any, section: str) -> Mapping[str, Any]:
        """Return value as a mapping; a missing section is an empty one."""
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            raise SchemaStructureError(section, f"expected a mapping, got {type(value).__name__}")
        return value

    def _ref_of(self, value: Any) -> str:
        """Extract the $ref string of a reference object ("" if there is none)."""
        if isinstance(value, Mapping):
            ref = value.get("$ref")
            if isinstance(ref, str):
                return ref
        return ""

    def _parse_info(self, raw: Any) -> InfoNode:
        info = self._mapping(raw, "info")
        return InfoNode(
            title=str(info.get("title", "")),
            version=str(info.get("version", "")),
            description=info.get("description"),
        )

    def _parse_servers(self, raw: Any) -> tuple[ServerNode, ...]:
        servers = []
        for key, server in self._mapping(raw, "servers").items():
            name = str(key)
            server = self._mapping(server, f"servers.{name}")
            host = str(server.get("host", ""))
            port = server.get("port")

            # AsyncAPI 3 puts the port inside host ("localhost:8080")
            if port is None and ":" in host:
                host, _, port_text = host.rpartition(":")
                port = port_text

            servers.append(
                ServerNode(
                    name=name,
                    host=host,
                    port=self._parse_port(port, f"servers.{name}.port"),
                    protocol=str(server.get("protocol", "ws")),
                    pathname=str(server.get("pathname", "")),
                    description=server.get("description"),
                )
            )
        return tuple(servers)

    def _parse_port(self, value: Any, section: str) -> int | None:
        if value is None or value == "":
            return None
        try:
            return int(value)
        except (TypeError, ValueError) as exc:
            raise SchemaStructureError(section, f"port {value!r} is not a number") from exc

    def _parse_schema_node(self, raw: Any, name: str, path: str) -> SchemaNode:
        """
        Parse a schema node recursively.

        Args:
            raw: The schema dictionary
            name: Component or property name
            path: Current path in the document (for error messages)
        """
        schema = self._mapping(raw, path)

        properties = {}
        for key, prop_schema in self._mapping(schema.get("properties"), f"{path}/properties").items():
            prop_name = str(key)
            properties[prop_name] = self._parse_schema_node(prop_schema, prop_name, f"{path}/properties/{prop_name}")

        required = schema.get("required") or []
        if not isinstance(required, list):
            raise SchemaStructureError(f"{path}/required", "expected a list")
        required = [str(prop) for prop in required]
        missing = [prop for prop in required if prop not in properties]
        if missing:
            raise SchemaStructureError(f"{path}/required", f"undeclared properties {', '.join(missing)}")

        items = None
        if isinstance(schema.get("items"), Mapping):
            items = self._parse_schema_node(schema["items"], name, f"{path}/items")

        ref = schema.get("$ref")

        return SchemaNode(
            name=name,
            type_name=str(schema.get("type") or ""),
            properties=MappingProxyType(properties),
            required=tuple(required),
            const=schema.get("const"),
            has_const="const" in schema,
            items=items,
            enum=tuple(schema.get("enum") or ()),
            ref=ref if isinstance(ref, str) else None,
            description=schema.get("description"),
            source_path=path,
        )

    def _parse_message(self, name: str, raw: Any, default_content_type: str) -> MessageNode:
        path = f"#/components/messages/{name}"
        message = self._mapping(raw, path)
        return MessageNode(
            name=name,
            title=str(message.get("title") or message.get("name") or name),
            summary=message.get("summary"),
            content_type=message.get("contentType") or default_content_type,
            payload_ref=self._ref_of(message.get("payload")),
            source_path=path,
        )

    def _parse_channel(self, name: str, raw: Any) -> ChannelNode:
        path = f"#/channels/{name}"
        channel = self._mapping(raw, path)
        message_refs = {str(key): self._ref_of(value) for key, value in self._mapping(channel.get("messages"), f"{path}/messages").items()}
        return ChannelNode(
            name=name,
            address=str(channel.get("address") or ""),
            message_refs=MappingProxyType(message_refs),
            source_path=path,
        )

    def _parse_operation(self, name: str, raw: Any) -> OperationNode:
        path = f"#/operations/{name}"
        operation = self._mapping(raw, path)

        messages = operation.get("messages") or []
        if not isinstance(messages, list):
            raise SchemaStructureError(f"{path}/messages", "expected a list")

        return OperationNode(
            name=name,
            action=operation.get("action"),
            channel_ref=self._ref_of(operation.get("channel")),
            message_refs=tuple(self._ref_of(message) for message in messages),
            description=operation.get("description"),
            source_path=path,
        )
