"""
Base class for TypeScript artifact backends.

Each backend renders one file from the ResolvedModel through a Jinja2
template. Backends only read the model; they never modify it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import jinja2

from ...utils import ts_literal, ts_property_key, ts_string
from ..analyzer.ir_nodes import MessageBinding, ResolvedModel
from ..analyzer.name_resolver import NameResolver
from ..analyzer.reference_resolver import ref_name
from ..config import CodeGeneratorConfig
from ..schema_ast.nodes import SchemaNode

TEMPLATE_DIR = Path(__file__).parent.parent.parent / "templates" / "typescript"


class TypeScriptBackend(ABC):
    """Abstract base class for the TypeScript backends."""

    # Schema type tag -> TypeScript type
    TYPE_MAP: dict[str, str] = {
        "string": "string",
        "number": "number",
        "integer": "number",
        "boolean": "boolean",
        "null": "null",
    }

    # Output file name, also the template name without ".jinja2"
    FILE_NAME: str = ""

    def __init__(self, config: CodeGeneratorConfig, names: NameResolver, generation_comment: str = ""):
        """
        Initialize the backend.

        Args:
            config: Code generation configuration
            names: Shared name resolver (one per run)
            generation_comment: Header line, empty to omit
        """
        self.config = config
        self.names = names
        self.generation_comment = generation_comment
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
            lstrip_blocks=True,
            trim_blocks=True,
            undefined=jinja2.StrictUndefined,
        )
        self.jinja_env.filters["ts_string"] = ts_string
        self.jinja_env.filters["ts_literal"] = ts_literal
        self.template = self.jinja_env.get_template(f"{self.FILE_NAME}.jinja2")

    def generate(self, model: ResolvedModel) -> str:
        """
        Render the artifact.

        Args:
            model: The resolved model

        Returns:
            Generated TypeScript source
        """
        context = self.build_context(model)
        context["generation_comment"] = self.generation_comment
        return self.template.render(**context) + "\n"

    @abstractmethod
    def build_context(self, model: ResolvedModel) -> dict[str, Any]:
        """Prepare the template variables for this artifact."""

    def translate_type(self, schema: SchemaNode) -> str:
        """
        Translate a schema node to a TypeScript type string.

        Args:
            schema: The schema node (a property or array item)

        Returns:
            TypeScript type string
        """
        if schema.has_const:
            return ts_literal(schema.const)
        if schema.ref is not None:
            return ref_name(schema.ref)
        if schema.enum:
            return " | ".join(ts_literal(value) for value in schema.enum)

        match schema.type_name:
            case "object":
                return "Record<string, any>" if schema.properties else "any"
            case "array":
                if schema.items is None:
                    return "any[]"
                item_type = self.translate_type(schema.items)
                if " | " in item_type:
                    item_type = f"({item_type})"
                return f"{item_type}[]"
            case type_name:
                return self.TYPE_MAP.get(type_name, "any")

    def type_imports(self, model: ResolvedModel) -> list[str]:
        """Names imported from './types' by the handler, server and client files."""
        return ["AsyncApiMessage", *model.schemas.keys()]

    def binding_context(self, binding: MessageBinding) -> dict[str, Any]:
        """Template variables shared by every per-message block."""
        return {
            "name": binding.name,
            "schema_name": binding.schema_name,
            "ids": self.names.get(binding.name),
            "title": binding.message.title,
        }

    def server_url(self, model: ResolvedModel) -> str:
        server = model.primary_server()
        if server is None:
            return f"ws://{self.config.default_host}:{self.config.default_port}"

        protocol = "wss" if server.protocol == "wss" else "ws"
        host = server.host or self.config.default_host
        port = server.port or self.config.default_port
        pathname = server.pathname
        if pathname and not pathname.startswith("/"):
            pathname = f"/{pathname}"
        return f"{protocol}://{host}:{port}{pathname}"

    def server_port(self, model: ResolvedModel) -> int:
        server = model.primary_server()
        if server is None or server.port is None:
            return self.config.default_port
        return server.port

    def property_line(self, schema: SchemaNode, name: str, prop: SchemaNode) -> str:
        """One interface member declaration, with its description as a trailing comment."""
        optional = "" if schema.is_required(name) else "?"
        line = f"{ts_property_key(name)}{optional}: {self.translate_type(prop)};"
        if prop.description:
            description = " ".join(str(prop.description).split())
            line += f" // {description}"
        return line
