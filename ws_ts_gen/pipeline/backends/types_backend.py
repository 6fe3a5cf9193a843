"""
Backend for types.ts: one interface per schema plus the message unions.
"""

from __future__ import annotations

from typing import Any

from ...utils import ts_string
from ..analyzer.ir_nodes import ResolvedModel
from .base import TypeScriptBackend


class TypesBackend(TypeScriptBackend):
    FILE_NAME = "types.ts"

    def build_context(self, model: ResolvedModel) -> dict[str, Any]:
        schemas = []
        for name, schema in model.schemas.items():
            schemas.append(
                {
                    "name": name,
                    "lines": [self.property_line(schema, prop_name, prop) for prop_name, prop in schema.properties.items()],
                }
            )

        message_names = model.message_type_union()
        message_type = " | ".join(ts_string(name) for name in message_names) or "never"

        # Payload schema of each message, once per schema
        payloads = list(dict.fromkeys(binding.schema_name for binding in model.bindings()))

        return {
            "schemas": schemas,
            "message_type": message_type,
            "message_union": payloads or ["never"],
        }
