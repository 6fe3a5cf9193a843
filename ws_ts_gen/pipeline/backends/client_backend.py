"""
Backends for the client side: the dispatcher (client.ts) and a runnable
sample (client-example.ts).

The client listens for "receive" messages and gets a typed send method for
every "send" message.
"""

from __future__ import annotations

from typing import Any

from ...utils import ts_literal, ts_property_key
from ..analyzer.ir_nodes import MessageBinding, ResolvedModel
from .base import TypeScriptBackend


class ClientBackend(TypeScriptBackend):
    FILE_NAME = "client.ts"

    def build_context(self, model: ResolvedModel) -> dict[str, Any]:
        return {
            "type_imports": self.type_imports(model),
            "listeners": [self.binding_context(binding) for binding in model.receive_operations],
            "senders": [self.binding_context(binding) for binding in model.send_operations],
            "url": self.server_url(model),
        }


class ClientExampleBackend(TypeScriptBackend):
    FILE_NAME = "client-example.ts"

    def build_context(self, model: ResolvedModel) -> dict[str, Any]:
        example_send = None
        if model.send_operations:
            binding = model.send_operations[0]
            example_send = self.binding_context(binding)
            example_send["example"] = self.example_payload(binding)

        return {
            "listeners": [self.binding_context(binding) for binding in model.receive_operations],
            "example_send": example_send,
        }

    def example_payload(self, binding: MessageBinding) -> str:
        """Object literal with the const-pinned properties of the payload."""
        fields = [
            f"{ts_property_key(name)}: {ts_literal(prop.const)}"
            for name, prop in binding.schema.properties.items()
            if prop.has_const
        ]
        if not fields:
            return "{}"
        return "{ " + ", ".join(fields) + " }"
