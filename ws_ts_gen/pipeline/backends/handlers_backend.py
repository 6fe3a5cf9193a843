"""
Backend for handlers.ts: server-side handler contracts for "send" messages.
"""

from __future__ import annotations

from typing import Any

from ..analyzer.ir_nodes import MessageBinding, ResolvedModel
from .base import TypeScriptBackend


class HandlersBackend(TypeScriptBackend):
    FILE_NAME = "handlers.ts"

    def build_context(self, model: ResolvedModel) -> dict[str, Any]:
        receive_names = {binding.name for binding in model.receive_operations}
        handlers = []
        for binding in model.send_operations:
            ctx = self.binding_context(binding)
            ctx["default_response"] = self.default_response(binding, receive_names)
            handlers.append(ctx)

        handler_union = " | ".join(h["ids"].handler_interface for h in handlers) or "never"

        return {
            "type_imports": self.type_imports(model),
            "handlers": handlers,
            "handler_union": handler_union,
        }

    def default_response(self, binding: MessageBinding, receive_names: set[str]) -> str:
        """Body line of the generated default handler."""
        if binding.name == "ping" and ("pong" in receive_names or not receive_names):
            return "ws.send(JSON.stringify({ type: 'pong', timestamp: Date.now() }));"
        if binding.name == "error":
            return "// Error messages typically do not send a response"
        return f"// Implement response logic for {binding.name}"
