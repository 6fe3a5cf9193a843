"""
Backends for the server side: the dispatcher (server.ts) and a runnable
sample (index.ts) wiring the default handlers.
"""

from __future__ import annotations

from typing import Any

from ..analyzer.ir_nodes import ResolvedModel
from .base import TypeScriptBackend


class ServerBackend(TypeScriptBackend):
    FILE_NAME = "server.ts"

    def build_context(self, model: ResolvedModel) -> dict[str, Any]:
        handlers = [self.binding_context(binding) for binding in model.send_operations]
        return {
            "type_imports": self.type_imports(model),
            "handler_imports": ["MessageHandlerRegistry", *(h["ids"].handler_interface for h in handlers)],
            "handlers": handlers,
            "send_greeting": model.has_receive_operations(),
        }


class ServerIndexBackend(TypeScriptBackend):
    FILE_NAME = "index.ts"

    def build_context(self, model: ResolvedModel) -> dict[str, Any]:
        return {
            "handlers": [self.binding_context(binding) for binding in model.send_operations],
            "port": self.server_port(model),
        }
