"""
TypeScript backends.

One backend per generated file.
"""

from __future__ import annotations

from .base import TypeScriptBackend
from .client_backend import ClientBackend, ClientExampleBackend
from .handlers_backend import HandlersBackend
from .server_backend import ServerBackend, ServerIndexBackend
from .types_backend import TypesBackend

__all__ = [
    "TypeScriptBackend",
    "TypesBackend",
    "HandlersBackend",
    "ServerBackend",
    "ServerIndexBackend",
    "ClientBackend",
    "ClientExampleBackend",
]
