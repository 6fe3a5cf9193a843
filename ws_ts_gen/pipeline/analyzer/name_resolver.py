"""
Name resolver for generated identifiers.

A message name is the only key linking the generated artifacts together,
so every identifier derived from it is computed here and nowhere else:
"ping" becomes PingHandler in handlers.ts, registerPing on the registry,
onPing on the client, and so on. Characters that are not allowed in an
identifier separate words ("user-joined" becomes UserJoinedHandler).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ...utils import decapitalize, is_identifier, to_type_name
from ..errors import IdentifierCollisionError, InvalidMessageNameError


@dataclass(frozen=True)
class MessageIdentifiers:
    """Identifiers derived from one message name."""

    message_name: str
    type_name: str  # "Ping"
    handler_interface: str  # "PingHandler"
    default_handler: str  # "DefaultPingHandler"
    register_method: str  # "registerPing"
    listener_method: str  # "onPing"
    send_method: str  # "sendPing"
    local_name: str  # "pingHandler"


def identifiers_for(message_name: str) -> MessageIdentifiers:
    """
    Derive the identifiers for one message name.

    Raises:
        InvalidMessageNameError: If the name has no identifier form (e.g. "200")
    """
    type_name = to_type_name(message_name)
    if not is_identifier(type_name):
        raise InvalidMessageNameError(message_name, type_name)
    return MessageIdentifiers(
        message_name=message_name,
        type_name=type_name,
        handler_interface=f"{type_name}Handler",
        default_handler=f"Default{type_name}Handler",
        register_method=f"register{type_name}",
        listener_method=f"on{type_name}",
        send_method=f"send{type_name}",
        local_name=f"{decapitalize(type_name)}Handler",
    )


class NameResolver:
    """Computes and caches MessageIdentifiers, rejecting collisions."""

    def __init__(self) -> None:
        self._by_name: dict[str, MessageIdentifiers] = {}
        self._owners: dict[str, str] = {}  # type_name -> message name

    def resolve_names(self, message_names: Iterable[str]) -> dict[str, MessageIdentifiers]:
        """
        Derive identifiers for every message name.

        Raises:
            IdentifierCollisionError: If two distinct names share a type name
                (e.g. "ping" and "Ping")
            InvalidMessageNameError: If a name has no identifier form
        """
        for name in message_names:
            self.get(name)
        return dict(self._by_name)

    def get(self, message_name: str) -> MessageIdentifiers:
        identifiers = self._by_name.get(message_name)
        if identifiers is not None:
            return identifiers

        identifiers = identifiers_for(message_name)
        owner = self._owners.get(identifiers.type_name)
        if owner is not None and owner != message_name:
            raise IdentifierCollisionError(identifiers.type_name, (owner, message_name))

        self._owners[identifiers.type_name] = message_name
        self._by_name[message_name] = identifiers
        return identifiers
