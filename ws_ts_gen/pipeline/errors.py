"""
Error taxonomy for the generation pipeline.

Every error is terminal for the current run: generation is a deterministic
transform of static input, so nothing is retried and nothing is defaulted.
"""

from __future__ import annotations


class WsTsGenError(Exception):
    """Base class for all errors raised by ws_ts_gen."""


class DocumentLoadError(WsTsGenError):
    """Raised when a schema document cannot be read or parsed."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot load {source}: {reason}")


class SchemaStructureError(WsTsGenError):
    """Raised when a mandatory section of the document is missing or malformed.

    Attributes:
        section: Dotted name of the offending section (e.g. "components")
    """

    def __init__(self, section: str, detail: str = ""):
        self.section = section
        self.detail = detail
        message = f"Missing {section} section"
        if detail:
            message = f"Invalid {section} section: {detail}"
        super().__init__(message)


class UnresolvedReferenceError(WsTsGenError):
    """Raised when a $ref does not point to a declared entity.

    Attributes:
        ref: The dangling reference path
        referrer: Name of the entity holding the reference
    """

    def __init__(self, ref: str, referrer: str):
        self.ref = ref
        self.referrer = referrer
        shown = ref or "<missing $ref>"
        super().__init__(f"Unresolved reference {shown} in {referrer}")


class UnknownActionError(WsTsGenError):
    """Raised when an operation action is neither "send" nor "receive"."""

    def __init__(self, operation: str, action: object):
        self.operation = operation
        self.action = action
        super().__init__(f"Operation {operation} has unknown action {action!r} (expected 'send' or 'receive')")


class IdentifierCollisionError(WsTsGenError):
    """Raised when two message names map to the same generated identifier."""

    def __init__(self, identifier: str, names: tuple[str, ...]):
        self.identifier = identifier
        self.names = names
        super().__init__(f"Messages {', '.join(repr(n) for n in names)} all map to identifier {identifier}")


class InvalidMessageNameError(WsTsGenError):
    """Raised when a message name cannot be turned into a TypeScript identifier."""

    def __init__(self, message_name: str, identifier: str):
        self.message_name = message_name
        self.identifier = identifier
        super().__init__(f"Message {message_name!r} does not map to a valid identifier (got {identifier!r})")


class OutputValidationError(WsTsGenError):
    """Raised when rendered output fails structural validation before writing."""
