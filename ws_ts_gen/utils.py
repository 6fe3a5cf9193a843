"""
Utility functions for the AsyncAPI to TypeScript generator.
"""

import json
import re

# Characters allowed in a TypeScript identifier (ASCII subset)
_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_SEPARATOR_PATTERN = re.compile(r"[^A-Za-z0-9_$]+")


def capitalize(text: str) -> str:
    """Upper-case the first character, leaving the rest untouched.

    Examples:
        "ping" -> "Ping"
        "userJoined" -> "UserJoined"
        "" -> ""
    """
    if not text:
        return ""
    return text[0].upper() + text[1:]


def to_type_name(text: str) -> str:
    """Build a PascalCase identifier from a message name.

    Characters that cannot appear in an identifier act as word separators.

    Examples:
        "ping" -> "Ping"
        "user-joined" -> "UserJoined"
        "room.message" -> "RoomMessage"
    """
    return "".join(capitalize(part) for part in _SEPARATOR_PATTERN.split(text))


def decapitalize(text: str) -> str:
    """Lower-case the first character, leaving the rest untouched."""
    if not text:
        return ""
    return text[0].lower() + text[1:]


def is_identifier(text: str) -> bool:
    """Check whether text can be used verbatim as a TypeScript identifier."""
    return bool(_IDENTIFIER_PATTERN.match(text))


def ts_string(value: object) -> str:
    """Render a value as a single-quoted TypeScript string literal."""
    escaped = str(value).replace("\\", "\\\\").replace("'", "\\'").replace("\n", "\\n")
    return f"'{escaped}'"


def ts_literal(value: object) -> str:
    """Render a const/enum value as a TypeScript literal type."""
    if isinstance(value, str):
        return ts_string(value)
    return json.dumps(value)


def ts_property_key(name: str) -> str:
    """Render an object property key, quoting it when it is not an identifier."""
    return name if is_identifier(name) else ts_string(name)
