"""
Structural validation of a raw AsyncAPI document.

Only the presence of the mandatory top-level sections is checked here.
The check is fail-fast: the first missing section aborts the run.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..errors import SchemaStructureError

# Checked in this order; the first missing one is reported
REQUIRED_SECTIONS = ("asyncapi", "info", "channels", "components")


def validate_document(document: Any) -> Any:
    """
    Check that the document has every mandatory top-level section.

    Args:
        document: The parsed (untyped) document tree

    Returns:
        The same document, unchanged

    Raises:
        SchemaStructureError: If the document is not a mapping or a
            mandatory section is absent
    """
    if not isinstance(document, Mapping):
        raise SchemaStructureError("document", f"expected a mapping, got {type(document).__name__}")

    for section in REQUIRED_SECTIONS:
        value = document.get(section)
        if value is None or value == "":
            raise SchemaStructureError(section)

    return document
