"""
Schema analyzer that turns a raw document into the IR.

Runs validation, parsing, reference resolution and direction
classification in that order. Each stage only runs once the previous one
has fully succeeded, so callers either get a complete ResolvedModel or an
exception; a partially built model is never observable.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any

from ..schema_ast import SchemaParser, validate_document
from .direction_classifier import classify
from .ir_nodes import ResolvedModel
from .reference_resolver import ReferenceResolver

logger = logging.getLogger(__name__)


class SchemaAnalyzer:
    """Analyzes an AsyncAPI document and builds the IR."""

    def __init__(self) -> None:
        self.parser = SchemaParser()

    def analyze(self, document: Any) -> ResolvedModel:
        """
        Build the ResolvedModel for a parsed document.

        Args:
            document: The untyped tree returned by the document loader

        Returns:
            The immutable ResolvedModel

        Raises:
            SchemaStructureError: If a mandatory section is missing or malformed
            UnresolvedReferenceError: If a $ref does not resolve
            UnknownActionError: If an operation action is not send/receive
        """
        validate_document(document)
        ast = self.parser.parse(document)
        logger.debug(
            "Parsed %d schemas, %d messages, %d channels, %d operations",
            len(ast.schemas),
            len(ast.messages),
            len(ast.channels),
            len(ast.operations),
        )

        resolver = ReferenceResolver(ast)
        operations = {name: resolver.resolve_operation(op) for name, op in ast.operations.items()}
        resolver.check_all()

        classification = classify(operations.values())
        logger.debug(
            "Classified %d send and %d receive messages",
            len(classification.send),
            len(classification.receive),
        )

        return ResolvedModel(
            info=ast.info,
            asyncapi_version=ast.asyncapi_version,
            schemas=ast.schemas,
            messages=ast.messages,
            channels=ast.channels,
            operations=MappingProxyType(operations),
            servers=ast.servers,
            send_operations=classification.send,
            receive_operations=classification.receive,
        )


def build_model(document: Any) -> ResolvedModel:
    """Convenience wrapper around SchemaAnalyzer().analyze()."""
    return SchemaAnalyzer().analyze(document)
