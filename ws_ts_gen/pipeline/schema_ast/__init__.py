"""
Schema AST module.

Contains the AST node definitions, the structural validator and the parser
for AsyncAPI documents.
"""

from __future__ import annotations

from .nodes import (
    ChannelNode,
    DocumentAST,
    InfoNode,
    MessageNode,
    OperationNode,
    SchemaNode,
    ServerNode,
)
from .parser import SchemaParser
from .validator import REQUIRED_SECTIONS, validate_document

__all__ = [
    "ChannelNode",
    "DocumentAST",
    "InfoNode",
    "MessageNode",
    "OperationNode",
    "SchemaNode",
    "ServerNode",
    "SchemaParser",
    "REQUIRED_SECTIONS",
    "validate_document",
]
