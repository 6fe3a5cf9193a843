"""
Analyzer module.

Contains reference resolution, direction classification, name resolution
and IR building.
"""

from __future__ import annotations

from .analyzer import SchemaAnalyzer, build_model
from .direction_classifier import Classification, classify, direction_of
from .ir_nodes import (
    Direction,
    MessageBinding,
    ResolvedModel,
    ResolvedOperation,
)
from .name_resolver import MessageIdentifiers, NameResolver, identifiers_for
from .ordered_registry import OrderedRegistry
from .reference_resolver import Dangling, ReferenceResolver, Resolved, ref_name

__all__ = [
    "Classification",
    "Dangling",
    "Direction",
    "MessageBinding",
    "MessageIdentifiers",
    "NameResolver",
    "OrderedRegistry",
    "ReferenceResolver",
    "Resolved",
    "ResolvedModel",
    "ResolvedOperation",
    "SchemaAnalyzer",
    "build_model",
    "classify",
    "direction_of",
    "identifiers_for",
    "ref_name",
]
