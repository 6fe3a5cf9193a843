"""
Pipeline - AsyncAPI to TypeScript WebSocket code generator.

The pipeline is split into phases:

1. Phase 1 (Loader): Read the YAML/JSON document into an untyped tree
2. Phase 2 (Validator + Parser): Check mandatory sections, build the AST
3. Phase 3 (Analyzer): Resolve references, classify operations by
   direction and build the immutable ResolvedModel (IR)
4. Phase 4 (Backends): Render each TypeScript artifact from the IR
5. Phase 5 (Writer): Atomically write the rendered artifacts
"""

from __future__ import annotations

from .analyzer import ResolvedModel, SchemaAnalyzer, build_model
from .config import CodeGeneratorConfig, GenerationMode, OutputConfig, OutputMode
from .errors import (
    DocumentLoadError,
    IdentifierCollisionError,
    InvalidMessageNameError,
    OutputValidationError,
    SchemaStructureError,
    UnknownActionError,
    UnresolvedReferenceError,
    WsTsGenError,
)
from .generator import PipelineGenerator
from .loader import load_document
from .writer import AtomicWriter

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "GenerationMode",
    "OutputConfig",
    "OutputMode",
    "AtomicWriter",
    "ResolvedModel",
    "SchemaAnalyzer",
    "build_model",
    "load_document",
    "WsTsGenError",
    "DocumentLoadError",
    "SchemaStructureError",
    "UnresolvedReferenceError",
    "UnknownActionError",
    "IdentifierCollisionError",
    "InvalidMessageNameError",
    "OutputValidationError",
]
