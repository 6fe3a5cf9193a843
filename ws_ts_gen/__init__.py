"""AsyncAPI to TypeScript WebSocket Generator

A Python package for generating TypeScript WebSocket servers, clients,
handler contracts and type definitions from AsyncAPI documents.
"""

__version__ = "0.3.0"

from .pipeline import (
    AtomicWriter,
    CodeGeneratorConfig,
    GenerationMode,
    OutputConfig,
    OutputMode,
    PipelineGenerator,
    ResolvedModel,
    WsTsGenError,
    build_model,
    load_document,
)

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "GenerationMode",
    "OutputConfig",
    "OutputMode",
    "AtomicWriter",
    "ResolvedModel",
    "WsTsGenError",
    "build_model",
    "load_document",
]
