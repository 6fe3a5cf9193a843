"""
Configuration for the generation pipeline.

Mirrors the shape of a JSON config file passed with --config.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when an output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Default: raise error if file exists
    FORCE = "force"  # Overwrite


class GenerationMode(str, Enum):
    """Which side of the protocol to generate."""

    SERVER = "server"
    CLIENT = "client"
    BOTH = "both"


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to validate code before writing
        atomic_write: Whether to use atomic file writes
    """

    mode: OutputMode = OutputMode.ERROR_IF_EXISTS
    validate_before_write: bool = True
    atomic_write: bool = True


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Which artifacts to generate (server side, client side, or both)
    mode: GenerationMode = GenerationMode.BOTH

    # Per-artifact switches
    generate_types: bool = True
    generate_handlers: bool = True
    generate_server: bool = True
    generate_client: bool = True

    # Sample entry points (index.ts, client-example.ts)
    generate_examples: bool = True

    # Add generation comment at top of each file
    add_generation_comment: bool = True

    # Connection defaults when the document declares no server
    default_host: str = "localhost"
    default_port: int = 8080

    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        # Unknown keys and read-only properties (includes_server, ...) are ignored
        field_names = {f.name for f in fields(config)}
        for k, v in d.items():
            if k == "mode":
                config.mode = GenerationMode(v)
            elif k == "output" and isinstance(v, dict):
                mode = v.get("mode", OutputMode.ERROR_IF_EXISTS)
                if isinstance(mode, str):
                    mode = OutputMode(mode)
                config.output = OutputConfig(
                    mode=mode,
                    validate_before_write=v.get("validate_before_write", True),
                    atomic_write=v.get("atomic_write", True),
                )
            elif k in field_names:
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "mode": self.mode.value,
            "generate_types": self.generate_types,
            "generate_handlers": self.generate_handlers,
            "generate_server": self.generate_server,
            "generate_client": self.generate_client,
            "generate_examples": self.generate_examples,
            "add_generation_comment": self.add_generation_comment,
            "default_host": self.default_host,
            "default_port": self.default_port,
            "output": {
                "mode": self.output.mode.value,
                "validate_before_write": self.output.validate_before_write,
                "atomic_write": self.output.atomic_write,
            },
        }

    @property
    def includes_server(self) -> bool:
        return self.mode in (GenerationMode.SERVER, GenerationMode.BOTH)

    @property
    def includes_client(self) -> bool:
        return self.mode in (GenerationMode.CLIENT, GenerationMode.BOTH)
