"""
Pipeline generator.

Ties the phases together:

1. Validate and parse the document, resolve references, classify
   operations (analyzer) into the immutable ResolvedModel
2. Derive the cross-artifact identifiers (name resolver)
3. Render every selected artifact in memory (backends)
4. Write the artifacts (atomic writer), only once all of them rendered
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .. import __version__
from ..cli_utils import reconstruct_command_line
from .analyzer import NameResolver, ResolvedModel, SchemaAnalyzer
from .backends import (
    ClientBackend,
    ClientExampleBackend,
    HandlersBackend,
    ServerBackend,
    ServerIndexBackend,
    TypeScriptBackend,
    TypesBackend,
)
from .config import CodeGeneratorConfig
from .writer import AtomicWriter, validate_typescript

logger = logging.getLogger(__name__)


class PipelineGenerator:
    """Generates the TypeScript artifacts for one AsyncAPI document."""

    def __init__(self, name: str, document: Any, config: CodeGeneratorConfig | None = None):
        """
        Initialize the generator.

        Args:
            name: Name of the source document (used in log messages)
            document: The parsed document tree
            config: Code generation configuration
        """
        self.name = name
        self.document = document
        self.config = config or CodeGeneratorConfig()
        self._model: ResolvedModel | None = None

    @property
    def model(self) -> ResolvedModel:
        """The resolved model, built on first access."""
        if self._model is None:
            logger.debug("Building model for %s", self.name)
            self._model = SchemaAnalyzer().analyze(self.document)
        return self._model

    def _generation_comment(self) -> str:
        """Header comment naming the tool and the command line that produced the file."""
        if not self.config.add_generation_comment:
            return ""

        try:
            from ..ws_ts_gen import ws_ts_gen as click_command  # noqa

            command_line = reconstruct_command_line(click_command)
        except (ImportError, AttributeError):
            command_line = "ws_ts_gen"

        return f"// Generated by ws_ts_gen v{__version__} : {command_line}"

    def backends(self, names: NameResolver | None = None) -> list[TypeScriptBackend]:
        """Backends selected by the configuration, in output order."""
        config = self.config
        names = names or NameResolver()
        selected: list[type[TypeScriptBackend]] = []

        if config.generate_types:
            selected.append(TypesBackend)
        if config.includes_server:
            if config.generate_handlers:
                selected.append(HandlersBackend)
            if config.generate_server:
                selected.append(ServerBackend)
            if config.generate_examples and config.generate_handlers and config.generate_server:
                selected.append(ServerIndexBackend)
        if config.includes_client and config.generate_client:
            selected.append(ClientBackend)
            if config.generate_examples:
                selected.append(ClientExampleBackend)

        comment = self._generation_comment()
        return [backend_class(config, names, comment) for backend_class in selected]

    def generate(self) -> dict[str, str]:
        """
        Render every selected artifact.

        Returns:
            Ordered mapping of file name -> TypeScript source

        Raises:
            IdentifierCollisionError: If two message names share an identifier
            InvalidMessageNameError: If a message name has no identifier form
        """
        model = self.model

        # Collisions must surface before anything is rendered
        names = NameResolver()
        names.resolve_names(model.message_type_union())

        return {backend.FILE_NAME: backend.generate(model) for backend in self.backends(names)}

    def write(self, output_dir: str | Path) -> list[Path]:
        """
        Render and write every selected artifact into output_dir.

        Returns:
            Paths of the written files

        Raises:
            FileExistsError: If a target exists and the output mode forbids overwriting
        """
        artifacts = self.generate()
        output_dir = Path(output_dir)
        output = self.config.output
        writer = AtomicWriter(
            mode=output.mode,
            validate=validate_typescript if output.validate_before_write else None,
            atomic=output.atomic_write,
        )

        # Every check runs before the first file is touched
        targets = [output_dir / file_name for file_name in artifacts]
        writer.check_targets(targets)
        for content in artifacts.values():
            writer.validate(content)

        for path, content in zip(targets, artifacts.values()):
            writer.write(path, content)
        return targets
