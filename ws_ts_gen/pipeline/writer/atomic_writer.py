"""
Atomic file writer for generated artifacts.

Ensures that file writes are atomic so an interrupted run never leaves a
half-written file behind.
"""

from __future__ import annotations

import logging
import re
import tempfile
from collections.abc import Callable
from pathlib import Path

from ..config import OutputMode
from ..errors import OutputValidationError

logger = logging.getLogger(__name__)

# Single-line string literals and line comments, removed before counting brackets
_STRING_PATTERN = re.compile(r"'(?:\\.|[^'\\\n])*'|\"(?:\\.|[^\"\\\n])*\"|`(?:\\.|[^`\\])*`")
_COMMENT_PATTERN = re.compile(r"//[^\n]*")

_BRACKET_PAIRS = (("{", "}"), ("(", ")"), ("[", "]"))


def validate_typescript(content: str) -> None:
    """Basic structural checks for generated TypeScript (no real parsing).

    Raises:
        OutputValidationError: If the content is empty or brackets are unbalanced
    """
    if not content.strip():
        raise OutputValidationError("Generated TypeScript code is empty")

    code = _STRING_PATTERN.sub("''", content)
    code = _COMMENT_PATTERN.sub("", code)
    for open_char, close_char in _BRACKET_PAIRS:
        opened = code.count(open_char)
        closed = code.count(close_char)
        if opened != closed:
            raise OutputValidationError(f"Generated TypeScript code has unbalanced {open_char}{close_char}: {opened} open, {closed} close")


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(
        self,
        mode: OutputMode = OutputMode.ERROR_IF_EXISTS,
        validate: Callable[[str], None] | None = validate_typescript,
        atomic: bool = True,
    ):
        """Initialize the atomic writer.

        Args:
            mode: What to do when a target file already exists
            validate: Validation function run before a file is finalized,
                None to skip validation
            atomic: Write through a temporary file and rename
        """
        self.mode = mode
        self._validate = validate
        self.atomic = atomic

    def check_targets(self, paths: list[Path]) -> None:
        """Refuse to start when any target exists and overwriting is not allowed.

        Raises:
            FileExistsError: If a target exists in ERROR_IF_EXISTS mode
        """
        if self.mode is OutputMode.FORCE:
            return
        for path in paths:
            if path.exists():
                raise FileExistsError(f"Output file already exists: {path}. Use --force to overwrite.")

    def validate(self, content: str) -> None:
        """Run the configured validation function, if any."""
        if self._validate is not None:
            self._validate(content)

    def write(self, path: Path, content: str) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write

        Raises:
            OutputValidationError: If validation fails
            FileExistsError: If the file exists and mode is ERROR_IF_EXISTS
            OSError: If file operations fail
        """
        self.check_targets([path])
        self.validate(content)

        # Ensure parent directory exists
        path.parent.mkdir(parents=True, exist_ok=True)

        if not self.atomic:
            path.write_text(content, encoding="utf-8")
            logger.info("Wrote %s", path)
            return

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)
            temp_path.replace(path)
        except BaseException:
            temp_path.unlink(missing_ok=True)
            raise

        logger.info("Wrote %s", path)
