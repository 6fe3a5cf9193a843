"""
Document loader.

Reads an AsyncAPI document from disk and returns the untyped parsed tree.
The format is chosen from the file extension: ``.yaml``/``.yml`` documents
go through PyYAML, ``.json`` documents through the json module. Structural
checks are left to :mod:`ws_ts_gen.pipeline.schema_ast.validator`.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any

import yaml

from .errors import DocumentLoadError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")
JSON_SUFFIXES = (".json",)

BOOL_TAG = "tag:yaml.org,2002:bool"


class DocumentLoader(yaml.SafeLoader):
    """SafeLoader where only true/false are booleans.

    YAML 1.1 also reads on/off/yes/no as booleans, which turns a property
    or message named ``on`` into ``True``.
    """


DocumentLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
DocumentLoader.add_implicit_resolver(
    BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def load_document(path: str | Path) -> Any:
    """Load and parse a schema document.

    Args:
        path: Path to a .yaml, .yml or .json file

    Returns:
        The parsed tree (normally a dict)

    Raises:
        DocumentLoadError: If the file is missing, has an unsupported
            extension, is empty, or cannot be parsed
    """
    file_path = Path(path)
    suffix = file_path.suffix.lower()
    if suffix not in YAML_SUFFIXES + JSON_SUFFIXES:
        raise DocumentLoadError(str(path), f"unsupported file format {suffix or '(none)'!r}, use .yaml, .yml or .json")

    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DocumentLoadError(str(path), str(exc)) from exc

    if not content.strip():
        raise DocumentLoadError(str(path), "file is empty")

    logger.debug("Parsing %s as %s", file_path, "YAML" if suffix in YAML_SUFFIXES else "JSON")
    return parse_text(content, "yaml" if suffix in YAML_SUFFIXES else "json", source=str(path))


def parse_text(content: str, fmt: str, source: str = "<string>") -> Any:
    """Parse raw text as YAML or JSON.

    Args:
        content: Document text
        fmt: "yaml" or "json"
        source: Name used in error messages

    Raises:
        DocumentLoadError: If the text is not valid in the given format
    """
    if fmt == "json":
        try:
            return json.loads(content)
        except json.JSONDecodeError as exc:
            raise DocumentLoadError(source, f"invalid JSON: {exc}") from exc
    if fmt == "yaml":
        try:
            return yaml.load(content, Loader=DocumentLoader)
        except yaml.YAMLError as exc:
            raise DocumentLoadError(source, f"invalid YAML: {exc}") from exc
    raise DocumentLoadError(source, f"unknown format {fmt!r}")
