"""Seed dataset loading: YAML or JSON files into an id -> Document mapping"""

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from docstore.core.models import Document


logger = logging.getLogger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}
_JSON_SUFFIXES = {".json"}


def _read(path: Path) -> Any:
    """Parse the file by suffix, raising ValueError on malformed content."""
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    if suffix in _YAML_SUFFIXES:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {path.name}: {e}") from e
    if suffix in _JSON_SUFFIXES:
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid {path.name}: {e}") from e
    raise ValueError(f"Unsupported data file type: {path.name} (expected .yaml, .yml or .json)")


def _entries(raw: Any, name: str) -> list[dict]:
    """Normalize a list of documents or an id -> document mapping to a list of dicts with ids."""
    if raw is None:
        return []
    if isinstance(raw, list):
        return raw
    if isinstance(raw, dict):
        entries = []
        for key, value in raw.items():
            if not isinstance(value, dict):
                raise ValueError(f"Invalid {name}: entry '{key}' is not a mapping")
            inner = value.get("id")
            if inner not in (None, "") and str(inner) != str(key):
                raise ValueError(f"Invalid {name}: entry '{key}' has mismatched id '{inner}'")
            entries.append({**value, "id": str(key)})
        return entries
    raise ValueError(f"Invalid {name}: expected a list or mapping, got {type(raw).__name__}")


def load_documents(path: str | Path) -> dict[str, Document]:
    """Load documents from a seed file; every entry needs a unique, non-empty id."""
    path = Path(path)
    docs: dict[str, Document] = {}
    for i, entry in enumerate(_entries(_read(path), path.name)):
        try:
            doc = Document.model_validate(entry)
        except ValidationError as e:
            raise ValueError(f"Invalid {path.name}: entry {i}: {e}") from e
        if not doc.id:
            raise ValueError(f"Invalid {path.name}: entry {i} has no id")
        if doc.id in docs:
            raise ValueError(f"Invalid {path.name}: duplicate id '{doc.id}'")
        docs[doc.id] = doc
    logger.info("Loaded %d document(s) from %s", len(docs), path)
    return docs
