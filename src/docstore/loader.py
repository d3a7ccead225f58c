"""Seed files: load documents from YAML/JSON and dump them back to plain dicts"""

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from docstore.config import Settings
from docstore.models import Document
from docstore.store.memory_repo import DocumentStore


def _read(path: Path) -> Any:
    """Parse a .yaml/.yml or .json file. Raises ValueError if missing or malformed."""
    if not path.is_file():
        raise ValueError(f"Seed file not found: {path}")
    text = path.read_text(encoding="utf-8")
    try:
        if path.suffix.lower() == ".json":
            return json.loads(text)
        return yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValueError(f"Invalid {path}: {e}") from e


def load_documents(path: str | Path) -> list[Document]:
    """Read seed documents: a top-level list, or a mapping with a 'documents' list."""
    path = Path(path)
    data = _read(path)
    if isinstance(data, dict):
        data = data.get("documents")
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError(f"Invalid {path}: expected a list of documents")
    try:
        return [Document.model_validate(item) for item in data]
    except ValidationError as e:
        raise ValueError(f"Invalid {path}: {e}") from e


def load_store(path: str | Path, settings: Settings = None) -> DocumentStore:
    """Build a store preloaded with the documents in a seed file."""
    return DocumentStore(load_documents(path), settings=settings)


def dump_document(doc: Document) -> dict:
    """JSON-ready dict; created is ISO-8601."""
    return doc.model_dump(mode="json")
