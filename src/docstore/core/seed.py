"""Seed file loading: YAML document lists for populating a fresh store"""

from pathlib import Path

import yaml

from docstore.core.models import Document


def load_documents(path: Path) -> list[Document]:
    """Parse a YAML seed file into Documents.

    Accepts either a top-level list of document mappings or a mapping with a
    'documents' list. An empty file or an empty 'documents:' yields no documents.
    Raises ValueError for a missing file, invalid YAML, or an unexpected shape;
    pydantic ValidationError propagates for invalid document fields.
    """
    path = Path(path)
    if not path.is_file():
        raise ValueError(f"Seed file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e

    if data is None:
        return []
    if isinstance(data, dict):
        if "documents" not in data:
            raise ValueError(f"{path.name}: expected a 'documents' key or a list of documents")
        data = data["documents"]
        if data is None:
            return []
    if not isinstance(data, list):
        raise ValueError(f"{path.name}: expected a list of documents")
    return [Document.model_validate(item) for item in data]
