"""Root test configuration: shared documents and seed files"""

import logging
from datetime import datetime

import pytest
import yaml

from docstore.core.manager import DocumentManager
from docstore.core.models import Author, Document


T0 = datetime(2024, 1, 1, 12, 0, 0)


@pytest.fixture(autouse=True)
def isolate_env(tmp_path, monkeypatch):
    """Run each test from a clean tmp directory without DOCSTORE_* env vars."""
    monkeypatch.chdir(tmp_path)
    for name in ("DOCSTORE_APP_NAME", "DOCSTORE_ID_FORMAT", "DOCSTORE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo handlers and levels installed by configure_logging during a test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("docstore").setLevel(logging.NOTSET)


@pytest.fixture(name="manager")
def manager_fixture():
    """A fresh DocumentManager backed by an empty MemoryRepo."""
    return DocumentManager()


@pytest.fixture(name="doc")
def doc_fixture():
    """A fully populated document without an id."""
    return Document(
        title="hello world",
        content="the quick fox",
        author=Author(id="a1", name="Ada"),
        created=T0,
    )


@pytest.fixture(name="seed_file")
def seed_file_fixture(tmp_path):
    """A YAML seed file with three documents."""
    path = tmp_path / "seed.yaml"
    path.write_text(yaml.safe_dump({"documents": [
        {"id": "d1", "title": "hello world", "content": "the quick fox",
         "author": {"id": "a1", "name": "Ada"}, "created": datetime(2024, 1, 1, 12, 0, 0)},
        {"id": "d2", "title": "help wanted", "content": "lazy dog",
         "author": {"id": "a2", "name": "Bob"}, "created": datetime(2024, 2, 1, 12, 0, 0)},
        {"id": "d3", "title": "goodbye", "content": None, "author": None, "created": None},
    ]}))
    return path
