from __future__ import annotations
from abc import ABC, abstractmethod
from docstore.core.models import Document

class DocumentRepo(ABC):
    @abstractmethod
    def save(self, doc: Document) -> Document:
        """Upsert by id, assigning a fresh id when absent. Return the stored document."""
        raise NotImplementedError

    @abstractmethod
    def get(self, doc_id: str) -> Document | None:
        raise NotImplementedError

    @abstractmethod
    def all(self) -> list[Document]:
        """Snapshot of stored documents in store iteration order."""
        raise NotImplementedError
