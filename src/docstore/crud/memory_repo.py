import logging
import threading
from dataclasses import dataclass, field
from typing import Callable

from docstore.core.models import Document
from docstore.core.utils.ids import new_id
from docstore.crud.repo import DocumentRepo

logger = logging.getLogger(__name__)


@dataclass
class MemoryRepo(DocumentRepo):
    id_factory: Callable[[], str] = new_id
    _docs: dict[str, Document] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def save(self, doc: Document) -> Document:
        if not doc.id:
            doc = doc.model_copy(update={"id": self.id_factory()})
            logger.debug("Assigned id %s", doc.id)
        with self._lock:
            replaced = doc.id in self._docs
            self._docs[doc.id] = doc
        logger.debug("%s document %s", "Replaced" if replaced else "Inserted", doc.id)
        return doc

    def get(self, doc_id: str) -> Document | None:
        with self._lock:
            return self._docs.get(doc_id)

    def all(self) -> list[Document]:
        with self._lock:
            return list(self._docs.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._docs)
