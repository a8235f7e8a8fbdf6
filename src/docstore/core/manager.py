"""DocumentManager: save, search, and lookup over an injected document store"""

import logging
from functools import partial

from docstore.core.models import Document, SearchRequest
from docstore.core.search import search
from docstore.core.utils.ids import new_id
from docstore.crud.memory_repo import MemoryRepo
from docstore.crud.repo import DocumentRepo

logger = logging.getLogger(__name__)


class DocumentManager:
    """Facade over a DocumentRepo. Defaults to a fresh MemoryRepo per manager.

    None of the operations raise for documented inputs: an unknown id gives None
    and a request with no usable criteria gives an empty list.
    """

    def __init__(self, repo: DocumentRepo | None = None, id_format: str = "uuid"):
        self.repo = repo if repo is not None else MemoryRepo(id_factory=partial(new_id, id_format))

    def save(self, document: Document) -> Document:
        """Upsert the document, generating an id when absent. created is never touched."""
        saved = self.repo.save(document)
        logger.debug("Saved document %s", saved.id)
        return saved

    def search(self, request: SearchRequest) -> list[Document]:
        """Return one entry per (document, matching criterion element) pair, in store order."""
        return search(self.repo, request)

    def find_by_id(self, doc_id: str) -> Document | None:
        doc = self.repo.get(doc_id)
        if doc is None:
            logger.debug("No document with id %s", doc_id)
        return doc
