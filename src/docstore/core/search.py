"""Search engine: per-criterion match checks and their flattened union

Each check returns the document once per matching element of its criterion,
and search() concatenates those contributions for every stored document in
store order. Results are neither deduplicated nor intersected across criteria:
a document matching two title prefixes and one substring appears three times.
"""

import logging

from docstore.core.models import Document, SearchRequest
from docstore.crud.repo import DocumentRepo

logger = logging.getLogger(__name__)


def title_prefix_matches(request: SearchRequest, doc: Document) -> list[Document]:
    """One entry per requested prefix the document title starts with."""
    if request.title_prefixes is None or doc.title is None:
        return []
    return [doc for prefix in request.title_prefixes if doc.title.startswith(prefix)]


def content_matches(request: SearchRequest, doc: Document) -> list[Document]:
    """One entry per requested substring found in the document content."""
    if request.contains_contents is None or doc.content is None:
        return []
    return [doc for text in request.contains_contents if text in doc.content]


def author_id_matches(request: SearchRequest, doc: Document) -> list[Document]:
    """One entry per requested author id equal (by value) to the document author's id."""
    if request.author_ids is None or doc.author is None or doc.author.id is None:
        return []
    return [doc for author_id in request.author_ids if author_id == doc.author.id]


def date_range_matches(request: SearchRequest, doc: Document) -> list[Document]:
    """The document once if created lies strictly between created_from and created_to."""
    if doc.created is None or request.created_from is None or request.created_to is None:
        return []
    if request.created_from < doc.created < request.created_to:
        return [doc]
    return []


CHECKS = (title_prefix_matches, content_matches, author_id_matches, date_range_matches)


def search(repo: DocumentRepo, request: SearchRequest) -> list[Document]:
    """Evaluate every check against every stored document and flatten the matches."""
    docs = repo.all()
    result = [match for doc in docs for check in CHECKS for match in check(request, doc)]
    logger.debug("Search over %d document(s) produced %d match(es)", len(docs), len(result))
    return result
