"""Document manager: upsert, id lookup, and conjunctive search over an in-memory store"""

import logging
from typing import Mapping, Optional
from uuid import uuid4

from docstore.core.errors import DocumentNotFoundError, DocumentNotGivenError
from docstore.core.filters import build_filters
from docstore.core.models import Author, Document, SearchRequest
from docstore.crud.memory_repo import MemoryRepo
from docstore.crud.repo import DocumentRepo


logger = logging.getLogger(__name__)


def _copy_author(author: Author) -> Author:
    return Author(id=author.id, name=author.name)


class DocumentManager:
    """Owns a document store and exposes save, search, find_by_id and get_storage_size.

    The initial mapping is copied; later changes to the caller's dict do not
    reach the manager. Not safe for concurrent use.
    """

    def __init__(self, documents: Optional[Mapping[str, Document]] = None, repo: Optional[DocumentRepo] = None):
        if repo is not None and documents:
            raise ValueError("Pass either documents or repo, not both")
        self._repo = repo if repo is not None else MemoryRepo.from_mapping(documents)

    def save(self, document: Optional[Document]) -> Document:
        """Insert a document without an id, or replace the stored one with the same id.

        created is stored exactly as given. On update every field except id is
        taken from the argument.
        """
        if document is None:
            raise DocumentNotGivenError()

        if not document.id:
            saved = Document(
                id=str(uuid4()),
                title=document.title,
                content=document.content,
                author=_copy_author(document.author),
                created=document.created,
            )
            self._repo.put(saved)
            logger.debug("Inserted document %s", saved.id)
            return saved

        existing = self._repo.get(document.id)
        if existing is None:
            raise DocumentNotFoundError(document.id)

        saved = Document(
            id=existing.id,
            title=document.title,
            content=document.content,
            author=_copy_author(document.author),
            created=document.created,
        )
        self._repo.put(saved)
        logger.debug("Updated document %s", saved.id)
        return saved

    def search(self, request: Optional[SearchRequest] = None) -> list[Document]:
        """Return stored documents matching every criterion in request, in no guaranteed order."""
        request = request or SearchRequest()
        result = list(self._repo.values())
        for f in build_filters(request):
            before = len(result)
            result = f.matches(result)
            logger.debug("%s: %d -> %d documents", type(f).__name__, before, len(result))
        return result

    def find_by_id(self, doc_id: str) -> Optional[Document]:
        return self._repo.get(doc_id)

    def get_storage_size(self) -> int:
        return self._repo.size()

    def __len__(self) -> int:
        return self.get_storage_size()
