from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Iterator

from docstore.core.models import Document


class DocumentRepo(ABC):
    """Backing store for documents keyed by id."""

    @abstractmethod
    def get(self, doc_id: str) -> Document | None:
        raise NotImplementedError

    @abstractmethod
    def put(self, doc: Document) -> Document:
        """Insert or replace the entry for doc.id and return doc."""
        raise NotImplementedError

    @abstractmethod
    def size(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def values(self) -> Iterator[Document]:
        raise NotImplementedError
