from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, Mapping

from docstore.core.models import Document
from docstore.crud.repo import DocumentRepo


@dataclass
class MemoryRepo(DocumentRepo):
    _docs: dict[str, Document] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, documents: Mapping[str, Document] | None) -> MemoryRepo:
        """Build a repo from a copy of documents; the caller's mapping is not aliased."""
        return cls(dict(documents or {}))

    def get(self, doc_id: str) -> Document | None:
        return self._docs.get(doc_id)

    def put(self, doc: Document) -> Document:
        self._docs[doc.id] = doc
        return doc

    def size(self) -> int:
        return len(self._docs)

    def values(self) -> Iterator[Document]:
        return iter(list(self._docs.values()))
