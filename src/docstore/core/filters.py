"""Conjunctive filter chain used by DocumentManager.search

Each filter narrows a sequence of documents by one criterion. Within a
filter the criteria are OR-ed; across filters the results are AND-ed by
feeding each filter's output into the next. A filter with no criteria
returns its input unchanged.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Iterable, Optional, Sequence

from docstore.core.models import Document, SearchRequest


class DocumentFilter(ABC):
    @abstractmethod
    def matches(self, documents: Sequence[Document]) -> list[Document]:
        """Return the documents that satisfy this filter, in input order."""
        raise NotImplementedError

    @staticmethod
    def is_empty_criteria(values: Optional[Iterable]) -> bool:
        return not values


class TitlePrefixFilter(DocumentFilter):
    """Keep documents whose title starts with any prefix, case-insensitively."""

    def __init__(self, prefixes: Optional[Iterable[str]] = None):
        self.prefixes = list(prefixes) if prefixes is not None else None

    def matches(self, documents: Sequence[Document]) -> list[Document]:
        if self.is_empty_criteria(self.prefixes):
            return list(documents)
        folded = tuple(p.casefold() for p in self.prefixes)
        return [
            doc for doc in documents
            if doc.title is not None and doc.title.casefold().startswith(folded)
        ]


class ContentFilter(DocumentFilter):
    """Keep documents whose content contains any substring, case-insensitively."""

    def __init__(self, contents: Optional[Iterable[str]] = None):
        self.contents = list(contents) if contents is not None else None

    def matches(self, documents: Sequence[Document]) -> list[Document]:
        if self.is_empty_criteria(self.contents):
            return list(documents)
        folded = [c.casefold() for c in self.contents]
        return [
            doc for doc in documents
            if doc.content is not None and any(c in doc.content.casefold() for c in folded)
        ]


class AuthorFilter(DocumentFilter):
    """Keep documents written by any of the given author ids (exact match)."""

    def __init__(self, author_ids: Optional[Iterable[str]] = None):
        self.author_ids = list(author_ids) if author_ids is not None else None

    def matches(self, documents: Sequence[Document]) -> list[Document]:
        if self.is_empty_criteria(self.author_ids):
            return list(documents)
        wanted = set(self.author_ids)
        return [
            doc for doc in documents
            if doc.author is not None and doc.author.id is not None and doc.author.id in wanted
        ]


def _aware(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so naive and aware values compare."""
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


class DateRangeFilter(DocumentFilter):
    """Keep documents created strictly between created_from and created_to.

    Only active when both bounds are set; a single bound is ignored.
    """

    def __init__(self, created_from: Optional[datetime] = None, created_to: Optional[datetime] = None):
        self.created_from = created_from
        self.created_to = created_to

    def matches(self, documents: Sequence[Document]) -> list[Document]:
        if self.created_from is None or self.created_to is None:
            return list(documents)
        lower, upper = _aware(self.created_from), _aware(self.created_to)
        return [
            doc for doc in documents
            if doc.created is not None and lower < _aware(doc.created) < upper
        ]


def build_filters(request: SearchRequest) -> list[DocumentFilter]:
    """Return the four filters for a request, always in the same order."""
    return [
        TitlePrefixFilter(request.title_prefixes),
        ContentFilter(request.contains_contents),
        AuthorFilter(request.author_ids),
        DateRangeFilter(request.created_from, request.created_to),
    ]

