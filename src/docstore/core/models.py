"""Domain models: authors, documents, and search requests"""

from datetime import datetime
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Author(BaseModel):
    """Document author, embedded by value in each Document."""
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    name: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def id_as_str(cls, v):
        """YAML reads an unquoted 1234 as int; keep ids as strings."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class Document(BaseModel):
    """A stored document keyed by id."""
    id: Optional[str] = None        # assigned by the manager on insert when missing or empty
    title: Optional[str] = None
    content: Optional[str] = None
    author: Author
    created: Optional[datetime] = None  # caller-supplied; never stamped by the manager

    @field_validator("id", mode="before")
    @classmethod
    def id_as_str(cls, v):
        """YAML reads an unquoted 1234 as int; keep ids as strings."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class SearchRequest(BaseModel):
    """Search criteria; a None or empty field places no constraint on results."""
    model_config = ConfigDict(populate_by_name=True)

    title_prefixes:    Optional[list[str]] = Field(default=None, alias="titlePrefixes")
    contains_contents: Optional[list[str]] = Field(default=None, alias="containsContents")
    author_ids:        Optional[list[str]] = Field(default=None, alias="authorIds")
    created_from:      Optional[datetime]  = Field(default=None, alias="createdFrom")
    created_to:        Optional[datetime]  = Field(default=None, alias="createdTo")

    @field_validator("title_prefixes", "contains_contents", "author_ids", mode="before")
    @classmethod
    def criteria_as_list(cls, v: Iterable[str] | None) -> list[str] | None:
        """Accept sets and tuples as well as lists; a bare string is one criterion."""
        if v is None:
            return None
        if isinstance(v, str):
            return [v]
        return list(v)
