"""Shared fixtures: the four-document dataset used across unit and CLI tests"""

import logging
from datetime import datetime, timezone

import pytest

from docstore.core.manager import DocumentManager
from docstore.core.models import Author, Document


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers the CLI attaches so they never outlive a captured stream."""
    yield
    logger = logging.getLogger("docstore")
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


@pytest.fixture(name="documents")
def documents_fixture() -> dict[str, Document]:
    """Four documents with distinct authors; two share a created timestamp."""
    return {
        "1234": Document(id="1234", title="Spring", content="Spring official documentation",
                         author=Author(id="1", name="Peter"), created=utc(2024, 9, 30, 20, 58)),
        "2345": Document(id="2345", title="Java", content="Java doc content",
                         author=Author(id="2", name="Dan"), created=utc(2024, 10, 31, 10, 58)),
        "3456": Document(id="3456", title="Bug Fix", content="Implementation does not work",
                         author=Author(id="3", name="Monika"), created=utc(2025, 1, 30, 20, 58)),
        "4567": Document(id="4567", title="Jira", content="Jira is a issue and project tracking software",
                         author=Author(id="4", name="Amelia"), created=utc(2025, 1, 30, 20, 58)),
    }


@pytest.fixture(name="manager")
def manager_fixture(documents) -> DocumentManager:
    return DocumentManager(documents)
