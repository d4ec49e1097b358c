"""CLI command implementations"""

import json
from typing import Annotated, Optional

import typer
from pydantic import ValidationError

from docstore.config import Settings, load_config
from docstore.core.manager import DocumentManager
from docstore.core.models import Document, SearchRequest
from docstore.crud.fixtures import load_documents
from docstore.util.log import configure_logging


DataFileOpt = Annotated[Optional[str], typer.Option("--data-file", help="YAML or JSON seed dataset")]
LogLevelOpt = Annotated[Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING, ERROR")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    configure_logging(settings.log_level)
    return settings


def _manager(settings: Settings) -> DocumentManager:
    """Build a manager seeded from the configured data file."""
    try:
        return DocumentManager(load_documents(settings.data_file))
    except FileNotFoundError:
        _fail(f"Data file not found: {settings.data_file}")
    except ValueError as e:
        _fail(str(e))


def _echo_docs(docs: list[Document], output_format: str) -> None:
    docs = sorted(docs, key=lambda d: d.id)
    if output_format == "json":
        typer.echo(json.dumps([d.model_dump(mode="json") for d in docs], indent=2, ensure_ascii=False))
        return
    for d in docs:
        typer.echo(f"{d.id}\t{d.title or ''}")
    typer.echo(f"{len(docs)} document(s) found")


def search_cmd(
    title_prefixes: Annotated[Optional[list[str]], typer.Option("--title-prefix", help="Title prefix (repeatable)")] = None,
    contents: Annotated[Optional[list[str]], typer.Option("--content", help="Content substring (repeatable)")] = None,
    author_ids: Annotated[Optional[list[str]], typer.Option("--author", help="Author id (repeatable)")] = None,
    created_from: Annotated[Optional[str], typer.Option("--created-from", help="ISO-8601 lower bound (exclusive)")] = None,
    created_to: Annotated[Optional[str], typer.Option("--created-to", help="ISO-8601 upper bound (exclusive)")] = None,
    data_file: DataFileOpt = None,
    output_format: Annotated[Optional[str], typer.Option("--format", help="json or text")] = None,
    log_level: LogLevelOpt = None,
    ):
    """Search the seed dataset; all given criteria must match."""
    settings = _settings(overrides={"data_file": data_file, "output_format": output_format, "log_level": log_level})
    try:
        request = SearchRequest(
            title_prefixes=title_prefixes or None,
            contains_contents=contents or None,
            author_ids=author_ids or None,
            created_from=created_from,
            created_to=created_to,
        )
    except ValidationError as e:
        _fail("Invalid search criteria", e)
    manager = _manager(settings)
    _echo_docs(manager.search(request), settings.output_format)


def get_cmd(
    doc_id: Annotated[str, typer.Argument(help="Document id")],
    data_file: DataFileOpt = None,
    log_level: LogLevelOpt = None,
    ):
    """Print a single document by id."""
    settings = _settings(overrides={"data_file": data_file, "log_level": log_level})
    doc = _manager(settings).find_by_id(doc_id)
    if doc is None:
        _fail(f"Document {doc_id} not found")
    typer.echo(doc.model_dump_json(indent=2))


def count_cmd(
    data_file: DataFileOpt = None,
    log_level: LogLevelOpt = None,
    ):
    """Print the number of documents in the seed dataset."""
    settings = _settings(overrides={"data_file": data_file, "log_level": log_level})
    typer.echo(_manager(settings).get_storage_size())
