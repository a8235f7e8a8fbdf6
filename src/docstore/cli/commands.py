"""CLI command implementations"""

from datetime import datetime
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError

from docstore.config import Settings, load_config
from docstore.core.manager import DocumentManager
from docstore.core.models import SearchRequest
from docstore.core.seed import load_documents
from docstore.logs import configure_logging


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except (ValueError, ValidationError) as e:
        _fail(str(e))


def _setup(ctx: typer.Context) -> Settings:
    """Load config for a command, applying the global --log-level, and configure logging.

    Runs inside the command rather than the app callback so that --help never reads config.yaml.
    """
    log_level = (ctx.obj or {}).get("log_level")
    settings = _settings(overrides={"log_level": log_level.upper() if log_level else None})
    configure_logging(settings.log_level)
    return settings


def _manager(seed: Path, settings: Settings) -> DocumentManager:
    """Build a fresh manager populated from the seed file."""
    try:
        docs = load_documents(seed)
    except ValidationError as e:
        _fail(f"Invalid document in {seed}", e)
    except ValueError as e:
        _fail(str(e))
    manager = DocumentManager(id_format=settings.id_format)
    for doc in docs:
        manager.save(doc)
    return manager


def main_callback(
    ctx: typer.Context,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="Override configured log level")] = None,
    ):
    """In-memory document store with multi-criteria search."""
    ctx.obj = {"log_level": log_level}


def search_cmd(
    ctx: typer.Context,
    seed: Annotated[Path, typer.Argument(help="YAML seed file with documents to load")],
    title_prefix: Annotated[Optional[list[str]], typer.Option("--title-prefix", help="Title prefix (repeatable)")] = None,
    contains: Annotated[Optional[list[str]], typer.Option("--contains", help="Content substring (repeatable)")] = None,
    author_id: Annotated[Optional[list[str]], typer.Option("--author-id", help="Author id (repeatable)")] = None,
    created_from: Annotated[Optional[datetime], typer.Option("--created-from", help="Exclusive lower bound")] = None,
    created_to: Annotated[Optional[datetime], typer.Option("--created-to", help="Exclusive upper bound")] = None,
    ):
    """Search seeded documents. Prints one line per match; duplicates are kept."""
    manager = _manager(seed, _setup(ctx))
    request = SearchRequest(
        title_prefixes=title_prefix,
        contains_contents=contains,
        author_ids=author_id,
        created_from=created_from,
        created_to=created_to,
    )
    results = manager.search(request)
    for doc in results:
        typer.echo(f"{doc.id}\t{doc.title or ''}")
    typer.echo(f"{len(results)} match(es)")


def get_cmd(
    ctx: typer.Context,
    seed: Annotated[Path, typer.Argument(help="YAML seed file with documents to load")],
    doc_id: Annotated[str, typer.Argument(help="Document id")],
    ):
    """Print a seeded document as JSON."""
    manager = _manager(seed, _setup(ctx))
    doc = manager.find_by_id(doc_id)
    if doc is None:
        _fail(f"Document not found: {doc_id}")
    typer.echo(doc.model_dump_json(indent=2))
