"""CLI command implementations"""

import json
import logging
from datetime import datetime
from typing import Annotated, Optional

import typer

from docstore.config import load_config
from docstore.loader import dump_document, load_documents, load_store
from docstore.models import SearchRequest
from docstore.store.memory_repo import DocumentStore


def _fail(msg: str) -> None:
    """Print an error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    raise typer.Exit(1)


def _store(ctx: typer.Context, seed: str) -> DocumentStore:
    """Preload a store from the seed file using the settings resolved by the callback."""
    try:
        return load_store(seed, settings=ctx.obj)
    except ValueError as e:
        _fail(str(e))


def _echo_json(data) -> None:
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


def main_callback(
    ctx: typer.Context,
    config: Annotated[Optional[str], typer.Option("--config", help="Settings file (default: ./config.yaml if present)")] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR")] = None,
    ):
    """In-memory document store: load a seed file, then search or look up documents."""
    try:
        settings = load_config(overrides={"log_level": log_level.upper() if log_level else None}, path=config)
    except ValueError as e:
        _fail(str(e))
    ctx.obj = settings
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")


def search_cmd(
    ctx: typer.Context,
    seed: Annotated[str, typer.Argument(help="YAML or JSON seed file")],
    title_prefix: Annotated[Optional[list[str]], typer.Option("--title-prefix", help="Title starts with (repeatable)")] = None,
    contains: Annotated[Optional[list[str]], typer.Option("--contains", help="Content contains (repeatable)")] = None,
    author: Annotated[Optional[list[str]], typer.Option("--author", help="Author id (repeatable)")] = None,
    created_from: Annotated[Optional[datetime], typer.Option("--from", help="Created at or after")] = None,
    created_to: Annotated[Optional[datetime], typer.Option("--to", help="Created at or before")] = None,
    ):
    """Print documents matching every given filter as JSON."""
    store = _store(ctx, seed)
    request = SearchRequest(
        title_prefixes=title_prefix or None,
        contains_contents=contains or None,
        author_ids=author or None,
        created_from=created_from,
        created_to=created_to,
    )
    _echo_json([dump_document(d) for d in store.search(request)])


def get_cmd(
    ctx: typer.Context,
    seed: Annotated[str, typer.Argument(help="YAML or JSON seed file")],
    doc_id: Annotated[str, typer.Argument(help="Document id")],
    ):
    """Print a single document as JSON."""
    doc = _store(ctx, seed).find_by_id(doc_id)
    if doc is None:
        typer.echo(f"No document with id '{doc_id}'.")
        raise typer.Exit(1)
    _echo_json(dump_document(doc))


def import_cmd(
    ctx: typer.Context,
    seed: Annotated[str, typer.Argument(help="YAML or JSON seed file")],
    ):
    """Save every seed document into an empty store and report the assigned ids."""
    try:
        docs = load_documents(seed)
    except ValueError as e:
        _fail(str(e))

    store = DocumentStore(settings=ctx.obj)
    for doc in docs:
        saved = store.save(doc)
        typer.echo(f"  {saved.id}: {saved.title}")
    typer.echo(f"Imported {len(store)} document(s), {len(store.authors())} author(s).")
