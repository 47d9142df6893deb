"""Import of the application's source message catalog."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path

from sqlalchemy import update

from dblang.context import LangContext
from dblang.db.models import Message
from dblang.logging import logger
from dblang.services.exceptions import MissingCatalogError
from dblang.services.messages import split_message
from dblang.services.writer import BufferedWriter, message_upsert

MessageCatalog = Mapping[str, str] | str | Path


def load_catalog(catalog: MessageCatalog, *, product: str | None = None) -> dict[str, str]:
    """Return ``{name: "value|comment"}`` from a mapping or a JSON file."""

    if isinstance(catalog, Mapping):
        return {str(key): str(value) for key, value in catalog.items()}

    path = Path(catalog)
    if not path.is_file():
        hint = f"{product}/messages.json" if product else "messages.json"
        raise MissingCatalogError(
            f"Missing message catalog '{catalog}'.\n"
            f"Perhaps a path such as {hint} would do, pointing at a JSON object file."
        )
    with path.open("r", encoding="utf-8") as fp:
        data = json.load(fp)
    if not isinstance(data, dict):
        raise MissingCatalogError(
            f"Message catalog '{catalog}' must hold a JSON object of name/message pairs."
        )
    return {str(key): str(value) for key, value in data.items()}


def save_messages(
    catalog: MessageCatalog,
    writer: BufferedWriter,
    context: LangContext,
    *,
    product: str | None = None,
) -> int:
    """Store catalog messages under the fallback culture, once per process.

    Messages of the fallback culture are first flagged unused; every message
    still present in the catalog is flagged in use again, so a later prune
    removes only the ones the application dropped.
    """

    if context.messages_saved:
        return 0

    messages = load_catalog(catalog, product=product)
    context.messages_saved = True
    fallback = context.fallback_culture
    writer.begin_buffer()
    writer.append(update(Message).where(Message.culture == fallback).values(in_use=0))
    for name, raw in messages.items():
        value, comment = split_message(raw)
        writer.submit(message_upsert(fallback, name, value, comment))
    writer.end_buffer()
    logger.info("message_catalog_saved", culture=fallback, messages=len(messages))
    return len(messages)


__all__ = ["MessageCatalog", "load_catalog", "save_messages"]
