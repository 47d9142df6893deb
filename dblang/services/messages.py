"""Named message lookup with per-instance and process-wide caches."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy import case, select

from dblang.context import LangContext, get_context
from dblang.db.models import Message
from dblang.db.session import Database, get_database
from dblang.domain.models import MessageResult
from dblang.logging import logger
from dblang.services.cultures import CultureResolver

COMMENT_SEPARATOR = "|"


def split_message(message: str) -> tuple[str, str]:
    """Split ``"value|comment"`` at the last ``|``; without one the comment is empty."""

    index = message.rfind(COMMENT_SEPARATOR)
    if index == -1:
        return message, ""
    return message[:index], message[index + 1 :]


def format_message(template: str, args: Sequence[Any]) -> tuple[str, bool]:
    """Apply positional ``{0}`` placeholders; returns the template itself if they do not fit."""

    try:
        return template.format(*args), False
    except (IndexError, KeyError, ValueError, AttributeError, TypeError):
        return template, True


def lookup_message_value(
    database: Database, name: str, culture: str, fallback_culture: str
) -> str | None:
    stmt = (
        select(Message.value)
        .where(
            Message.name == name,
            Message.culture.in_((culture, fallback_culture)),
            Message.value.is_not(None),
        )
        .order_by(case((Message.culture == culture, 0), else_=1))
        .limit(1)
    )
    with database.session() as session:
        return session.execute(stmt).scalar_one_or_none()


class MessageCache:
    """Resolves message names, caching raw store values by name.

    The cache key is the message name alone, so once a name is cached every
    later call returns that text whatever culture it asks for.
    """

    def __init__(
        self,
        database: Database,
        resolver: CultureResolver,
        cache: dict[str, str] | None = None,
    ) -> None:
        self.database = database
        self.resolver = resolver
        self.cache: dict[str, str] = {} if cache is None else cache

    def lookup(
        self, name: str, culture: str | None, default_text: str, *args: Any
    ) -> MessageResult:
        cached = self.cache.get(name)
        if cached is not None:
            text, failed = format_message(cached, args)
            return MessageResult(text=text, template=cached, source="cache", format_failed=failed)

        effective = self.resolver.resolve_effective(culture)
        stored = lookup_message_value(
            self.database, name, effective, self.resolver.fallback_culture
        )
        if stored is not None:
            self.cache[name] = stored
            text, failed = format_message(stored, args)
            source = "store"
            template = stored
        else:
            template, _ = split_message(default_text)
            text, failed = format_message(template, args)
            source = "default"
        if failed:
            logger.debug("message_format_failed", name=name, source=source)
        return MessageResult(text=text, template=template, source=source, format_failed=failed)

    def get_message(
        self, name: str, culture: str | None, default_text: str, *args: Any
    ) -> str:
        return self.lookup(name, culture, default_text, *args).text

    def clear(self) -> None:
        self.cache.clear()


def get_stat_message(
    name: str,
    default_text: str,
    *args: Any,
    culture: str | None = None,
    context: LangContext | None = None,
) -> str:
    """Context-free message lookup backed by the process-wide cache."""

    ctx = context or get_context()
    if ctx.database is None:
        ctx.database = get_database()
    cache = MessageCache(ctx.database, CultureResolver(ctx), ctx.static_messages)
    return cache.get_message(name, culture, default_text, *args)


__all__ = [
    "COMMENT_SEPARATOR",
    "MessageCache",
    "format_message",
    "get_stat_message",
    "lookup_message_value",
    "split_message",
]
