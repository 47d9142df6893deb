"""Startup schema and seed helpers."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import select

from dblang.context import LangContext
from dblang.db.base import Base
from dblang.db.models import CultureRecord
from dblang.db.session import Database
from dblang.domain.models import CultureInfo
from dblang.logging import logger
from dblang.services.cultures import host_cultures


def ensure_schema(database: Database, context: LangContext) -> None:
    """Create MESSAGES, FORMITEMS and CULTURES if they do not exist yet."""

    if context.tables_created:
        return
    Base.metadata.create_all(database.engine, checkfirst=True)
    context.tables_created = True
    logger.info("schema_ensured")


def ensure_culture_catalog(
    database: Database,
    context: LangContext,
    cultures: Iterable[CultureInfo] | None = None,
) -> int:
    """Insert every host culture that is not stored yet; returns the number added."""

    if context.cultures_inserted:
        return 0
    catalog = list(cultures if cultures is not None else host_cultures())
    added = 0
    with database.transaction() as session:
        existing = set(session.execute(select(CultureRecord.code)).scalars())
        for info in catalog:
            if info.code in existing:
                continue
            session.add(
                CultureRecord(code=info.code, native_name=info.native_name, lcid=info.lcid)
            )
            existing.add(info.code)
            added += 1
    context.cultures_inserted = True
    logger.info("culture_catalog_seeded", added=added, known=len(existing))
    return added


__all__ = ["ensure_culture_catalog", "ensure_schema"]
