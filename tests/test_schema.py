from __future__ import annotations

from sqlalchemy import func, inspect, select

from dblang.db.models import CultureRecord
from dblang.domain.models import CultureInfo
from dblang.services.schema import ensure_culture_catalog, ensure_schema


def _culture_count(database) -> int:
    with database.session() as session:
        return session.execute(select(func.count()).select_from(CultureRecord)).scalar_one()


def test_schema_creates_the_three_tables(database, context):
    ensure_schema(database, context)

    assert set(inspect(database.engine).get_table_names()) == {"CULTURES", "FORMITEMS", "MESSAGES"}
    assert context.tables_created


def test_schema_is_idempotent_across_resets(database, context):
    ensure_schema(database, context)
    context.reset_for_testing()
    ensure_schema(database, context)

    assert context.tables_created


def test_culture_catalog_is_seeded_once(schema, context):
    added = ensure_culture_catalog(schema, context)

    assert added > 0
    assert _culture_count(schema) == added
    assert ensure_culture_catalog(schema, context) == 0

    context.cultures_inserted = False
    assert ensure_culture_catalog(schema, context) == 0
    assert _culture_count(schema) == added


def test_culture_catalog_accepts_explicit_cultures(schema, context):
    cultures = [
        CultureInfo(code="fi-FI", native_name="suomi (FI)", lcid=1035),
        CultureInfo(code="en-US", native_name="English (US)", lcid=1033),
    ]

    assert ensure_culture_catalog(schema, context, cultures) == 2
    with schema.session() as session:
        row = session.get(CultureRecord, "fi-FI")
    assert row.native_name == "suomi (FI)"
    assert row.lcid == 1035
