"""Shared pytest fixtures for database-backed localization tests."""

from __future__ import annotations

import pytest

from dblang.config import DatabaseSettings, LangSettings
from dblang.context import LangContext
from dblang.db.models import FormItem, Message
from dblang.db.session import Database
from dblang.services.schema import ensure_schema


@pytest.fixture
def settings(tmp_path) -> LangSettings:
    return LangSettings(data_dir=tmp_path, database=DatabaseSettings(dsn="sqlite://"))


@pytest.fixture
def database(settings):
    db = Database(settings)
    try:
        yield db
    finally:
        db.dispose()


@pytest.fixture
def context() -> LangContext:
    return LangContext(
        fallback_culture="en-US",
        argv=lambda: [],
        system_culture=lambda: "en-US",
    )


@pytest.fixture
def schema(database, context) -> Database:
    ensure_schema(database, context)
    return database


def _add_message(
    database: Database, culture: str, name: str, value: str | None, *, in_use: int | None = 1
) -> None:
    with database.transaction() as session:
        session.add(Message(culture=culture, name=name, value=value, in_use=in_use))


def _add_form_item(
    database: Database,
    culture: str,
    item: str,
    property_name: str,
    value: str | None,
    *,
    app_form: str = "Notes.FormMain",
    value_type: str = "str",
    in_use: int | None = 1,
) -> None:
    with database.transaction() as session:
        session.add(
            FormItem(
                app_form=app_form,
                item=item,
                culture=culture,
                property_name=property_name,
                value_type=value_type,
                value=value,
                in_use=in_use,
            )
        )


@pytest.fixture
def add_message(schema):
    def _add(culture: str, name: str, value: str | None, **kwargs) -> None:
        _add_message(schema, culture, name, value, **kwargs)

    return _add


@pytest.fixture
def add_form_item(schema):
    def _add(culture: str, item: str, property_name: str, value: str | None, **kwargs) -> None:
        _add_form_item(schema, culture, item, property_name, value, **kwargs)

    return _add
