from __future__ import annotations

import pytest
from sqlalchemy import select
from structlog.testing import capture_logs

from dblang.config import LangSettings
from dblang.db.models import FormItem, Message
from dblang.db.session import Database
from dblang.domain.models import SurfaceEntry
from dblang.engine import LangEngine
from dblang.services.exceptions import DatabaseLibraryError
from dblang.surface import ListSurface, ObjectSurface


def _form_surface() -> ListSurface:
    return ListSurface(
        [
            SurfaceEntry(app_form="Notes.FormMain", item="FormMain", property_name="Text", value="Notes"),
            SurfaceEntry(app_form="Notes.FormMain", item="btnSave", property_name="Text", value="Save"),
            SurfaceEntry(
                app_form="Notes.FormMain",
                item="chkWrap",
                property_name="Checked",
                value_type="bool",
                value=True,
            ),
        ]
    )


def _engine(surface, settings, database, context) -> LangEngine:
    return LangEngine("Notes", "FormMain", surface, settings=settings, database=database, context=context)


def _form_items(database) -> dict[tuple[str, str, str], FormItem]:
    with database.session() as session:
        return {
            (row.culture, row.item, row.property_name): row
            for row in session.execute(select(FormItem)).scalars()
        }


def test_list_surface_satisfies_the_protocol():
    assert isinstance(ListSurface(), ObjectSurface)


def test_engine_registers_its_database_on_the_context(settings, database, context):
    engine = _engine(ListSurface(), settings, database, context)

    assert context.database is database
    assert engine.app_form == "Notes.FormMain"


def test_capture_mode_stores_surface_and_catalog(settings, database, context):
    engine = _engine(_form_surface(), settings, database, context)

    engine.initialize_language({"msgSaved": "Saved {0}|after saving"}, load_items=False)

    items = _form_items(database)
    assert items[("en-US", "btnSave", "Text")].value == "Save"
    assert items[("en-US", "chkWrap", "Checked")].value == "True"
    assert items[("en-US", "chkWrap", "Checked")].value_type == "bool"
    assert all(row.in_use == 1 for row in items.values())
    with database.session() as session:
        message = session.get(Message, {"culture": "en-US", "name": "msgSaved"})
    assert message.value == "Saved {0}"
    assert context.in_use_reset
    assert context.messages_saved


def test_second_capture_keeps_removed_items_unused(settings, database, context):
    _engine(_form_surface(), settings, database, context).initialize_language(load_items=False)
    context.in_use_reset = False
    smaller = ListSurface(
        [SurfaceEntry(app_form="Notes.FormMain", item="btnSave", property_name="Text", value="Save")]
    )

    _engine(smaller, settings, database, context).initialize_language(load_items=False)

    items = _form_items(database)
    assert items[("en-US", "btnSave", "Text")].in_use == 1
    assert items[("en-US", "FormMain", "Text")].in_use == 0


def test_load_mode_applies_translations(settings, database, context):
    _engine(_form_surface(), settings, database, context).initialize_language(load_items=False)
    engine = _engine(_form_surface(), settings, database, context)
    engine.insert_lang_item("Notes.FormMain", "btnSave", "Text", "str", "Tallenna", "fi-FI")
    engine.insert_lang_item("Notes.FormMain", "chkWrap", "Checked", "bool", "False", "fi-FI")

    surface = _form_surface()
    engine = _engine(surface, settings, database, context)
    engine.initialize_language(culture="fi-FI")

    assert surface.find("btnSave", "Text").value == "Tallenna"
    assert surface.find("FormMain", "Text").value == "Notes"
    assert surface.find("chkWrap", "Checked").value is True
    assert len(surface.applied) == 3
    assert engine.localized_props("fi-FI")[0][0] in {"btnSave", "chkWrap"}
    assert engine.get_localized_cultures() == ["en-US", "fi-FI"]
    assert engine.init_time > 0


def test_use_culture_override_drives_loading(settings, database, context):
    engine = _engine(_form_surface(), settings, database, context)
    engine.initialize_language(load_items=False)
    engine.insert_lang_item("Notes.FormMain", "btnSave", "Text", "str", "Spara", "sv-SE")
    context.clear_internal_cache()

    surface = _form_surface()
    engine = _engine(surface, settings, database, context)
    engine.use_culture = "sv-SE"
    engine.load_language_items("fi-FI")

    assert surface.find("btnSave", "Text").value == "Spara"
    assert engine.use_culture == "sv-SE"


def test_engine_messages_use_an_instance_cache(settings, database, context):
    engine = _engine(ListSurface(), settings, database, context)
    engine.initialize_language({"msgHello": "Hello {0}|greeting"}, load_items=False)

    assert engine.get_message("msgHello", "default", "World") == "Hello World"
    assert engine.messages.cache == {"msgHello": "Hello {0}"}
    assert context.static_messages == {}


def test_file_database_is_created_in_data_dir(tmp_path, context):
    settings = LangSettings(data_dir=tmp_path / "nested", db_name="notes:lang.sqlite")
    database = Database(settings)
    try:
        _engine(ListSurface(), settings, database, context).initialize_language(load_items=False)
    finally:
        database.dispose()

    assert (tmp_path / "nested" / "notes_lang.sqlite").is_file()


def test_missing_driver_raises_database_library_error(settings, monkeypatch):
    def _raise(*args, **kwargs):
        raise ImportError("No module named '_sqlite3'")

    monkeypatch.setattr("dblang.db.session.create_engine", _raise)

    with pytest.raises(DatabaseLibraryError) as exc:
        Database(settings).engine

    assert "SQLite library" in str(exc.value)
    assert "_sqlite3" in str(exc.value)


def test_engine_opens_its_store_from_the_given_settings(settings, context):
    engine = _engine(ListSurface(), settings, None, context)
    try:
        assert engine.database.settings is settings
        assert context.database is engine.database
    finally:
        engine.database.dispose()


def test_settings_for_another_store_are_reported(settings, database, context, tmp_path):
    context.database = database
    other = LangSettings(data_dir=tmp_path / "other")

    with capture_logs() as logs:
        engine = _engine(ListSurface(), other, None, context)

    assert engine.database is database
    warning = next(log for log in logs if log["event"] == "engine_settings_ignored")
    assert warning["log_level"] == "warning"
    assert warning["active_dsn"] == "sqlite://"
    assert warning["requested_dsn"] == other.dsn


def test_matching_settings_log_nothing(settings, database, context):
    context.database = database

    with capture_logs() as logs:
        _engine(ListSurface(), settings, None, context)

    assert not [log for log in logs if log["event"] == "engine_settings_ignored"]
