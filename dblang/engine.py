"""Per-form localization engine."""

from __future__ import annotations

import time
from typing import Any

from sqlalchemy import update

from dblang.config import LangSettings, get_settings
from dblang.context import LangContext, get_context
from dblang.db.models import FormItem
from dblang.db.session import Database, get_database
from dblang.logging import logger
from dblang.services.catalog import MessageCatalog, save_messages
from dblang.services.cultures import CultureResolver
from dblang.services.maintenance import MaintenanceService
from dblang.services.messages import MessageCache
from dblang.services.properties import PropertyCache
from dblang.services.schema import ensure_culture_catalog, ensure_schema
from dblang.services.writer import BufferedWriter
from dblang.surface import ObjectSurface


class LangEngine:
    """Localizes one form: loads its stored texts or captures its current ones.

    ``product`` and ``form_name`` make up the ``app_form`` key that namespaces
    the form's rows in FORMITEMS. Message lookups through the engine use a
    cache private to the instance; ``get_stat_message`` uses the process one.

    Storage follows the context: once it holds a database every later engine
    reuses it, and ``settings`` pointing elsewhere are logged and ignored.
    """

    def __init__(
        self,
        product: str,
        form_name: str,
        surface: ObjectSurface,
        *,
        settings: LangSettings | None = None,
        database: Database | None = None,
        context: LangContext | None = None,
    ) -> None:
        self.product = product
        self.form_name = form_name
        self.surface = surface
        self.settings = settings or get_settings()
        self.context = context or get_context()
        if database is None:
            database = self.context.database or get_database(self.settings)
            if settings is not None and database.settings.dsn != settings.dsn:
                # The process shares one store; explicit settings cannot redirect it.
                logger.warning(
                    "engine_settings_ignored",
                    requested_dsn=settings.dsn,
                    active_dsn=database.settings.dsn,
                )
        if self.context.database is None:
            self.context.database = database
        self.database = database

        self.resolver = CultureResolver(self.context)
        self.messages = MessageCache(database, self.resolver)
        self.properties = PropertyCache(database, self.resolver, self.context)
        self.writer = BufferedWriter(database)
        self.maintenance = MaintenanceService(database)

    @property
    def app_form(self) -> str:
        return f"{self.product}.{self.form_name}"

    @property
    def fallback_culture(self) -> str:
        return self.context.fallback_culture

    @fallback_culture.setter
    def fallback_culture(self, value: str) -> None:
        self.context.fallback_culture = value

    @property
    def use_culture(self) -> str | None:
        return self.resolver.use_culture

    @use_culture.setter
    def use_culture(self, value: str | None) -> None:
        self.resolver.use_culture = value

    @property
    def init_time(self) -> float:
        """Seconds spent in ``initialize_language`` across the process."""

        return self.context.init_seconds

    def initialize_language(
        self,
        message_catalog: MessageCatalog | None = None,
        culture: str | None = None,
        *,
        load_items: bool = True,
    ) -> None:
        """Prepare the database and either load the form's texts or capture them.

        In load mode the stored values for ``culture`` (or the effective
        culture) are applied to the surface. In capture mode the surface is
        written under the fallback culture and the message catalog imported.
        """

        started = time.perf_counter()
        try:
            self._prepare_storage()
            ensure_schema(self.database, self.context)
            ensure_culture_catalog(self.database, self.context)
            if load_items:
                self.load_language_items(culture)
            else:
                self._capture()
                if message_catalog is not None:
                    save_messages(
                        message_catalog, self.writer, self.context, product=self.product
                    )
        finally:
            self.context.init_seconds += time.perf_counter() - started

    def _prepare_storage(self) -> None:
        if self.settings.database.dsn is None:
            self.settings.data_dir.mkdir(parents=True, exist_ok=True)

    def _capture(self) -> None:
        fallback = self.context.fallback_culture
        if not self.context.in_use_reset:
            self.writer.execute(
                [update(FormItem).where(FormItem.culture == fallback).values(in_use=0)]
            )
            self.context.in_use_reset = True
        self.save_language_items(fallback)
        logger.info("form_captured", app_form=self.app_form, culture=fallback)

    def get_message(
        self, name: str, default_text: str, *args: Any, culture: str | None = None
    ) -> str:
        return self.messages.get_message(name, culture, default_text, *args)

    def get_localized_cultures(self) -> list[str]:
        return self.maintenance.list_localized_cultures()

    def run_cache(self, app_form: str, culture: str | None = None) -> int:
        return self.properties.resolve(app_form, culture, self.surface)

    def localized_props(self, culture: str | None = None) -> list[tuple[str, str]]:
        return self.properties.list_localized_property_names(self.app_form, culture)

    def load_language_items(self, culture: str | None = None) -> bool:
        """Resolve the form's values and push them into the UI; False if any push failed."""

        self.run_cache(self.app_form, culture)
        ok = True
        for entry in self.surface:
            if not self.surface.apply(entry):
                ok = False
        return ok

    def save_language_items(self, culture: str | None = None) -> None:
        culture = culture or self.resolver.system_culture()
        self.begin_buffer()
        for entry in self.surface:
            self.insert_lang_item(
                entry.app_form,
                entry.item,
                entry.property_name,
                entry.value_type,
                None if entry.value is None else str(entry.value),
                culture,
            )
        self.end_buffer()

    def insert_lang_item(
        self,
        app_form: str,
        item: str,
        property_name: str,
        value_type: str,
        value: str | None,
        culture: str,
    ) -> None:
        self.writer.insert_lang_item(app_form, item, property_name, value_type, value, culture)

    def begin_buffer(self) -> None:
        self.writer.begin_buffer()

    def end_buffer(self) -> None:
        self.writer.end_buffer()

    def clear_internal_cache(self) -> None:
        self.context.clear_internal_cache()


__all__ = ["LangEngine"]
