"""Form property resolution backed by the process-wide property cache."""

from __future__ import annotations

from sqlalchemy import case, select

from dblang.context import LangContext
from dblang.db.models import FormItem
from dblang.db.session import Database
from dblang.domain.models import CachedProperty, SurfaceEntry
from dblang.logging import logger
from dblang.services.cultures import CultureResolver
from dblang.surface import ObjectSurface


class PropertyCache:
    def __init__(
        self, database: Database, resolver: CultureResolver, context: LangContext
    ) -> None:
        self.database = database
        self.resolver = resolver
        self.context = context

    def _prioritized_rows(self, app_form: str, effective: str) -> list[FormItem]:
        """Rows of the form, effective culture first, fallback culture after."""

        stmt = (
            select(FormItem)
            .where(
                FormItem.app_form == app_form,
                FormItem.culture.in_((effective, self.resolver.fallback_culture)),
            )
            .order_by(case((FormItem.culture == effective, 0), else_=1))
        )
        with self.database.session() as session:
            return list(session.execute(stmt).scalars())

    def resolve(self, app_form: str, culture: str | None, surface: ObjectSurface) -> int:
        """Apply stored string values to the surface; returns how many entries were set."""

        if app_form in self.context.seen_forms:
            return self._apply_cached(app_form, surface)

        entries = list(surface)
        effective = self.resolver.resolve_effective(culture)
        handled: set[tuple[str, str]] = set()
        applied = 0
        for row in self._prioritized_rows(app_form, effective):
            key = (row.item, row.property_name)
            if key in handled:
                continue
            handled.add(key)
            cached = CachedProperty(
                app_form=row.app_form,
                item=row.item,
                property_name=row.property_name,
                value_type=row.value_type,
                value=row.value,
                culture=row.culture,
                in_use=row.in_use == 1,
                is_fallback=row.culture != effective,
            )
            self.context.property_cache.append(cached)
            if not cached.is_string:
                continue
            for entry in entries:
                if entry.key == key:
                    entry.value = cached.value
                    applied += 1
        self.context.seen_forms.add(app_form)
        logger.debug(
            "form_properties_resolved", app_form=app_form, rows=len(handled), applied=applied
        )
        return applied

    def _apply_cached(self, app_form: str, surface: ObjectSurface) -> int:
        applied = 0
        for entry in surface:
            cached = self._find_cached(app_form, entry)
            if cached is not None and cached.is_string:
                entry.value = cached.value
                applied += 1
        return applied

    def _find_cached(self, app_form: str, entry: SurfaceEntry) -> CachedProperty | None:
        for cached in self.context.property_cache:
            if (
                cached.property_name == entry.property_name
                and cached.item == entry.item
                and cached.app_form == app_form
            ):
                return cached
        return None

    def list_localized_property_names(
        self, app_form: str, culture: str | None
    ) -> list[tuple[str, str]]:
        """Distinct (item, property_name) pairs stored for the form, in priority order."""

        effective = self.resolver.resolve_effective(culture)
        names: list[tuple[str, str]] = []
        seen: set[tuple[str, str]] = set()
        for row in self._prioritized_rows(app_form, effective):
            key = (row.item, row.property_name)
            if key not in seen:
                seen.add(key)
                names.append(key)
        return names

    def clear(self) -> None:
        self.context.clear_internal_cache()


__all__ = ["PropertyCache"]
