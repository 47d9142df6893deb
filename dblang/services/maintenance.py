"""Translator-side operations on a language database."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import delete, func, select, update

from dblang.db.models import CultureRecord, FormItem, Message
from dblang.db.session import Database
from dblang.domain.models import CultureEntries, CultureInfo, FormItemEdit, MessageEdit
from dblang.logging import logger
from dblang.services.writer import BufferedWriter, form_item_upsert, message_upsert


class MaintenanceService:
    def __init__(self, database: Database) -> None:
        self.database = database

    def prune_unused(self, culture: str) -> dict[str, int]:
        """Delete entries of ``culture`` that the latest scan did not touch."""

        with self.database.transaction() as session:
            messages = session.execute(
                delete(Message).where(
                    func.coalesce(Message.in_use, 0) == 0, Message.culture == culture
                ).execution_options(synchronize_session=False)
            )
            form_items = session.execute(
                delete(FormItem).where(
                    func.coalesce(FormItem.in_use, 0) == 0, FormItem.culture == culture
                ).execution_options(synchronize_session=False)
            )
        removed = {"messages": messages.rowcount, "form_items": form_items.rowcount}
        logger.info("unused_entries_pruned", culture=culture, **removed)
        return removed

    def fetch_culture(self, culture: str) -> CultureEntries:
        message_stmt = (
            select(Message)
            .where(Message.culture == culture)
            .order_by(Message.name, Message.value)
        )
        item_stmt = (
            select(FormItem)
            .where(FormItem.culture == culture)
            .order_by(FormItem.app_form, FormItem.item)
        )
        with self.database.session() as session:
            messages = [
                MessageEdit(
                    culture=row.culture,
                    name=row.name,
                    value=row.value or "",
                    comment_en_us=row.comment_en_us,
                    in_use=row.in_use == 1,
                )
                for row in session.execute(message_stmt).scalars()
            ]
            form_items = [
                FormItemEdit(
                    app_form=row.app_form,
                    item=row.item,
                    culture=row.culture,
                    property_name=row.property_name,
                    value_type=row.value_type,
                    value=row.value,
                    in_use=row.in_use == 1,
                )
                for row in session.execute(item_stmt).scalars()
            ]
        return CultureEntries(culture=culture, messages=messages, form_items=form_items)

    def copy_from_culture(self, source: str, target: str) -> CultureEntries:
        """Seed ``target`` with the entries of ``source`` it does not have yet.

        Existing target values are kept; the in-use flags follow the source.
        """

        entries = self.fetch_culture(source)
        writer = BufferedWriter(self.database)
        writer.begin_buffer()
        for item in entries.form_items:
            writer.submit(
                form_item_upsert(
                    item.app_form,
                    item.item,
                    item.property_name,
                    item.value_type,
                    item.value,
                    target,
                    in_use=int(item.in_use),
                )
            )
        for message in entries.messages:
            writer.submit(
                message_upsert(
                    target,
                    message.name,
                    message.value,
                    message.comment_en_us,
                    in_use=int(message.in_use),
                )
            )
        writer.end_buffer()
        logger.info(
            "culture_copied",
            source=source,
            target=target,
            messages=len(entries.messages),
            form_items=len(entries.form_items),
        )
        return self.fetch_culture(target)

    def save_edits(
        self,
        messages: Iterable[MessageEdit] = (),
        form_items: Iterable[FormItemEdit] = (),
    ) -> None:
        """Write translated values back; one transaction per table."""

        with self.database.transaction() as session:
            for message in messages:
                session.execute(
                    update(Message)
                    .where(Message.culture == message.culture, Message.name == message.name)
                    .values(value=message.value)
                )
        with self.database.transaction() as session:
            for item in form_items:
                session.execute(
                    update(FormItem)
                    .where(
                        FormItem.culture == item.culture,
                        FormItem.app_form == item.app_form,
                        FormItem.property_name == item.property_name,
                        FormItem.item == item.item,
                    )
                    .values(value=item.value)
                )

    def list_cultures(self) -> list[CultureInfo]:
        stmt = select(CultureRecord).order_by(
            func.coalesce(CultureRecord.native_name, CultureRecord.code).collate("NOCASE")
        )
        with self.database.session() as session:
            return [
                CultureInfo(code=row.code, native_name=row.native_name, lcid=row.lcid)
                for row in session.execute(stmt).scalars()
            ]

    def list_localized_cultures(self) -> list[str]:
        stmt = select(FormItem.culture).distinct().order_by(FormItem.culture)
        with self.database.session() as session:
            return list(session.execute(stmt).scalars())


__all__ = ["MaintenanceService"]
