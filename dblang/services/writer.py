"""Buffered upserts for the language database.

Capturing a form means one upsert pair per localizable property. Running each
pair in its own transaction is slow on SQLite, so the writer can collect the
statements between ``begin_buffer()`` and ``end_buffer()`` and commit them as a
single transaction.
"""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import insert, literal, select, update
from sqlalchemy.sql import Executable

from dblang.db.models import FormItem, Message
from dblang.db.session import Database
from dblang.logging import logger


def _literals(*values: object):
    return select(*(literal(value) for value in values))


def _absent(model, *criteria):
    return ~select(literal(1)).select_from(model).where(*criteria).correlate(None).exists()


def form_item_upsert(
    app_form: str,
    item: str,
    property_name: str,
    value_type: str,
    value: str | None,
    culture: str,
    *,
    in_use: int | None = None,
) -> list[Executable]:
    """Insert-if-absent on the natural key, then flag the item as in use.

    Without an explicit ``in_use`` the flag is raised for the item in every
    culture, so translations of a property that is still on screen survive a
    prune. With one, the row of this culture gets exactly that flag.
    """

    natural_key = (
        FormItem.app_form == app_form,
        FormItem.item == item,
        FormItem.culture == culture,
        FormItem.property_name == property_name,
    )
    columns = [
        FormItem.app_form,
        FormItem.item,
        FormItem.culture,
        FormItem.property_name,
        FormItem.value_type,
        FormItem.value,
    ]
    values: list[object] = [app_form, item, culture, property_name, value_type, value]
    if in_use is None:
        mark = (
            update(FormItem)
            .where(
                FormItem.app_form == app_form,
                FormItem.item == item,
                FormItem.property_name == property_name,
            )
            .values(in_use=1)
        )
    else:
        columns.append(FormItem.in_use)
        values.append(in_use)
        mark = update(FormItem).where(*natural_key).values(in_use=in_use)
    create = insert(FormItem).from_select(
        columns, _literals(*values).where(_absent(FormItem, *natural_key))
    )
    return [create, mark]


def message_upsert(
    culture: str,
    name: str,
    value: str | None,
    comment: str | None,
    *,
    in_use: int | None = None,
) -> list[Executable]:
    natural_key = (Message.culture == culture, Message.name == name)
    columns = [Message.culture, Message.name, Message.value, Message.comment_en_us]
    values: list[object] = [culture, name, value, comment]
    if in_use is None:
        mark = update(Message).where(Message.name == name).values(in_use=1)
    else:
        columns.append(Message.in_use)
        values.append(in_use)
        mark = update(Message).where(*natural_key).values(in_use=in_use)
    create = insert(Message).from_select(
        columns, _literals(*values).where(_absent(Message, *natural_key))
    )
    return [create, mark]


class BufferedWriter:
    def __init__(self, database: Database) -> None:
        self.database = database
        self._buffering = False
        self._pending: list[Executable] = []

    @property
    def buffering(self) -> bool:
        return self._buffering

    @property
    def pending(self) -> tuple[Executable, ...]:
        return tuple(self._pending)

    @property
    def pending_sql(self) -> str:
        """The pending batch as SQL text with literal values inlined."""

        dialect = self.database.engine.dialect
        return "".join(
            f"{stmt.compile(dialect=dialect, compile_kwargs={'literal_binds': True})}; "
            for stmt in self._pending
        )

    def begin_buffer(self) -> None:
        if self._pending:
            logger.warning("buffer_discarded", statements=len(self._pending))
        self._buffering = True
        self._pending = []

    def append(self, statement: Executable) -> None:
        self.submit([statement])

    def submit(self, statements: Iterable[Executable]) -> None:
        """Buffer the statements, or run them in their own transaction when not buffering."""

        if self._buffering:
            self._pending.extend(statements)
            return
        self.execute(statements)

    def end_buffer(self) -> None:
        if not self._buffering:
            return
        self._buffering = False
        statements, self._pending = self._pending, []
        self.execute(statements)
        logger.debug("buffer_flushed", statements=len(statements))

    def execute(self, statements: Iterable[Executable]) -> None:
        with self.database.transaction() as session:
            for statement in statements:
                session.execute(statement)

    def insert_lang_item(
        self,
        app_form: str,
        item: str,
        property_name: str,
        value_type: str,
        value: str | None,
        culture: str,
    ) -> None:
        self.submit(form_item_upsert(app_form, item, property_name, value_type, value, culture))

    def insert_message(
        self, culture: str, name: str, value: str | None, comment: str | None
    ) -> None:
        self.submit(message_upsert(culture, name, value, comment))


__all__ = ["BufferedWriter", "form_item_upsert", "message_upsert"]
