"""SQLAlchemy models mirroring the language database schema."""

from __future__ import annotations

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from dblang.db.base import Base


class Message(Base):
    __tablename__ = "MESSAGES"

    culture: Mapped[str] = mapped_column("CULTURE", Text, primary_key=True)
    name: Mapped[str] = mapped_column("MESSAGENAME", Text, primary_key=True)
    value: Mapped[str | None] = mapped_column("VALUE", Text)
    comment_en_us: Mapped[str | None] = mapped_column("COMMENT_EN_US", Text)
    in_use: Mapped[int | None] = mapped_column("INUSE", Integer)


class FormItem(Base):
    __tablename__ = "FORMITEMS"

    app_form: Mapped[str] = mapped_column("APP_FORM", Text, primary_key=True)
    item: Mapped[str] = mapped_column("ITEM", Text, primary_key=True)
    culture: Mapped[str] = mapped_column("CULTURE", Text, primary_key=True)
    property_name: Mapped[str] = mapped_column("PROPERTYNAME", Text, primary_key=True)
    value_type: Mapped[str] = mapped_column("VALUETYPE", Text, nullable=False)
    value: Mapped[str | None] = mapped_column("VALUE", Text)
    in_use: Mapped[int | None] = mapped_column("INUSE", Integer)


class CultureRecord(Base):
    __tablename__ = "CULTURES"

    code: Mapped[str] = mapped_column("CULTURE", Text, primary_key=True)
    native_name: Mapped[str | None] = mapped_column("NATIVENAME", Text)
    lcid: Mapped[int | None] = mapped_column("LCID", Integer)


__all__ = ["CultureRecord", "FormItem", "Message"]
