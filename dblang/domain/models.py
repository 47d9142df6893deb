"""Pydantic models shared across the cache, writer and engine layers."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel

STRING_VALUE_TYPE = "str"


class CultureInfo(BaseModel):
    code: str
    native_name: str | None = None
    lcid: int | None = None

    def __str__(self) -> str:
        return f"{self.native_name or self.code} [{self.code}]"


class SurfaceEntry(BaseModel):
    """One localizable property of a live UI object."""

    app_form: str
    item: str
    property_name: str
    value_type: str = STRING_VALUE_TYPE
    value: Any = None

    @property
    def key(self) -> tuple[str, str]:
        return self.item, self.property_name


class CachedProperty(BaseModel):
    app_form: str
    item: str
    property_name: str
    value_type: str
    value: str | None
    culture: str
    in_use: bool = True
    is_fallback: bool = False

    @property
    def is_string(self) -> bool:
        return self.value_type == STRING_VALUE_TYPE


class MessageResult(BaseModel):
    """Outcome of a message lookup, including how the text was produced."""

    text: str
    template: str
    source: Literal["cache", "store", "default"]
    format_failed: bool = False

    @property
    def used_default(self) -> bool:
        return self.source == "default"


class MessageEdit(BaseModel):
    culture: str
    name: str
    value: str
    comment_en_us: str | None = None
    in_use: bool = False


class FormItemEdit(BaseModel):
    app_form: str
    item: str
    culture: str
    property_name: str
    value_type: str = STRING_VALUE_TYPE
    value: str | None = None
    in_use: bool = False


class CultureEntries(BaseModel):
    culture: str
    messages: list[MessageEdit]
    form_items: list[FormItemEdit]


__all__ = [
    "STRING_VALUE_TYPE",
    "CachedProperty",
    "CultureEntries",
    "CultureInfo",
    "FormItemEdit",
    "MessageEdit",
    "MessageResult",
    "SurfaceEntry",
]
