"""Culture catalog helpers and effective-culture resolution."""

from __future__ import annotations

import locale
from functools import lru_cache

from dblang.context import LangContext, get_context
from dblang.domain.models import CultureInfo
from dblang.logging import logger
from dblang.services.exceptions import CultureNotFoundError
from dblang.services.languages import NATIVE_LANGUAGE_NAMES

LANGUAGE_ARGUMENT = "--language="


def normalize_culture(code: str) -> str:
    """Turn POSIX-style locale names into culture codes: ``en_US.UTF-8`` -> ``en-US``."""

    code = code.split(".", 1)[0].split("@", 1)[0].strip()
    parts = [part for part in code.replace("_", "-").split("-") if part]
    if not parts:
        return ""
    normalized = [parts[0].lower()]
    for part in parts[1:]:
        if len(part) == 2 and part.isalpha():
            normalized.append(part.upper())
        elif len(part) == 4 and part.isalpha():
            normalized.append(part.title())
        else:
            normalized.append(part)
    return "-".join(normalized)


def _native_name(code: str) -> str:
    language, _, region = code.partition("-")
    name = NATIVE_LANGUAGE_NAMES.get(language, code)
    if not region or name == code:
        return name
    return f"{name} ({region})"


@lru_cache
def host_cultures() -> tuple[CultureInfo, ...]:
    """Every culture the host knows a locale identifier for, specific and neutral."""

    cultures: dict[str, CultureInfo] = {}
    for lcid, posix_name in sorted(locale.windows_locale.items()):
        code = normalize_culture(posix_name)
        if code and code not in cultures:
            cultures[code] = CultureInfo(code=code, native_name=_native_name(code), lcid=lcid)
        neutral = code.split("-", 1)[0]
        if neutral and neutral not in cultures:
            cultures[neutral] = CultureInfo(
                code=neutral, native_name=_native_name(neutral), lcid=lcid & 0x3FF
            )
    return tuple(sorted(cultures.values(), key=lambda info: info.code))


@lru_cache
def _cultures_by_code() -> dict[str, CultureInfo]:
    return {info.code.lower(): info for info in host_cultures()}


@lru_cache
def _cultures_by_lcid() -> dict[int, CultureInfo]:
    index: dict[int, CultureInfo] = {}
    for info in host_cultures():
        if info.lcid is not None:
            index.setdefault(info.lcid, info)
    return index


def culture_from_tag(tag: str) -> str:
    normalized = normalize_culture(tag)
    info = _cultures_by_code().get(normalized.lower())
    if info is None:
        # The locale table carries no script subtags: zh-Hant-TW is stored as zh-TW.
        parts = normalized.split("-")
        without_script = [part for part in parts[1:] if not (len(part) == 4 and part.isalpha())]
        if len(without_script) < len(parts) - 1:
            info = _cultures_by_code().get("-".join(parts[:1] + without_script).lower())
    if info is None:
        raise CultureNotFoundError(f"Culture is not supported: {tag!r}")
    return info.code


def culture_from_lcid(lcid: int) -> str:
    posix_name = locale.windows_locale.get(lcid)
    if posix_name:
        return normalize_culture(posix_name)
    info = _cultures_by_lcid().get(lcid)
    if info is None:
        raise CultureNotFoundError(f"Culture is not supported: {lcid}")
    return info.code


def parse_culture(value: str) -> str:
    """Resolve a tag or a numeric locale identifier."""

    value = value.strip()
    try:
        lcid = int(value)
    except ValueError:
        return culture_from_tag(value)
    return culture_from_lcid(lcid)


def system_culture() -> str | None:
    try:
        language, _ = locale.getlocale()
    except ValueError as exc:
        logger.warning("system_locale_unparsable", error=str(exc))
        return None
    if not language or language in {"C", "POSIX"}:
        return None
    return normalize_culture(language) or None


class CultureResolver:
    """Decides which culture a lookup runs against: override, then requested, then system."""

    def __init__(self, context: LangContext | None = None) -> None:
        self.context = context or get_context()

    @property
    def fallback_culture(self) -> str:
        return self.context.fallback_culture

    def system_culture(self) -> str:
        return self.context.system_culture() or self.context.fallback_culture

    @property
    def use_culture(self) -> str | None:
        ctx = self.context
        if ctx.use_culture is None and not ctx.override_checked:
            for arg in ctx.argv():
                if not arg.startswith(LANGUAGE_ARGUMENT):
                    continue
                value = arg.split("=")[1]
                try:
                    ctx.use_culture = parse_culture(value)
                except CultureNotFoundError as exc:
                    ctx.use_culture = self.system_culture()
                    logger.warning(
                        "culture_argument_invalid",
                        value=value,
                        error=str(exc),
                        culture=ctx.use_culture,
                    )
            ctx.override_checked = True
        return ctx.use_culture

    @use_culture.setter
    def use_culture(self, value: str | None) -> None:
        self.context.use_culture = value
        self.context.override_checked = True

    def resolve_effective(self, requested: str | None = None) -> str:
        override = self.use_culture
        if override is not None:
            return override
        return requested or self.system_culture()


__all__ = [
    "CultureResolver",
    "LANGUAGE_ARGUMENT",
    "NATIVE_LANGUAGE_NAMES",
    "culture_from_lcid",
    "culture_from_tag",
    "host_cultures",
    "normalize_culture",
    "parse_culture",
    "system_culture",
]
