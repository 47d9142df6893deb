"""Process-wide localization state.

Everything the engine shares across instances in one process lives on a
single ``LangContext``: the static message cache used by context-free call
sites, the property cache, the set of forms already resolved, the one-time
bootstrap flags and the culture override. ``get_context()`` returns the
process instance; components also accept an explicit context so tests can
build isolated ones.

The state is not synchronized. Callers driving the engine from several
threads must serialize cache access and buffered write windows themselves.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from functools import lru_cache
from typing import TYPE_CHECKING

from dblang.config import get_settings
from dblang.domain.models import CachedProperty

if TYPE_CHECKING:
    from dblang.db.session import Database


def _process_argv() -> Sequence[str]:
    return sys.argv


def _host_system_culture() -> str | None:
    from dblang.services.cultures import system_culture

    return system_culture()


@dataclass
class LangContext:
    fallback_culture: str = "en-US"
    argv: Callable[[], Sequence[str]] = _process_argv
    system_culture: Callable[[], str | None] = _host_system_culture

    static_messages: dict[str, str] = field(default_factory=dict)
    property_cache: list[CachedProperty] = field(default_factory=list)
    seen_forms: set[str] = field(default_factory=set)

    tables_created: bool = False
    cultures_inserted: bool = False
    messages_saved: bool = False
    in_use_reset: bool = False

    use_culture: str | None = None
    override_checked: bool = False

    init_seconds: float = 0.0
    database: Database | None = None

    def clear_internal_cache(self) -> None:
        """Forget resolved form properties so the UI language can change on the fly."""

        self.property_cache.clear()
        self.seen_forms.clear()

    def reset_for_testing(self) -> None:
        self.static_messages.clear()
        self.clear_internal_cache()
        self.tables_created = False
        self.cultures_inserted = False
        self.messages_saved = False
        self.in_use_reset = False
        self.use_culture = None
        self.override_checked = False
        self.init_seconds = 0.0
        self.database = None


@lru_cache
def get_context() -> LangContext:
    """Return the process-wide context."""

    return LangContext(fallback_culture=get_settings().fallback_culture)


__all__ = ["LangContext", "get_context"]
