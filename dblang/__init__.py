"""Database-backed UI localization."""

from dblang.context import LangContext, get_context
from dblang.domain.models import MessageResult, SurfaceEntry
from dblang.engine import LangEngine
from dblang.logging import configure_logging
from dblang.services.messages import get_stat_message
from dblang.surface import ListSurface, ObjectSurface

__all__ = [
    "LangContext",
    "LangEngine",
    "ListSurface",
    "MessageResult",
    "ObjectSurface",
    "SurfaceEntry",
    "configure_logging",
    "get_context",
    "get_stat_message",
]
