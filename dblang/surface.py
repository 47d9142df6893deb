"""Object surface: the live UI properties a form exposes for localization.

Walking a real widget tree belongs to the UI binding. The engine only needs
to iterate ``SurfaceEntry`` records and ask the surface to push a value back
into the widget it came from.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Protocol, runtime_checkable

from dblang.domain.models import SurfaceEntry


@runtime_checkable
class ObjectSurface(Protocol):
    def __iter__(self) -> Iterator[SurfaceEntry]: ...

    def apply(self, entry: SurfaceEntry) -> bool:
        """Push ``entry.value`` into the UI; False when the target rejects it."""
        ...


class ListSurface:
    """In-memory surface over a fixed list of entries."""

    def __init__(self, entries: Iterable[SurfaceEntry] = ()) -> None:
        self.entries = list(entries)
        self.applied: list[SurfaceEntry] = []

    def __iter__(self) -> Iterator[SurfaceEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def apply(self, entry: SurfaceEntry) -> bool:
        self.applied.append(entry)
        return True

    def find(self, item: str, property_name: str) -> SurfaceEntry | None:
        for entry in self.entries:
            if entry.item == item and entry.property_name == property_name:
                return entry
        return None


__all__ = ["ListSurface", "ObjectSurface"]
