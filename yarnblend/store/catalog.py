"""
Fiber catalog: the known fiber names offered for selection.

Names are stored in normalized form (see ``normalize_fiber_name``) and
iterated in lexicographic order. Duplicates are detected by exact string
comparison after normalization.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from yarnblend.schemas.fiber import normalize_fiber_name


class FiberCatalog:
    """Ordered, de-duplicated set of fiber names."""

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._names: set[str] = set()
        for name in names:
            self.add(name)

    def add(self, name: str) -> bool:
        """Add *name*; return False if it is empty or already present."""
        name = normalize_fiber_name(name)
        if not name or name in self._names:
            return False
        self._names.add(name)
        return True

    def remove(self, name: str) -> bool:
        """Remove *name*; return False if it was not present."""
        name = normalize_fiber_name(name)
        if name not in self._names:
            return False
        self._names.discard(name)
        return True

    def contains(self, name: str) -> bool:
        return normalize_fiber_name(name) in self._names

    def names(self) -> list[str]:
        return sorted(self._names)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.contains(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._names)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FiberCatalog):
            return NotImplemented
        return self._names == other._names

    def __repr__(self) -> str:
        return f"FiberCatalog({self.names()!r})"
