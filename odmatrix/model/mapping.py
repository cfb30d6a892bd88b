"""Mapping from internal matrix keys to the location names sharing them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from odmatrix.model.location import UNPLACED, MatrixKey


@dataclass
class IndexMapping:
    """Ordered groups of location names keyed by internal matrix key.

    Iteration always visits keys in sorted order: the unplaced group first
    when present, then placed indices ascending. This order defines the row
    (or column) order of every dense matrix built from the mapping. Names
    within a group keep insertion order and are never deduplicated.

    Attributes:
        is_origin: Whether the mapping describes origins or destinations.
    """

    is_origin: bool
    _groups: Dict[MatrixKey, List[Optional[str]]] = field(
        default_factory=dict, repr=False
    )

    @property
    def role(self) -> str:
        return "origin" if self.is_origin else "destination"

    def add(self, key: MatrixKey, name: Optional[str]) -> None:
        """Append ``name`` to the group for ``key``, creating it if absent."""
        self._groups.setdefault(key, []).append(name)

    def keys(self) -> List[MatrixKey]:
        """Return group keys in iteration order."""
        return sorted(self._groups, key=lambda k: k.sort_key())

    def groups(self) -> Iterator[Tuple[MatrixKey, List[Optional[str]]]]:
        """Yield ``(key, names)`` pairs in iteration order."""
        for key in self.keys():
            yield key, list(self._groups[key])

    def names_for(self, key: MatrixKey) -> List[Optional[str]]:
        """Return the names sharing ``key``.

        Raises:
            KeyError: If no location maps to ``key``.
        """
        return list(self._groups[key])

    def names(self) -> List[Optional[str]]:
        """Return all names flattened in iteration order."""
        return [name for _, names in self.groups() for name in names]

    def flatten(self) -> List[MatrixKey]:
        """Return one key per name, in the same order as :meth:`names`.

        Entry ``i`` is the group key that determines row (or column) ``i`` of
        the dense matrix.
        """
        return [key for key, names in self.groups() for _ in names]

    @property
    def name_count(self) -> int:
        return sum(len(names) for names in self._groups.values())

    @property
    def group_count(self) -> int:
        return len(self._groups)

    @property
    def start_key(self) -> Optional[MatrixKey]:
        """First key visited, or None for an empty mapping."""
        keys = self.keys()
        return keys[0] if keys else None

    @property
    def has_unplaced(self) -> bool:
        return UNPLACED in self._groups

    def is_empty(self) -> bool:
        return not self._groups

    def __len__(self) -> int:
        return self.name_count

    def __contains__(self, key: object) -> bool:
        return key in self._groups
