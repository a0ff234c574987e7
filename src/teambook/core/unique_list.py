"""Ordered, duplicate-rejecting collection keyed by an identity predicate.

:class:`UniqueList` is the leaf that :class:`~teambook.core.team.Team`
and :class:`~teambook.core.team_registry.TeamRegistry` compose over.
Uniqueness is decided by the predicate supplied at construction, never
by ``==``.  Every mutator either succeeds completely or raises and
leaves the list untouched.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from teambook.core.protocols import IdentityPredicate
from teambook.exceptions import DuplicateMemberError, MemberNotFoundError, TeambookError

T = TypeVar("T")


class UniqueList(Generic[T]):
    """Insertion-ordered list in which no two elements share an identity.

    Parameters
    ----------
    same_identity:
        Predicate deciding whether two elements denote the same entity.
    items:
        Initial contents.  Rejected as a whole if any two collide.
    duplicate_error, missing_error:
        Exception types raised on identity collisions and on lookups of
        absent elements.  Containers of teams swap in their own types.
    """

    def __init__(
        self,
        same_identity: IdentityPredicate[T],
        items: Iterable[T] = (),
        *,
        duplicate_error: type[TeambookError] = DuplicateMemberError,
        missing_error: type[TeambookError] = MemberNotFoundError,
    ) -> None:
        self._same_identity = same_identity
        self._duplicate_error = duplicate_error
        self._missing_error = missing_error
        self._items: list[T] = []
        self.set_items(items)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def contains(self, item: T) -> bool:
        """Return ``True`` if an element with the same identity exists."""
        return self._index_of(item) is not None

    def has_same_elements(self, other: UniqueList[T]) -> bool:
        """Compare contents with ``==``, ignoring order."""
        if len(self._items) != len(other._items):
            return False
        return all(item in other._items for item in self._items)

    def as_tuple(self) -> tuple[T, ...]:
        """Return a snapshot of the elements in insertion order."""
        return tuple(self._items)

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def add(self, item: T) -> None:
        """Append *item*; it must not share an identity with any element."""
        if self.contains(item):
            raise self._duplicate_error(f"{item} is already present.")
        self._items.append(item)

    def set_item(self, target: T, replacement: T) -> None:
        """Replace *target* with *replacement*, keeping its position.

        *replacement* may share an identity with *target* itself, but not
        with any other element.
        """
        index = self._index_of(target)
        if index is None:
            raise self._missing_error(f"{target} is not present.")
        clash = self._index_of(replacement)
        if clash is not None and clash != index:
            raise self._duplicate_error(f"{replacement} is already present.")
        self._items[index] = replacement

    def remove(self, item: T) -> None:
        """Remove the element sharing an identity with *item*."""
        index = self._index_of(item)
        if index is None:
            raise self._missing_error(f"{item} is not present.")
        del self._items[index]

    def set_items(self, items: Iterable[T]) -> None:
        """Replace the whole contents with *items*, all or nothing."""
        candidates = list(items)
        for position, item in enumerate(candidates):
            for earlier in candidates[:position]:
                if self._same_identity(earlier, item):
                    raise self._duplicate_error(f"{item} appears more than once.")
        self._items = candidates

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _index_of(self, item: T) -> int | None:
        for index, existing in enumerate(self._items):
            if self._same_identity(existing, item):
                return index
        return None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._items))

    def __repr__(self) -> str:
        return repr(self._items)
