"""Protocols (interfaces) consumed by the core layer.

Team code never relies on ``==`` to decide whether two records are the
same real-world entity.  Identity is an explicit capability: members
provide :meth:`Member.is_same_identity`, and collections receive an
:data:`IdentityPredicate` at construction time.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, TypeVar

T = TypeVar("T")

IdentityPredicate = Callable[[T, T], bool]
"""``(existing, candidate) -> bool`` — true when both denote the same entity."""


class Member(Protocol):
    """Contract for records that can be grouped into a team.

    Any hashable object that implements :meth:`is_same_identity`
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def is_same_identity(self, other: object) -> bool:
        """Return ``True`` if *other* denotes the same entity as ``self``.

        This is deliberately weaker than ``==``: two records with the
        same identity may still differ in their other fields.
        """
        ...  # pragma: no cover

    def __hash__(self) -> int:
        """Members are hashed so that teams can be hashed by content."""
        ...  # pragma: no cover
