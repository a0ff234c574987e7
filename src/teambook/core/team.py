"""Team — a named, capacity-bounded group of unique members.

Invariants held after every public call:

* the name is ``""`` or matches :data:`VALIDATION_REGEX`;
* at most :data:`MAX_CAPACITY` members;
* no two members share an identity (``is_same_identity``).

A failed mutation raises and leaves the team unchanged.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from teambook.core.protocols import Member
from teambook.core.unique_list import UniqueList
from teambook.exceptions import CapacityExceededError, ImmutableTeamError, InvalidNameError

logger = logging.getLogger(__name__)

VALIDATION_REGEX: str = r"^[MWTF](08|09|10|11|12|13|14|15|16|17)-[1-4]$"
"""Day letter, two-digit time slot from 08 to 17, dash, group 1-4."""

MESSAGE_CONSTRAINTS: str = (
    "Team names follow the format [M|W|T|F][08|09|10|11|12|13|14|15|16|17]-[1|2|3|4] "
    "(e.g., F12-3, W08-1, T17-4)"
)

MAX_CAPACITY: int = 5
"""Hard ceiling on the number of members in any team."""

_NAME_PATTERN = re.compile(VALIDATION_REGEX)


def _same_identity(existing: Member, candidate: Member) -> bool:
    return existing.is_same_identity(candidate)


class Team:
    """A named group of at most :data:`MAX_CAPACITY` unique members.

    Parameters
    ----------
    name:
        ``""`` for "no team", otherwise a name matching
        :data:`VALIDATION_REGEX`.
    members:
        Optional initial members, in order.

    Raises
    ------
    InvalidNameError
        If *name* is neither empty nor a valid team name.
    CapacityExceededError
        If more than :data:`MAX_CAPACITY` initial members are given.
    DuplicateMemberError
        If two initial members share an identity.
    """

    def __init__(self, name: str, members: Iterable[Member] | None = None) -> None:
        if not (self.is_none_team_name(name) or self.is_valid_name(name)):
            raise InvalidNameError(f"Invalid team name: {name!r}", hint=MESSAGE_CONSTRAINTS)
        self._name: str = name
        self._members: UniqueList[Member] = UniqueList(_same_identity)
        if members is not None:
            self.set_members(members)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def members(self) -> tuple[Member, ...]:
        """Members in insertion order, as a read-only snapshot."""
        return self._members.as_tuple()

    def has_member(self, member: Member) -> bool:
        """Return ``True`` if a member with the same identity is in the team."""
        return self._members.contains(member)

    def is_same_team_name(self, other: Team | None) -> bool:
        """Return ``True`` if both teams have the same name.

        This is a weaker notion of equality than ``==``, used by
        :class:`~teambook.core.team_registry.TeamRegistry` to keep team
        names unique.
        """
        if other is self:
            return True
        return other is not None and other.name == self.name

    @staticmethod
    def is_valid_name(test: str) -> bool:
        """Return ``True`` if *test* matches the team name format."""
        return _NAME_PATTERN.fullmatch(test) is not None

    @staticmethod
    def is_none_team_name(test: str) -> bool:
        """Return ``True`` if *test* names the "no team" sentinel."""
        return test == ""

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def add_member(self, member: Member) -> None:
        """Append *member* to the team.

        Capacity is checked before identity, so adding a duplicate to a
        full team raises :class:`CapacityExceededError`.
        """
        self._check_mutable()
        if len(self._members) + 1 > MAX_CAPACITY:
            logger.debug("Rejected %s: team %s is full", member, self)
            raise CapacityExceededError(
                f"Team {self} already has {MAX_CAPACITY} members.",
            )
        self._members.add(member)
        logger.debug("Added %s to team %s", member, self)

    def replace_member(self, target: Member, replacement: Member) -> None:
        """Swap *target* for *replacement* in place.

        *replacement* must not share an identity with any member other
        than *target*.
        """
        self._check_mutable()
        self._members.set_item(target, replacement)
        logger.debug("Replaced %s with %s in team %s", target, replacement, self)

    def remove_member(self, member: Member) -> None:
        """Remove the member sharing an identity with *member*."""
        self._check_mutable()
        self._members.remove(member)
        logger.debug("Removed %s from team %s", member, self)

    def set_members(self, members: Iterable[Member]) -> None:
        """Replace every member at once, all or nothing."""
        self._check_mutable()
        candidates = list(members)
        if len(candidates) > MAX_CAPACITY:
            raise CapacityExceededError(
                f"A team holds at most {MAX_CAPACITY} members, got {len(candidates)}.",
            )
        self._members.set_items(candidates)
        logger.debug("Set %d member(s) on team %s", len(candidates), self)

    def _check_mutable(self) -> None:
        if self is NONE:
            raise ImmutableTeamError("The unassigned team cannot be modified.")

    # ------------------------------------------------------------------
    # Dunder methods
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Team):
            return NotImplemented
        return self._name == other._name and self._members.has_same_elements(other._members)

    def __hash__(self) -> int:
        """Hash by name and unordered members; unhashable members raise ``TypeError``."""
        return hash((self._name, frozenset(self._members)))

    def __str__(self) -> str:
        return self._name or "(no team)"

    def __repr__(self) -> str:
        return f"Team(name={self._name!r}, members={self._members!r})"


NONE: Team = Team("")
"""The "no team assigned" sentinel.  Never mutated; compare with ``is``."""
