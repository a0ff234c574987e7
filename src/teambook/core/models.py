"""Domain models for teambook.

:class:`Person` is a **frozen** dataclass — an immutable value object.
Editing a person means building a new instance and swapping it into a
team with :meth:`~teambook.core.team.Team.replace_member`.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Person:
    """A single contact that can be placed in a team."""

    name: str
    """Full name.  Two people with the same name are the same person."""

    phone: str = ""
    """Phone number, or ``""`` when unknown."""

    email: str = ""
    """E-mail address, or ``""`` when unknown."""

    def is_same_identity(self, other: object) -> bool:
        """Return ``True`` if *other* is a :class:`Person` with the same name.

        This defines a weaker notion of equality than ``==``, which
        compares every field.
        """
        if other is self:
            return True
        return isinstance(other, Person) and other.name == self.name

    def __str__(self) -> str:
        return self.name
