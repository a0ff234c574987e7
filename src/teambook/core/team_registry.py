"""Registry of teams, unique by name."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from teambook.core.team import MESSAGE_CONSTRAINTS, NONE, Team
from teambook.core.unique_list import UniqueList
from teambook.exceptions import DuplicateTeamError, InvalidNameError, TeamNotFoundError

logger = logging.getLogger(__name__)


def _same_team_name(existing: Team, candidate: Team) -> bool:
    return existing.is_same_team_name(candidate)


class TeamRegistry:
    """Ordered collection of teams in which no two teams share a name.

    The ``NONE`` sentinel (and any other team named ``""``) is never
    stored; :meth:`find` hands out the sentinel for the empty name.
    """

    def __init__(self, teams: Iterable[Team] = ()) -> None:
        self._teams: UniqueList[Team] = UniqueList(
            _same_team_name,
            duplicate_error=DuplicateTeamError,
            missing_error=TeamNotFoundError,
        )
        self.set_teams(teams)

    @property
    def teams(self) -> tuple[Team, ...]:
        return self._teams.as_tuple()

    def has_team(self, team: Team) -> bool:
        return self._teams.contains(team)

    def find(self, name: str) -> Team | None:
        """Return the team called *name*, ``NONE`` for ``""``, else ``None``."""
        if Team.is_none_team_name(name):
            return NONE
        return next((team for team in self._teams if team.name == name), None)

    def add_team(self, team: Team) -> None:
        self._check_storable(team)
        self._teams.add(team)
        logger.debug("Registered team %s", team)

    def replace_team(self, target: Team, replacement: Team) -> None:
        self._check_storable(replacement)
        self._teams.set_item(target, replacement)
        logger.debug("Replaced team %s with %s", target, replacement)

    def remove_team(self, team: Team) -> None:
        self._teams.remove(team)
        logger.debug("Unregistered team %s", team)

    def set_teams(self, teams: Iterable[Team]) -> None:
        candidates = list(teams)
        for team in candidates:
            self._check_storable(team)
        self._teams.set_items(candidates)

    @staticmethod
    def _check_storable(team: Team) -> None:
        if Team.is_none_team_name(team.name):
            raise InvalidNameError(
                "The unassigned team cannot be registered.",
                hint=MESSAGE_CONSTRAINTS,
            )

    def __len__(self) -> int:
        return len(self._teams)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, TeamRegistry):
            return NotImplemented
        return self.teams == other.teams

    def __repr__(self) -> str:
        return f"TeamRegistry(teams={self._teams!r})"
