"""Custom exception hierarchy for teambook.

All exceptions that cross layer boundaries must inherit from
:class:`TeambookError`.  Every failure in the core is deterministic:
it is raised synchronously where the violation is detected and the
object that raised it is left exactly as it was.

Hierarchy
---------
TeambookError
├── InvalidNameError
├── TeamError
│   ├── CapacityExceededError
│   ├── DuplicateMemberError
│   ├── MemberNotFoundError
│   ├── ImmutableTeamError
│   ├── DuplicateTeamError
│   └── TeamNotFoundError
├── FormatError
└── EnvironmentError
"""

from __future__ import annotations


class TeambookError(Exception):
    """Base exception for all teambook errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Name validation -------------------------------------------------------

class InvalidNameError(TeambookError):
    """Raised when a team name is non-empty and fails validation."""


# --- Team membership -------------------------------------------------------

class TeamError(TeambookError):
    """Base class for failed team and registry mutations."""


class CapacityExceededError(TeamError):
    """Raised when an operation would push a team above its capacity."""


class DuplicateMemberError(TeamError):
    """Raised when an operation would introduce two members with the same identity."""


class MemberNotFoundError(TeamError):
    """Raised when an operation references a member that is not present."""


class ImmutableTeamError(TeamError):
    """Raised when a mutation is attempted on the ``NONE`` sentinel team."""


class DuplicateTeamError(TeamError):
    """Raised when a registry would hold two teams sharing a name."""


class TeamNotFoundError(TeamError):
    """Raised when a registry operation references an unknown team."""


# --- Command arguments -----------------------------------------------------

class FormatError(TeambookError):
    """Raised when a command argument string is malformed."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(TeambookError):
    """Raised when a required runtime dependency is not available."""
