"""Core layer — pure team model and argument parsing.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* All functions must be fully typed and deterministic.
"""

from teambook.core.import_args import PREFIX_FILE, ArgumentMultimap, extract_import_path, tokenize
from teambook.core.models import Person
from teambook.core.protocols import IdentityPredicate, Member
from teambook.core.team import MAX_CAPACITY, NONE, VALIDATION_REGEX, Team
from teambook.core.team_registry import TeamRegistry
from teambook.core.unique_list import UniqueList

__all__: list[str] = [
    "MAX_CAPACITY",
    "NONE",
    "PREFIX_FILE",
    "VALIDATION_REGEX",
    "ArgumentMultimap",
    "IdentityPredicate",
    "Member",
    "Person",
    "Team",
    "TeamRegistry",
    "UniqueList",
    "extract_import_path",
    "tokenize",
]
