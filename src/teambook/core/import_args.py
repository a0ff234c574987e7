"""Tokenising of prefixed command arguments and the ``import`` argument.

Arguments look like ``file=data/contacts.json``.  A prefix only counts
when it starts the string or follows whitespace; its value runs until
the next recognised prefix.  Anything before the first prefix is the
*preamble*.

Every function in this module is **pure** — no filesystem access.  The
extracted path is handed to whatever performs the actual import.
"""

from __future__ import annotations

import re

from teambook.exceptions import FormatError

PREFIX_FILE: str = "file="

MESSAGE_INVALID_COMMAND_FORMAT: str = "Invalid command format!"

MESSAGE_USAGE: str = (
    "import: Imports contacts from a file.\n"
    f"Parameters: {PREFIX_FILE}FILE_PATH\n"
    f"Example: import {PREFIX_FILE}data/contacts.json"
)

MESSAGE_DUPLICATE_FIELDS: str = (
    "Multiple values specified for the following single-valued field(s): "
)


class ArgumentMultimap:
    """Values of each prefix in order of appearance, plus the preamble."""

    def __init__(self, preamble: str, values: dict[str, list[str]]) -> None:
        self.preamble: str = preamble
        self._values = values

    def get_value(self, prefix: str) -> str | None:
        """Return the last value given for *prefix*, or ``None``."""
        values = self._values.get(prefix)
        return values[-1] if values else None

    def get_all_values(self, prefix: str) -> list[str]:
        return list(self._values.get(prefix, []))

    def verify_no_duplicate_prefixes_for(self, *prefixes: str) -> None:
        """Raise :class:`FormatError` if any of *prefixes* appears twice."""
        duplicated = [p for p in prefixes if len(self._values.get(p, [])) > 1]
        if duplicated:
            raise FormatError(MESSAGE_DUPLICATE_FIELDS + " ".join(duplicated))


def _prefix_positions(args: str, prefixes: tuple[str, ...]) -> list[tuple[int, str]]:
    positions: list[tuple[int, str]] = []
    for prefix in prefixes:
        pattern = re.compile(r"(?<!\S)" + re.escape(prefix))
        positions.extend((match.start(), prefix) for match in pattern.finditer(args))
    return sorted(positions)


def tokenize(args: str, *prefixes: str) -> ArgumentMultimap:
    """Split *args* into preamble and per-prefix values (all stripped)."""
    positions = _prefix_positions(args, prefixes)
    if not positions:
        return ArgumentMultimap(args.strip(), {})

    values: dict[str, list[str]] = {}
    bounds = positions[1:] + [(len(args), "")]
    for (start, prefix), (end, _) in zip(positions, bounds):
        value = args[start + len(prefix):end].strip()
        values.setdefault(prefix, []).append(value)
    return ArgumentMultimap(args[:positions[0][0]].strip(), values)


def extract_import_path(args: str) -> str:
    """Return the file path named by ``file=`` in *args*.

    Raises
    ------
    FormatError
        If the prefix is missing, text precedes it, it is given more
        than once, or its value is empty.
    """
    multimap = tokenize(args, PREFIX_FILE)
    file_path = multimap.get_value(PREFIX_FILE)

    if file_path is None or multimap.preamble:
        raise FormatError(MESSAGE_INVALID_COMMAND_FORMAT, hint=MESSAGE_USAGE)

    multimap.verify_no_duplicate_prefixes_for(PREFIX_FILE)

    if not file_path:
        raise FormatError(MESSAGE_INVALID_COMMAND_FORMAT, hint=MESSAGE_USAGE)
    return file_path
