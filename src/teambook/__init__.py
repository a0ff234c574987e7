"""teambook — tutorial-team management for a tutor's contact book.

Teams are small, name-validated groups of unique people.  The package
ships a pure domain core and a thin command-line front end.
"""

import logging

from teambook.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = ["__version__"]
