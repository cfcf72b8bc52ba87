from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

# Implicit response file looked up next to the tool binaries.
DEFAULT_RESPONSE_FILE: str = 'xbuild.rsp'

# Project files discovered in the working directory when none is given.
PROJECT_FILE_PATTERN: str = '*.??proj'

RESPONSE_FILE_PREFIX: str = '@'
SWITCH_PREFIX: str = '/'

# Exit codes reported by the CLI shell. Values 1-6 match xbuild.
EXIT_OK: int = 0
EXIT_DUPLICATE_RESPONSE_FILE: int = 1
EXIT_RESPONSE_FILE_IO: int = 2
EXIT_NO_PROJECT_FILE: int = 3
EXIT_TOO_MANY_PROJECT_FILES: int = 4
EXIT_VERSION_REQUESTED: int = 5
EXIT_USAGE_REQUESTED: int = 6
EXIT_MALFORMED_PROPERTY: int = 7
EXIT_INTERRUPTED: int = 130
