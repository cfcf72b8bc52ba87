from __future__ import annotations

"""Exception taxonomy for command-line parsing.

Every failure is terminal: parsing stops at the first one. Two members of
the hierarchy are not failures but informational signals (usage and
version requests); they derive from `InformationalSignal` so callers can
tell them apart from real errors.
"""

from pathlib import Path
from typing import Optional, Sequence

from xbparams.constants import (
    EXIT_DUPLICATE_RESPONSE_FILE,
    EXIT_MALFORMED_PROPERTY,
    EXIT_NO_PROJECT_FILE,
    EXIT_RESPONSE_FILE_IO,
    EXIT_TOO_MANY_PROJECT_FILES,
    EXIT_USAGE_REQUESTED,
    EXIT_VERSION_REQUESTED,
)


class CommandLineError(Exception):
    """Base class for everything the argument interpreter can raise."""

    kind: str = 'error'
    exit_code: int = 1

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InformationalSignal(CommandLineError):
    """Stop parsing; the caller prints informational text and exits."""

    kind = 'signal'


class UsageRequested(InformationalSignal):
    kind = 'usage'
    exit_code = EXIT_USAGE_REQUESTED

    def __init__(self, switch: str = '/help') -> None:
        super().__init__('Show usage')
        self.switch = switch


class VersionRequested(InformationalSignal):
    kind = 'version'
    exit_code = EXIT_VERSION_REQUESTED

    def __init__(self, switch: str = '/version') -> None:
        super().__init__('Show version')
        self.switch = switch


class DuplicateResponseFileError(CommandLineError):
    """The same response file was named more than once via '@'."""

    kind = 'duplicate_response_file'
    exit_code = EXIT_DUPLICATE_RESPONSE_FILE

    def __init__(self, path: Path) -> None:
        super().__init__(f'response file {path} was already specified')
        self.path = path


class ResponseFileIOError(CommandLineError):
    """A response file could not be opened, read or decoded."""

    kind = 'response_file_io'
    exit_code = EXIT_RESPONSE_FILE_IO

    def __init__(self, path: Optional[Path], cause: Optional[BaseException] = None) -> None:
        detail = f': {cause}' if cause is not None else ''
        super().__init__(f'error while loading response file {path or "<empty>"}{detail}')
        self.path = path
        self.cause = cause


class MalformedPropertyError(CommandLineError):
    """A '/property:' clause is not of the form NAME=VALUE."""

    kind = 'malformed_property'
    exit_code = EXIT_MALFORMED_PROPERTY

    def __init__(self, clause: str, token: str = '') -> None:
        where = f' in {token!r}' if token else ''
        super().__init__(f'malformed property assignment {clause!r}{where}: expected NAME=VALUE')
        self.clause = clause
        self.token = token


class NoProjectFileError(CommandLineError):
    kind = 'no_project_file'
    exit_code = EXIT_NO_PROJECT_FILE

    def __init__(self, directory: Path, pattern: str) -> None:
        super().__init__(f'no project file specified and no {pattern} file found in {directory}')
        self.directory = directory
        self.pattern = pattern


class TooManyProjectFilesError(CommandLineError):
    kind = 'too_many_project_files'
    exit_code = EXIT_TOO_MANY_PROJECT_FILES

    def __init__(self, candidates: Sequence[str]) -> None:
        listed = ', '.join(candidates)
        super().__init__(f'too many project files specified: {listed}')
        self.candidates = tuple(candidates)
