from __future__ import annotations

from xbparams.cli import XBParamsCli
from xbparams.core.models import (
    LoggerSpec,
    ParsedConfiguration,
    PropertyAssignment,
    Verbosity,
)
from xbparams.errors import (
    CommandLineError,
    DuplicateResponseFileError,
    InformationalSignal,
    MalformedPropertyError,
    NoProjectFileError,
    ResponseFileIOError,
    TooManyProjectFilesError,
    UsageRequested,
    VersionRequested,
)
from xbparams.parameters import (
    ParseFailure,
    ParseOutcome,
    ParseSignal,
    ParseSuccess,
    Parameters,
    parse_arguments,
)
from xbparams.runtime.settings import ParserSettings

__version__ = '1.0.0'

__all__ = [
    'XBParamsCli',
    'Parameters',
    'ParserSettings',
    'parse_arguments',
    'ParseOutcome',
    'ParseSuccess',
    'ParseSignal',
    'ParseFailure',
    'ParsedConfiguration',
    'PropertyAssignment',
    'LoggerSpec',
    'Verbosity',
    'CommandLineError',
    'InformationalSignal',
    'UsageRequested',
    'VersionRequested',
    'DuplicateResponseFileError',
    'ResponseFileIOError',
    'MalformedPropertyError',
    'NoProjectFileError',
    'TooManyProjectFilesError',
]
