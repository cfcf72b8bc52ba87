from __future__ import annotations

"""
Parameters – façade running the three parsing stages.

    raw args ──ResponseExpander──▶ flat args ──DirectiveDispatcher──▶
    (builder, positionals) ──ProjectFileResolver──▶ ParsedConfiguration

`Parameters.parse` returns a tagged `ParseOutcome` instead of raising, so
callers match on `outcome.kind` ('ok', 'usage', 'version' or an error
kind). `Parameters.parse_or_raise` is the exception-based variant.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from xbparams.constants import EXIT_OK
from xbparams.core.interfaces.fs import ProjectFileResolverProtocol
from xbparams.core.models import ParsedConfiguration
from xbparams.discovery.project_locator import ProjectFileResolver
from xbparams.errors import CommandLineError, InformationalSignal
from xbparams.logging.helpers import get_logger
from xbparams.parsing.directives import DirectiveDispatcher
from xbparams.parsing.response import ResponseExpander
from xbparams.runtime.settings import ParserSettings


@dataclass(frozen=True)
class ParseSuccess:
    config: ParsedConfiguration

    kind = 'ok'
    exit_code = EXIT_OK


@dataclass(frozen=True)
class ParseSignal:
    """Usage or version request: print informational text and exit."""
    signal: InformationalSignal

    @property
    def kind(self) -> str:
        return self.signal.kind

    @property
    def exit_code(self) -> int:
        return self.signal.exit_code

    @property
    def message(self) -> str:
        return self.signal.message


@dataclass(frozen=True)
class ParseFailure:
    error: CommandLineError

    @property
    def kind(self) -> str:
        return self.error.kind

    @property
    def exit_code(self) -> int:
        return self.error.exit_code

    @property
    def message(self) -> str:
        return self.error.message


ParseOutcome = Union[ParseSuccess, ParseSignal, ParseFailure]


class Parameters:
    """Command-line interpreter for one build invocation."""

    def __init__(
        self,
        settings: Optional[ParserSettings] = None,
        *,
        expander: Optional[ResponseExpander] = None,
        dispatcher: Optional[DirectiveDispatcher] = None,
        resolver: Optional[ProjectFileResolverProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.settings = settings or ParserSettings()
        self._log = logger or get_logger('parameters')
        self._expander = expander or ResponseExpander(self.settings, logger=get_logger('response'))
        self._dispatcher = dispatcher or DirectiveDispatcher(logger=get_logger('directives'))
        self._resolver = resolver or ProjectFileResolver(self.settings, logger=get_logger('discovery'))

    def parse_or_raise(self, args: Sequence[str]) -> ParsedConfiguration:
        """Parse *args* and return the configuration, raising on any failure or signal."""
        flat = self._expander.expand(args)
        self._log.debug('expanded %d raw argument(s) into %d token(s)', len(args), len(flat))
        builder, remaining = self._dispatcher.classify(flat)
        project_file = self._resolver.resolve(remaining)
        return builder.build(project_file)

    def parse(self, args: Sequence[str]) -> ParseOutcome:
        try:
            return ParseSuccess(self.parse_or_raise(args))
        except InformationalSignal as sig:
            return ParseSignal(sig)
        except CommandLineError as exc:
            self._log.debug('parse failed (%s): %s', exc.kind, exc.message)
            return ParseFailure(exc)


def parse_arguments(args: Sequence[str], settings: Optional[ParserSettings] = None) -> ParseOutcome:
    """Convenience wrapper: parse *args* with fresh default components."""
    return Parameters(settings).parse(args)
