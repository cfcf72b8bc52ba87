from __future__ import annotations

import json
import os
import sys
from typing import NoReturn, Optional, Sequence, TextIO

from xbparams.constants import EXIT_INTERRUPTED, EXIT_OK
from xbparams.logging.factory import DefaultLoggerFactory
from xbparams.logging.helpers import get_logger
from xbparams.parameters import ParseSignal, ParseSuccess, Parameters
from xbparams.runtime.settings import ParserSettings

logger = get_logger('xbparams')

USAGE = """\
Usage: xbparams [options] [project-file]

    The project file is optional. Without one, the current directory is
    searched for a file matching *.??proj.

Options:
    /help, /h, /?                     Show this usage text
    /version, /ver                    Show the version
    /nologo                           Do not print the banner
    /target:T1;T2                     Build the given targets (short: /t:)
    /property:N1=V1;N2=V2             Set or override properties (short: /p:)
    /logger:CLASS[,ASSEMBLY][;PARAMS] Attach a logger (short: /l:)
    /verbosity:LEVEL                  q[uiet], m[inimal], n[ormal],
                                      d[etailed] or diag[nostic] (short: /v:)
    /consoleloggerparameters:PARAMS   Console logger parameters (short: /clp:)
    /noconsolelogger                  Disable the console logger (short: /noconlog)
    /validate[:SCHEMA]                Validate the project file (short: /val)
    /noautoresponse                   Do not read xbuild.rsp (short: /noautorsp)
    @FILE                             Read more arguments from FILE
"""


def _banner() -> str:
    from xbparams import __version__
    return f'xbparams {__version__} - xbuild command-line interpreter'


def _configure_logging() -> None:
    """Apply XBPARAMS_JSON_LOGS and XBPARAMS_LOG_LEVEL; a changed mode reconfigures the handler."""
    factory = DefaultLoggerFactory.from_env()
    mode = (factory.json_logs, factory.level)
    if getattr(_configure_logging, '_configured_mode', None) == mode:
        return
    global logger
    logger = factory.get_logger('xbparams')
    setattr(_configure_logging, '_configured_mode', mode)


class XBParamsCli:
    """Top-level façade: parse argv, print the result and map it to an exit code."""

    @staticmethod
    def run(
        argv: Sequence[str],
        *,
        settings: Optional[ParserSettings] = None,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ) -> int:
        out = out or sys.stdout
        err = err or sys.stderr
        _configure_logging()

        outcome = Parameters(settings or ParserSettings.from_env()).parse(list(argv))

        if isinstance(outcome, ParseSignal):
            print(_banner(), file=out)
            if outcome.kind == 'usage':
                print(file=out)
                print(USAGE, end='', file=out)
            return outcome.exit_code

        if isinstance(outcome, ParseSuccess):
            if not outcome.config.no_logo:
                print(_banner(), file=err)
            json.dump(outcome.config.to_dict(), out, indent=2, ensure_ascii=False)
            out.write('\n')
            return EXIT_OK

        logger.error('%s', outcome.message)
        return outcome.exit_code


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for `python -m xbparams` and the `xbparams` script."""
    try:
        raise SystemExit(XBParamsCli.run(sys.argv[1:] if argv is None else argv))
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(EXIT_INTERRUPTED)
    except BrokenPipeError:
        raise SystemExit(EXIT_OK)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
