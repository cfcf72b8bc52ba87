from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from xbparams.constants import SWITCH_PREFIX
from xbparams.core.models import ConfigurationBuilder, LoggerSpec, PropertyAssignment
from xbparams.errors import MalformedPropertyError, UsageRequested, VersionRequested
from xbparams.logging.helpers import get_logger
from xbparams.parsing.flags import EXACT_SWITCHES, VERBOSITY_NAMES, match_prefix


def switch_value(token: str) -> str:
    """Return the value portion of '/name:value' (everything after the first ':')."""
    _, _, value = token.partition(":")
    return value


class DirectiveDispatcher:
    """Classify flat arguments and route each switch to its parser.

    Switches that match neither the exact table nor a known prefix are
    ignored, as are unknown '/verbosity:' values. Both are logged at debug
    level only; existing response files rely on unknown switches being
    harmless.
    """

    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger("directives")
        self._exact: Dict[str, Callable[[ConfigurationBuilder, str], None]] = {
            "help": self._on_help,
            "version": self._on_version,
            "nologo": self._on_nologo,
            "noconsolelogger": self._on_noconsolelogger,
            "validate": self._on_validate,
        }
        self._prefixed: Dict[str, Callable[[ConfigurationBuilder, str], None]] = {
            "target": self.process_target,
            "property": self.process_property,
            "logger": self.process_logger,
            "verbosity": self.process_verbosity,
            "consoleloggerparameters": self.process_console_logger_parameters,
            "validate": self.process_validate,
        }

    def classify(
        self, flat_args: Iterable[str], builder: Optional[ConfigurationBuilder] = None
    ) -> Tuple[ConfigurationBuilder, List[str]]:
        """Apply every switch to *builder* and return it with the positional tokens."""
        cfg = builder if builder is not None else ConfigurationBuilder()
        remaining: List[str] = []
        for tok in flat_args:
            if not tok:
                continue
            if tok.startswith(SWITCH_PREFIX):
                self.dispatch(cfg, tok)
            else:
                remaining.append(tok)
        return cfg, remaining

    def dispatch(self, cfg: ConfigurationBuilder, token: str) -> None:
        action = EXACT_SWITCHES.get(token)
        if action is not None:
            self._exact[action](cfg, token)
            return
        action = match_prefix(token)
        if action is None:
            self._log.debug("ignoring unknown switch %r", token)
            return
        self._prefixed[action](cfg, token)

    # -------- Parameterless switches --------

    @staticmethod
    def _on_help(cfg: ConfigurationBuilder, token: str) -> None:
        raise UsageRequested(token)

    @staticmethod
    def _on_version(cfg: ConfigurationBuilder, token: str) -> None:
        raise VersionRequested(token)

    @staticmethod
    def _on_nologo(cfg: ConfigurationBuilder, token: str) -> None:
        cfg.no_logo = True

    @staticmethod
    def _on_noconsolelogger(cfg: ConfigurationBuilder, token: str) -> None:
        cfg.no_console_logger = True

    @staticmethod
    def _on_validate(cfg: ConfigurationBuilder, token: str) -> None:
        cfg.validate = True

    # -------- Switches with a value --------

    @staticmethod
    def process_target(cfg: ConfigurationBuilder, token: str) -> None:
        """Replace the target list; a later '/target:' wins entirely."""
        cfg.targets = [name for name in switch_value(token).split(";") if name]

    @staticmethod
    def process_property(cfg: ConfigurationBuilder, token: str) -> None:
        """Append NAME=VALUE clauses; repeated '/property:' switches accumulate."""
        for clause in switch_value(token).split(";"):
            if not clause:
                continue
            name, sep, value = clause.partition("=")
            if not sep or not name:
                raise MalformedPropertyError(clause, token)
            cfg.properties.append(PropertyAssignment(name, value))

    @staticmethod
    def process_logger(cfg: ConfigurationBuilder, token: str) -> None:
        cfg.loggers.append(LoggerSpec(token))

    def process_verbosity(self, cfg: ConfigurationBuilder, token: str) -> None:
        value = switch_value(token)
        level = VERBOSITY_NAMES.get(value)
        if level is None:
            self._log.debug("ignoring unknown verbosity %r, keeping %s", value, cfg.verbosity.value)
            return
        cfg.verbosity = level

    @staticmethod
    def process_console_logger_parameters(cfg: ConfigurationBuilder, token: str) -> None:
        # Kept verbatim, the console logger splits it.
        cfg.console_logger_parameters = token

    @staticmethod
    def process_validate(cfg: ConfigurationBuilder, token: str) -> None:
        cfg.validate = True
        cfg.validation_schema = switch_value(token)
