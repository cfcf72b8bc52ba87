"""
flags – Centralized switch tables for xbparams.

A single source of truth for the switch spellings shared by the response
expander, the directive dispatcher and the usage text.

Exports
-------
NO_AUTO_RESPONSE_PREFIXES : Tuple[str, ...]
    Raw-argument prefixes that disable the default response file.
EXACT_SWITCHES : Dict[str, str]
    Parameterless switches mapped to the name of the action they trigger.
PREFIX_SWITCHES : Tuple[Tuple[str, Tuple[str, ...]], ...]
    Ordered (action, prefixes) pairs for switches that carry a value.
VERBOSITY_NAMES : Dict[str, Verbosity]
    Accepted '/verbosity:' values.
"""
from typing import Dict, Optional, Tuple

from xbparams.core.models import Verbosity


NO_AUTO_RESPONSE_PREFIXES: Tuple[str, ...] = ("/noautoresponse", "/noautorsp")

EXACT_SWITCHES: Dict[str, str] = {
    "/help": "help", "/h": "help", "/?": "help",
    "/nologo": "nologo",
    "/version": "version", "/ver": "version",
    "/noconsolelogger": "noconsolelogger", "/noconlog": "noconsolelogger",
    "/validate": "validate", "/val": "validate",
}

# Order matters: the first matching prefix wins.
PREFIX_SWITCHES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("target", ("/target:", "/t:")),
    ("property", ("/property:", "/p:")),
    ("logger", ("/logger:", "/l:")),
    ("verbosity", ("/verbosity:", "/v:")),
    ("consoleloggerparameters", ("/consoleloggerparameters:", "/clp:")),
    ("validate", ("/validate:", "/val:")),
)

VERBOSITY_NAMES: Dict[str, Verbosity] = {
    "q": Verbosity.QUIET, "quiet": Verbosity.QUIET,
    "m": Verbosity.MINIMAL, "minimal": Verbosity.MINIMAL,
    "n": Verbosity.NORMAL, "normal": Verbosity.NORMAL,
    "d": Verbosity.DETAILED, "detailed": Verbosity.DETAILED,
    "diag": Verbosity.DIAGNOSTIC, "diagnostic": Verbosity.DIAGNOSTIC,
}


def match_prefix(token: str) -> Optional[str]:
    """Return the action name of the first prefix pair matching *token*."""
    for action, prefixes in PREFIX_SWITCHES:
        if token.startswith(prefixes):
            return action
    return None
