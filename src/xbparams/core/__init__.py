from __future__ import annotations

"""Public surface for xbparams.core.

Protocol types and the data model live here so downstream consumers have a
stable import location:

    from xbparams.core import ParsedConfiguration, Verbosity, ...
"""

from xbparams.core.interfaces import (
    ProjectFileResolverProtocol,
    ResponseFileReaderProtocol,
)
from xbparams.core.models import (
    ConfigurationBuilder,
    LoggerSpec,
    ParsedConfiguration,
    PropertyAssignment,
    Verbosity,
)

__all__ = [
    # Protocols
    "ProjectFileResolverProtocol",
    "ResponseFileReaderProtocol",
    # Models
    "ConfigurationBuilder",
    "LoggerSpec",
    "ParsedConfiguration",
    "PropertyAssignment",
    "Verbosity",
]
