from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class Verbosity(Enum):
    """Logger verbosity levels understood by the build engine."""

    QUIET = 'quiet'
    MINIMAL = 'minimal'
    NORMAL = 'normal'
    DETAILED = 'detailed'
    DIAGNOSTIC = 'diagnostic'


@dataclass(frozen=True)
class PropertyAssignment:
    name: str
    value: str

    def as_pair(self) -> Tuple[str, str]:
        return (self.name, self.value)


@dataclass(frozen=True)
class LoggerSpec:
    """Raw '/logger:' switch, parsed later by the logger loader."""

    raw: str

    @property
    def descriptor(self) -> str:
        """Return the text after the switch name (class, assembly, parameters)."""
        _, _, rest = self.raw.partition(':')
        return rest


@dataclass(frozen=True)
class ParsedConfiguration:
    """Immutable result of one successful parse."""

    project_file: str
    display_help: bool = False
    display_version: bool = False
    no_logo: bool = False
    no_console_logger: bool = False
    console_logger_parameters: str = ''
    verbosity: Verbosity = Verbosity.NORMAL
    validate: bool = False
    validation_schema: Optional[str] = None
    targets: Tuple[str, ...] = ()
    properties: Tuple[PropertyAssignment, ...] = ()
    loggers: Tuple[LoggerSpec, ...] = ()

    def property_map(self) -> Dict[str, str]:
        """Return properties as a mapping; later assignments win."""
        return {p.name: p.value for p in self.properties}

    def to_dict(self) -> Dict[str, Any]:
        return {
            'project_file': self.project_file,
            'targets': list(self.targets),
            'properties': [list(p.as_pair()) for p in self.properties],
            'loggers': [lg.raw for lg in self.loggers],
            'verbosity': self.verbosity.value,
            'console_logger_parameters': self.console_logger_parameters,
            'no_console_logger': self.no_console_logger,
            'no_logo': self.no_logo,
            'validate': self.validate,
            'validation_schema': self.validation_schema,
        }


@dataclass
class ConfigurationBuilder:
    """Mutable accumulator threaded through the directive parsers.

    Targets and console logger parameters are overwritten by later switches;
    properties and loggers accumulate.
    """

    no_logo: bool = False
    no_console_logger: bool = False
    console_logger_parameters: str = ''
    verbosity: Verbosity = Verbosity.NORMAL
    validate: bool = False
    validation_schema: Optional[str] = None
    targets: List[str] = field(default_factory=list)
    properties: List[PropertyAssignment] = field(default_factory=list)
    loggers: List[LoggerSpec] = field(default_factory=list)

    def build(self, project_file: str) -> ParsedConfiguration:
        return ParsedConfiguration(
            project_file=project_file,
            no_logo=self.no_logo,
            no_console_logger=self.no_console_logger,
            console_logger_parameters=self.console_logger_parameters,
            verbosity=self.verbosity,
            validate=self.validate,
            validation_schema=self.validation_schema,
            targets=tuple(self.targets),
            properties=tuple(self.properties),
            loggers=tuple(self.loggers),
        )
