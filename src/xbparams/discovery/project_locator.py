from __future__ import annotations

"""
Project file resolution.

Positional arguments left over after switch classification name the project
file. With none, the working directory is searched (non-recursively) for a
file matching the project pattern.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from xbparams.core.interfaces.fs import ProjectFileResolverProtocol
from xbparams.errors import NoProjectFileError, TooManyProjectFilesError
from xbparams.logging.helpers import get_logger
from xbparams.runtime.settings import ParserSettings


@dataclass
class ProjectFileResolver(ProjectFileResolverProtocol):
    """Turn positional arguments into a single project file path."""

    settings: ParserSettings = field(default_factory=ParserSettings)
    logger: Optional[logging.Logger] = None

    def __post_init__(self) -> None:
        if self.logger is None:
            self.logger = get_logger("discovery")

    def candidates(self) -> List[Path]:
        """Return files in the working directory matching the project pattern.

        Without `sort_candidates` the directory listing order is kept, which
        the platform does not guarantee.
        """
        root = self.settings.cwd
        found = [p for p in root.glob(self.settings.project_pattern) if p.is_file()]
        if self.settings.sort_candidates:
            found.sort(key=lambda p: p.name)
        return found

    def resolve(self, remaining: Sequence[str]) -> str:
        if len(remaining) > 1:
            raise TooManyProjectFilesError(remaining)
        if remaining:
            return remaining[0]

        found = self.candidates()
        if not found:
            raise NoProjectFileError(self.settings.cwd, self.settings.project_pattern)
        if len(found) > 1:
            self.logger.debug(
                "%d project files match %s, using %s",
                len(found), self.settings.project_pattern, found[0].name,
            )
        return str(found[0])
