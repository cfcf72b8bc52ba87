from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Mapping, Optional

from xbparams.constants import DEFAULT_RESPONSE_FILE, PROJECT_FILE_PATTERN


def _program_dir() -> Path:
    """Directory holding the running program, used to locate xbuild.rsp."""
    prog = sys.argv[0] if sys.argv and sys.argv[0] else ''
    if not prog or prog == '-c':
        return Path.cwd()
    return Path(prog).resolve().parent


@dataclass(frozen=True)
class ParserSettings:
    """Immutable configuration for one argument interpreter.

    Attributes:
        bin_path: Tool directory searched for the default response file.
        cwd: Base directory for '@file' canonicalization and project discovery.
        response_file_name: File name of the default response file.
        project_pattern: Glob used to discover a project file.
        sort_candidates: Sort discovered project files by name so that the
            choice among several candidates is deterministic.
    """
    bin_path: Path = field(default_factory=_program_dir)
    cwd: Path = field(default_factory=Path.cwd)
    response_file_name: str = DEFAULT_RESPONSE_FILE
    project_pattern: str = PROJECT_FILE_PATTERN
    sort_candidates: bool = True

    @property
    def default_response_file(self) -> Path:
        return self.bin_path / self.response_file_name

    def with_cwd(self, cwd: Path) -> "ParserSettings":
        """Return a copy rooted at `cwd`."""
        return replace(self, cwd=cwd)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ParserSettings":
        """Build settings honoring XBPARAMS_BIN_PATH and XBPARAMS_CWD."""
        env = os.environ if environ is None else environ
        kwargs = {}
        bin_path = env.get('XBPARAMS_BIN_PATH')
        if bin_path:
            kwargs['bin_path'] = Path(bin_path)
        cwd = env.get('XBPARAMS_CWD')
        if cwd:
            kwargs['cwd'] = Path(cwd)
        return cls(**kwargs)
