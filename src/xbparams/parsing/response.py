from __future__ import annotations

"""
Response file expansion.

Turns the raw process arguments into the flat argument sequence:

    * '/noautoresponse' and '/noautorsp' (prefix match) suppress the default
      response file and are dropped.
    * '@FILE' loads FILE in place. Each canonical path may appear only once
      per invocation.
    * Everything else is kept verbatim.
    * The default response file is appended last, when present and not
      suppressed. It is exempt from the duplicate check.

Tokens read from a response file are never scanned for further '@'
references.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional, Sequence, Set

from xbparams.constants import RESPONSE_FILE_PREFIX
from xbparams.core.interfaces.fs import ResponseFileReaderProtocol
from xbparams.errors import DuplicateResponseFileError, ResponseFileIOError
from xbparams.logging.helpers import get_logger, trace_io
from xbparams.parsing.flags import NO_AUTO_RESPONSE_PREFIXES
from xbparams.parsing.tokenizer import ResponseTokenizer
from xbparams.runtime.settings import ParserSettings


class ResponseFileReader(ResponseFileReaderProtocol):
    """Read a response file from disk and tokenize it.

    Undecodable bytes are replaced with U+FFFD instead of failing, so
    response files saved in a legacy code page still load.
    """

    def __init__(self, *, encoding: str = "utf-8-sig", logger: Optional[logging.Logger] = None) -> None:
        self._encoding = encoding
        self._log = logger or get_logger("response.reader")

    def read_tokens(self, path: Path) -> List[str]:
        trace_io(self._log, "reading response file", path=str(path))
        try:
            with path.open("r", encoding=self._encoding, errors="replace") as fp:
                return ResponseTokenizer.tokenize_lines(fp)
        except OSError as exc:
            raise ResponseFileIOError(path, exc) from exc


class ResponseExpander:
    """Expand '@file' references into a flat argument list."""

    def __init__(
        self,
        settings: Optional[ParserSettings] = None,
        *,
        reader: Optional[ResponseFileReaderProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._settings = settings or ParserSettings()
        self._log = logger or get_logger("response")
        self._reader = reader or ResponseFileReader(logger=self._log)

    def canonicalize(self, name: str) -> Path:
        """Return *name* as an absolute, normalized path (symlinks kept)."""
        if not name:
            raise ResponseFileIOError(None, ValueError("empty response file name"))
        return Path(os.path.abspath(self._settings.cwd / name))

    def expand(self, raw_args: Sequence[str]) -> List[str]:
        flat: List[str] = []
        seen: Set[Path] = set()
        auto_response = True

        for tok in raw_args:
            if tok.startswith(NO_AUTO_RESPONSE_PREFIXES):
                auto_response = False
                continue
            if not tok.startswith(RESPONSE_FILE_PREFIX):
                flat.append(tok)
                continue
            path = self.canonicalize(tok[len(RESPONSE_FILE_PREFIX):])
            if path in seen:
                raise DuplicateResponseFileError(path)
            seen.add(path)
            tokens = self._reader.read_tokens(path)
            self._log.debug("loaded %d token(s) from response file %s", len(tokens), path)
            flat.extend(tokens)

        if auto_response:
            flat.extend(self._load_default())

        return flat

    def _load_default(self) -> List[str]:
        path = self._settings.default_response_file
        if not path.is_file():
            self._log.debug("default response file %s not found, skipping", path)
            return []
        tokens = self._reader.read_tokens(path)
        self._log.debug("loaded %d token(s) from default response file %s", len(tokens), path)
        return tokens
