from __future__ import annotations

"""
ResponseTokenizer – quote-aware splitter for response file content.

Rules:
    * A double or single quote opens a span copied verbatim (quotes removed)
      until the matching quote or the end of the line.
    * Outside quotes a space ends the current token; empty tokens are never
      emitted.
    * Every other character, tabs included, belongs to the current token.
    * Tokens never span lines. There is no escape, comment or continuation
      syntax.
"""

from typing import Iterable, List

_QUOTES = ('"', "'")


class ResponseTokenizer:
    @staticmethod
    def tokenize_line(line: str) -> List[str]:
        out: List[str] = []
        buf: List[str] = []
        i, n = (0, len(line))
        while i < n:
            ch = line[i]
            if ch in _QUOTES:
                end = line.find(ch, i + 1)
                if end == -1:
                    end = n
                buf.append(line[i + 1:end])
                i = end + 1
                continue
            if ch == " ":
                if buf:
                    out.append("".join(buf))
                    buf = []
            else:
                buf.append(ch)
            i += 1
        if buf:
            out.append("".join(buf))
        return [tok for tok in out if tok]

    @staticmethod
    def tokenize_lines(lines: Iterable[str]) -> List[str]:
        """Tokenize every line and concatenate the results in order."""
        tokens: List[str] = []
        for raw in lines:
            tokens.extend(ResponseTokenizer.tokenize_line(raw.rstrip("\r\n")))
        return tokens

    @staticmethod
    def tokenize_text(text: str) -> List[str]:
        return ResponseTokenizer.tokenize_lines(text.splitlines())
