from __future__ import annotations

from pathlib import Path
from typing import List, Protocol, Sequence, runtime_checkable


@runtime_checkable
class ResponseFileReaderProtocol(Protocol):
    def read_tokens(self, path: Path) -> List[str]:
        ...


@runtime_checkable
class ProjectFileResolverProtocol(Protocol):
    def resolve(self, remaining: Sequence[str]) -> str:
        ...

    def candidates(self) -> List[Path]:
        ...
