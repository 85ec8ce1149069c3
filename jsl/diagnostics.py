"""Receivers for errors and warnings reported while processing source."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterator

from jsl.tokens import SourcePosition


class ErrorListener(ABC):
    """Receives errors and warnings tied to source positions."""

    @abstractmethod
    def error(self, pos: SourcePosition, msg: str) -> None:
        """Report an error at ``pos``."""

    @abstractmethod
    def warning(self, pos: SourcePosition, msg: str) -> None:
        """Report a warning at ``pos``."""


@dataclass(frozen=True)
class Diagnostic:
    """A single reported error or warning."""

    kind: str
    position: SourcePosition
    message: str

    @property
    def is_error(self) -> bool:
        return self.kind == "error"

    def __str__(self) -> str:
        file_name = self.position.file_name or "<unknown>"
        return f"{file_name}:{self.position.line}: {self.kind}: {self.message}"


@dataclass
class DiagnosticCollector(ErrorListener):
    """An error listener that keeps every diagnostic in report order."""

    diagnostics: list[Diagnostic] = field(default_factory=list)

    def error(self, pos: SourcePosition, msg: str) -> None:
        self.diagnostics.append(Diagnostic("error", pos, str(msg)))

    def warning(self, pos: SourcePosition, msg: str) -> None:
        self.diagnostics.append(Diagnostic("warning", pos, str(msg)))

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.is_error]

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if not d.is_error]

    @property
    def has_errors(self) -> bool:
        return any(d.is_error for d in self.diagnostics)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.diagnostics)

    def __len__(self) -> int:
        return len(self.diagnostics)