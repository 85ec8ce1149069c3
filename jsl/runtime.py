"""Runtime values and the objects that hold compiled code."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from jsl.chunk import Chunk


class PrintFlags(Enum):
    """How a value should be rendered."""

    DEBUG = auto()
    PRETTY = auto()


@dataclass(eq=False)
class Function:
    """A compiled function: its bytecode chunk and what it belongs to."""

    module: Module | None = field(repr=False)
    name: str | None
    source: str | None
    arity: int = 0
    chunk: Chunk = field(default_factory=Chunk, repr=False)


@dataclass(eq=False)
class Module:
    """A compiled source file; its top-level code lives in ``script``."""

    file_path: str | None
    variables: dict[str, Any] = field(default_factory=dict, repr=False)
    exports: dict[str, Any] = field(default_factory=dict, repr=False)
    script: Function = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.script = Function(self, self.file_path, self.file_path, 0)

    @property
    def chunk(self) -> Chunk:
        """The bytecode of the module's top-level code."""
        return self.script.chunk


def format_value(value: Any, flags: PrintFlags = PrintFlags.PRETTY) -> str:
    """Render a runtime value as text.

    Integers print as decimal numbers; managed objects print through their
    own ``format(flags)`` method. Anything else is not a runtime value.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    formatter = getattr(value, "format", None)
    if callable(formatter):
        return str(formatter(flags))
    raise TypeError(f"not a runtime value: {value!r}")