"""A chunk of bytecode with its constant table and line information."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator

from jsl.instructions import Instruction, read_instruction
from jsl.tokens import SourcePosition


@dataclass
class LinesTable:
    """Maps indices (byte offsets or constant slots) to source lines."""

    _lines: dict[int, int] = field(default_factory=dict)

    def push_line(self, index: int, line: int) -> None:
        self._lines[index] = line

    def get_line(self, index: int) -> int | None:
        return self._lines.get(index)

    def __len__(self) -> int:
        return len(self._lines)


@dataclass
class Chunk:
    """Encoded instructions and the constants they refer to."""

    code: bytearray = field(default_factory=bytearray)
    constants: list[Any] = field(default_factory=list)
    code_lines: LinesTable = field(default_factory=LinesTable)
    constant_lines: LinesTable = field(default_factory=LinesTable)

    def push_instruction(self, inst: Instruction, pos: SourcePosition | None = None) -> int:
        """Append ``inst`` and return the offset of its first byte."""
        self.code.extend(inst.encode())
        index = len(self.code) - inst.size()
        if pos is not None:
            self.code_lines.push_line(index, pos.line)
        return index

    def push_constant(self, value: Any, pos: SourcePosition | None = None) -> int:
        """Append ``value`` to the constant table and return its index."""
        self.constants.append(value)
        index = len(self.constants) - 1
        if pos is not None:
            self.constant_lines.push_line(index, pos.line)
        return index

    def code_line(self, index: int) -> int | None:
        """Source line of the instruction starting at byte ``index``, if known."""
        return self.code_lines.get_line(index)

    def constant_line(self, index: int) -> int | None:
        """Source line of constant ``index``, if known."""
        return self.constant_lines.get_line(index)

    def instructions(self) -> Iterator[tuple[int, Instruction]]:
        """Yield each instruction with its byte offset, in order."""
        offset = 0
        while offset < len(self.code):
            inst, next_offset = read_instruction(self.code, offset)
            yield offset, inst
            offset = next_offset