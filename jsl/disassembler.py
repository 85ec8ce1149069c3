"""Human-readable listings of bytecode chunks."""

from __future__ import annotations

import sys
from typing import TextIO

from jsl.chunk import Chunk
from jsl.instructions import ConstantInstruction, Instruction, read_instruction
from jsl.runtime import PrintFlags, format_value


class Disassembler:
    """Writes the instructions of a chunk, one per line, to a text stream."""

    def __init__(self, chunk: Chunk, name: str, path: str, out: TextIO | None = None) -> None:
        self._chunk = chunk
        self._name = name
        self._path = path
        self._out = out if out is not None else sys.stdout

    def full_dump(self) -> None:
        """Write a header followed by every instruction of the chunk."""
        self._out.write(f"Chunk disassembly: {self._name}\n")
        self._out.write(f"Path: {self._path}\n")
        self._out.write("OFFS LINE NAME        ARGS\n")
        self._out.write("                          \n")

        offset = 0
        while offset < len(self._chunk.code):
            offset = self.disassemble_instruction(offset)

    def disassemble_instruction(self, offset: int) -> int:
        """Write the instruction at ``offset`` and return the offset after it."""
        line = self._chunk.code_line(offset)
        inst, next_offset = read_instruction(self._chunk.code, offset)
        line_text = "" if line is None else str(line)
        self._out.write(f"{offset} {line_text} {self._describe(inst)}\n")
        return next_offset

    def _describe(self, inst: Instruction) -> str:
        if isinstance(inst, ConstantInstruction):
            constant = format_value(self._chunk.constants[inst.index], PrintFlags.DEBUG)
            return f"{inst.mnemonic} #{inst.index}  {constant}"
        return inst.mnemonic