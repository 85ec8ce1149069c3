"""Bytecode opcodes, instruction forms and decoding of encoded instructions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Union


class Opcode(IntEnum):
    """One-byte operation codes, numbered in declaration order."""

    PUSH_CONSTANT = 0
    POP = 1
    PRINT = 2
    RETURN = 3
    NEGATE = 4
    NOT = 5
    ADD = 6
    SUBTRACT = 7
    MULTIPLY = 8
    DIVIDE = 9
    EQUAL = 10
    GREATER = 11
    LESS = 12

    @property
    def mnemonic(self) -> str:
        """The printed name of the opcode, e.g. ``PushConstant``."""
        return "".join(part.capitalize() for part in self.name.split("_"))

    @property
    def takes_constant(self) -> bool:
        """Whether the opcode is followed by a one-byte constant index."""
        return self in _CONSTANT_OPCODES

    def __str__(self) -> str:
        return self.mnemonic


_CONSTANT_OPCODES = frozenset({Opcode.PUSH_CONSTANT})


@dataclass(frozen=True)
class SimpleInstruction:
    """An instruction made of its opcode byte alone."""

    opcode: Opcode

    def __post_init__(self) -> None:
        opcode = Opcode(self.opcode)
        if opcode.takes_constant:
            raise ValueError(f"{opcode.mnemonic} needs a constant index")
        object.__setattr__(self, "opcode", opcode)

    @property
    def mnemonic(self) -> str:
        return self.opcode.mnemonic

    def encode(self) -> bytes:
        """The bytes this instruction occupies in a chunk."""
        return bytes((self.opcode,))

    def size(self) -> int:
        """Number of bytes the encoded instruction takes."""
        return 1


@dataclass(frozen=True)
class ConstantInstruction:
    """An opcode followed by a one-byte index into the constant table."""

    opcode: Opcode
    index: int

    def __post_init__(self) -> None:
        opcode = Opcode(self.opcode)
        if not opcode.takes_constant:
            raise ValueError(f"{opcode.mnemonic} does not take a constant index")
        if not 0 <= self.index <= 0xFF:
            raise ValueError(f"constant index {self.index} does not fit in one byte")
        object.__setattr__(self, "opcode", opcode)

    @property
    def mnemonic(self) -> str:
        return self.opcode.mnemonic

    def encode(self) -> bytes:
        """The bytes this instruction occupies in a chunk."""
        return bytes((self.opcode, self.index))

    def size(self) -> int:
        """Number of bytes the encoded instruction takes."""
        return 2


@dataclass(frozen=True)
class UnknownInstruction:
    """A single byte that is not a known opcode."""

    opcode: int

    def __post_init__(self) -> None:
        if not 0 <= self.opcode <= 0xFF:
            raise ValueError(f"opcode {self.opcode} does not fit in one byte")

    @property
    def mnemonic(self) -> str:
        """Unknown opcodes have no printed name."""
        return ""

    def encode(self) -> bytes:
        return bytes((self.opcode,))

    def size(self) -> int:
        return 1


Instruction = Union[SimpleInstruction, ConstantInstruction, UnknownInstruction]


def read_instruction(code: bytes | bytearray, offset: int) -> tuple[Instruction, int]:
    """Decode the instruction at ``offset``; return it and the offset after it.

    Raises IndexError when the code ends in the middle of an instruction.
    """

    def read_byte(at: int) -> int:
        if not 0 <= at < len(code):
            raise IndexError("corrupted chunk of code")
        return code[at]

    byte = read_byte(offset)
    try:
        opcode = Opcode(byte)
    except ValueError:
        return UnknownInstruction(byte), offset + 1

    if opcode.takes_constant:
        return ConstantInstruction(opcode, read_byte(offset + 1)), offset + 2
    return SimpleInstruction(opcode), offset + 1