"""Scanner, syntax tree, bytecode chunks and disassembler for a small scripting language."""

__version__ = "0.1.0"