# jsl

This package provides building blocks for a tiny expression language:

- a scanner that turns source text into tokens,
- syntax tree node types,
- a bytecode format with encoding and decoding,
- a chunk that holds code, constants and line numbers,
- runtime module and function objects,
- a disassembler that writes a readable listing of a chunk.

The package is a library. It has no command of its own.

## Install

```
pip install .
```

## Modules

- `jsl.tokens`: the `TokenType` enumeration, `SourcePosition` (file name and
  line), `Token` (type, position, text) and `identifier_or_keyword(text)`. The
  keywords are `print`, `true`, `false`, `null`, `if`, `else` and `var`.
- `jsl.scanner`: `Scanner(source, file_name)`. Each call to `next_token()`
  returns the next token, and returns `END_OF_FILE` once the input is used up.
  Iterating over a scanner yields the remaining tokens and stops after a single
  `END_OF_FILE`. Whitespace is skipped. Newlines advance the line count.
  Comments start with `//` and run to the end of the line. A character the
  scanner does not know gives an `ERROR` token whose text is
  `"unknown character"`.
- `jsl.diagnostics`: the abstract `ErrorListener` with `error(pos, msg)` and
  `warning(pos, msg)`. `DiagnosticCollector` is a listener that keeps every
  report as a `Diagnostic`, in order. It offers `errors`, `warnings`,
  `has_errors`, iteration and `len()`.
- `jsl.syntax_tree`: the `BinaryOperation` and `UnaryOperation` enumerations
  and the frozen nodes `BinaryExpr`, `UnaryExpr`, `IntegerLiteralExpr`,
  `ExprStmt` and `PrintStmt`. Each node carries a `position`. `ModuleAST`
  holds the statements of one file.
- `jsl.instructions`: the one-byte `Opcode` enumeration (`PushConstant`,
  `Pop`, `Print`, `Return`, `Negate`, `Not`, `Add`, `Subtract`, `Multiply`,
  `Divide`, `Equal`, `Greater`, `Less`). It also defines `SimpleInstruction`,
  `ConstantInstruction` (an opcode plus a one-byte constant index) and
  `UnknownInstruction`, each with `encode()` and `size()`.
  `read_instruction(code, offset)` decodes one instruction and returns it
  together with the offset of the next one. It raises `IndexError` when the
  code ends partway through an instruction.
- `jsl.chunk`: `LinesTable` and `Chunk`. `push_instruction(inst, pos)` returns
  the byte offset of the new instruction. `push_constant(value, pos)` returns
  the constant's index. `code_line(offset)` and `constant_line(index)` give
  the source line, or `None` if none was recorded. `instructions()` yields
  `(offset, instruction)` pairs.
- `jsl.runtime`: the `PrintFlags` enumeration, `Function` and `Module`.
  A module's top-level code lives in `module.script`, and `module.chunk` is
  that function's chunk. `format_value(value, flags)` renders integers as
  decimal text. It renders other objects through their own `format(flags)`
  method and raises `TypeError` for anything else.
- `jsl.disassembler`: `Disassembler(chunk, name, path, out)`. It writes to
  `out`, or to standard output when `out` is `None`. `full_dump()` writes a
  header and then every instruction. `disassemble_instruction(offset)` writes
  one line and returns the next offset.

## Example

```python
import sys

from jsl.chunk import Chunk
from jsl.disassembler import Disassembler
from jsl.instructions import ConstantInstruction, Opcode, SimpleInstruction
from jsl.scanner import Scanner
from jsl.tokens import SourcePosition

for token in Scanner("print 1 + 2; // sum\n", "example.jsl"):
    print(token.type.name, repr(token.text), token.position.line)

pos = SourcePosition("example.jsl", 1)
chunk = Chunk()
index = chunk.push_constant(42, pos)
chunk.push_instruction(ConstantInstruction(Opcode.PUSH_CONSTANT, index), pos)
chunk.push_instruction(SimpleInstruction(Opcode.PRINT), pos)

Disassembler(chunk, "main", "example.jsl", sys.stdout).full_dump()
```

The disassembly lines read:

```
0 1 PushConstant #0  42
2 1 Print
```

## What this package does not do

The package does not parse tokens into a syntax tree, and it does not compile
syntax trees into bytecode. You build trees and chunks yourself, as in the
example above. It has no virtual machine, so bytecode cannot be executed.

## Tests

```
pip install .[test]
pytest
```