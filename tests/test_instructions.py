import pytest

from jsl.instructions import (
    ConstantInstruction,
    Opcode,
    SimpleInstruction,
    UnknownInstruction,
    read_instruction,
)


def test_opcode_numbering_follows_declaration_order():
    assert ConstantInstruction(Opcode.PUSH_CONSTANT, 0).encode() == bytes([0, 0])
    assert SimpleInstruction(Opcode.POP).encode() == bytes([1])
    assert SimpleInstruction(Opcode.LESS).encode() == bytes([12])
    assert list(Opcode) == sorted(Opcode)


def test_mnemonics():
    decoded, offset = read_instruction(bytes([Opcode.SUBTRACT]), 0)
    assert decoded == SimpleInstruction(Opcode.SUBTRACT)
    assert offset == 1
    assert Opcode.PUSH_CONSTANT.mnemonic == "PushConstant"
    assert str(Opcode.SUBTRACT) == "Subtract"


def test_simple_instruction_encoding():
    inst = SimpleInstruction(Opcode.POP)
    assert inst.encode() == bytes([Opcode.POP])
    assert inst.size() == len(inst.encode())


def test_constant_instruction_encoding():
    inst = ConstantInstruction(Opcode.PUSH_CONSTANT, 7)
    assert inst.encode() == bytes([Opcode.PUSH_CONSTANT, 7])
    assert inst.size() == len(inst.encode())


def test_constant_index_must_fit_in_a_byte():
    with pytest.raises(ValueError):
        ConstantInstruction(Opcode.PUSH_CONSTANT, 256)
    with pytest.raises(ValueError):
        ConstantInstruction(Opcode.PUSH_CONSTANT, -1)


def test_opcode_form_mismatch_rejected():
    with pytest.raises(ValueError):
        SimpleInstruction(Opcode.PUSH_CONSTANT)
    with pytest.raises(ValueError):
        ConstantInstruction(Opcode.ADD, 0)


@pytest.mark.parametrize("opcode", [op for op in Opcode if not op.takes_constant])
def test_simple_round_trip(opcode):
    inst = SimpleInstruction(opcode)
    decoded, offset = read_instruction(inst.encode(), 0)
    assert decoded == inst
    assert offset == inst.size()


@pytest.mark.parametrize("index", [0, 1, 128, 255])
def test_constant_round_trip(index):
    inst = ConstantInstruction(Opcode.PUSH_CONSTANT, index)
    decoded, offset = read_instruction(inst.encode(), 0)
    assert decoded == inst
    assert offset == inst.size()


def test_read_sequence_of_instructions():
    insts = [
        ConstantInstruction(Opcode.PUSH_CONSTANT, 3),
        SimpleInstruction(Opcode.NEGATE),
        SimpleInstruction(Opcode.PRINT),
    ]
    code = b"".join(i.encode() for i in insts)
    offset = 0
    decoded = []
    while offset < len(code):
        inst, offset = read_instruction(code, offset)
        decoded.append(inst)
    assert decoded == insts
    assert offset == len(code)


def test_unknown_opcode():
    inst, offset = read_instruction(bytes([255]), 0)
    assert inst == UnknownInstruction(255)
    assert offset == 1
    assert inst.mnemonic == ""
    assert inst.encode() == bytes([255])


def test_truncated_constant_instruction_raises():
    with pytest.raises(IndexError, match="corrupted chunk of code"):
        read_instruction(bytes([Opcode.PUSH_CONSTANT]), 0)


def test_reading_past_end_raises():
    with pytest.raises(IndexError):
        read_instruction(b"", 0)