import io

import pytest

import mathlon.common.ops as ops
import mathlon.codec.render as render
from mathlon.codec.encode import encode_instruction


def encode(*args) -> int:
    word = encode_instruction(*args)
    assert word is not None
    return word


def test_three_registers():
    assert render.render_instruction(encode(ops.ADD, 2, 3, 4)) == 'add\tR2\tR3\tR4\t'
    assert render.render_instruction(encode(ops.OR, 19, 0, 1)) == 'or\tR19\tR0\tR1\t'


def test_two_registers():
    assert render.render_instruction(encode(ops.MV, 2, 3)) == 'mv\tR2\tR3\t'
    assert render.render_instruction(encode(ops.INV, 7, 8, 31)) == 'inv\tR7\tR8\t'


def test_load_immediate():
    assert render.render_instruction(encode(ops.LI, 5, 0, 0, 100)) == 'li\tR5\t100'
    assert render.render_instruction(encode(ops.LI, 5, 9, 9, 8191)) == 'li\tR5\t8191'


def test_addresses_are_padded():
    assert render.render_instruction(encode(ops.CMP, 0, 1, 2, 12)) \
        == 'cmp\tR0\tR1\tR2\t0012'
    assert render.render_instruction(encode(ops.LOAD, 2, 0, 0, 4)) == 'load\tR2\t0004'
    assert render.render_instruction(encode(ops.STORE, 0, 0, 0, 2044)) \
        == 'store\tR0\t2044'


def test_halt():
    assert render.render_instruction(0x00000000) == 'halt\t'
    assert render.render_instruction(0x0FFFFFFF) == 'halt\t'


def test_renders_invalid_words():
    # add R1 R20 R31 fails validation but still renders
    word = (ops.ADD << 28) | (1 << 23) | (20 << 18) | (31 << 13)
    assert render.render_instruction(word) == 'add\tR1\tR20\tR31\t'
    assert render.render_instruction(encode(ops.LI, 2) | 0x7FF) == 'li\tR2\t2047'


@pytest.mark.parametrize('opcode, expected', [
    (ops.HALT, 'halt\t'),
    (ops.ADD, 'add\tR0\tR0\tR0\t'),
    (ops.SUB, 'sub\tR0\tR0\tR0\t'),
    (ops.MUL, 'mul\tR0\tR0\tR0\t'),
    (ops.DIV, 'div\tR0\tR0\tR0\t'),
    (ops.REM, 'rem\tR0\tR0\tR0\t'),
    (ops.INV, 'inv\tR0\tR0\t'),
    (ops.AND, 'and\tR0\tR0\tR0\t'),
    (ops.OR, 'or\tR0\tR0\tR0\t'),
    (ops.NOT, 'not\tR0\tR0\t'),
    (ops.CMP, 'cmp\tR0\tR0\tR0\t0000'),
    (ops.MV, 'mv\tR0\tR0\t'),
    (ops.LI, 'li\tR0\t0'),
    (ops.LOAD, 'load\tR0\t0000'),
    (ops.STORE, 'store\tR0\t0000'),
    (ops.UNDEFINED, 'R0\tR0\tR0\t'),
])
def test_opcode_table(opcode, expected):
    assert render.render_instruction(opcode << 28) == expected


def test_undefined_opcode():
    word = (0xF << 28) | (1 << 23) | (2 << 18) | (3 << 13) | 44
    assert render.render_instruction(word) == 'R1\tR2\tR3\t'


def test_print_instruction(capsys):
    render.print_instruction(encode(ops.LI, 5, 0, 0, 100))
    assert capsys.readouterr().out == 'li\tR5\t100'


def test_print_instruction_to_stream():
    out = io.StringIO()
    render.print_instruction(encode(ops.MV, 2, 3), out)
    assert out.getvalue() == 'mv\tR2\tR3\t'
