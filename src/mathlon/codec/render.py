import sys
from typing import TextIO

import mathlon.common.ops as ops
from mathlon.common.ops import AddrFormat
from mathlon.codec.word import decode_fields


def render_operands(word: int) -> list[str]:
    fields = decode_fields(word)
    operands = ops.operands_of(fields.opcode)
    tokens = [f'R{reg}\t' for reg in fields.regs()[:operands.regs]]

    if operands.addr == AddrFormat.CONST:
        tokens.append(f'{fields.addr_or_constant}')

    if operands.addr == AddrFormat.ADDR:
        tokens.append(f'{fields.addr_or_constant:04d}')

    return tokens


def render_instruction(word: int) -> str:
    opcode = decode_fields(word).opcode
    mnemonic = ops.MNEMONICS.get(opcode)
    head = f'{mnemonic}\t' if mnemonic is not None else ''
    return head + ''.join(render_operands(word))


def print_instruction(word: int, file: TextIO | None = None):
    out = file if file is not None else sys.stdout
    out.write(render_instruction(word))
