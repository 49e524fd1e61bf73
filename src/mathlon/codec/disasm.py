import sys
import logging as lg
from typing import Sequence, TextIO, cast

from mathlon.common.hwconf import MEMORY_WORDS, WORD_SIZE
from mathlon.codec.word import decode_fields, is_int, is_word
from mathlon.codec.validate import Rejection, check_instruction
from mathlon.codec.render import render_instruction


def check_block(memory: Sequence[int] | None, num_instrs: int) -> Rejection | None:
    if memory is None:
        return Rejection.INVALID_CALL

    if not 0 < len(memory) <= MEMORY_WORDS:
        lg.debug(f'Memory size {len(memory)} out of range')
        return Rejection.INVALID_CALL

    if not is_int(num_instrs) or not 0 < num_instrs <= len(memory):
        lg.debug(f'Instruction count {num_instrs} out of range')
        return Rejection.INVALID_CALL

    if not all(is_word(word) for word in memory):
        lg.debug('Memory holds a value that is not a 32-bit word')
        return Rejection.INVALID_CALL

    return None


def disassemble_word(offset: int, word: int) -> str:
    return f'{offset:03x}: {render_instruction(word)}'


def dump_word(offset: int, word: int) -> str:
    return f'{offset:03x}: {word:08x}'


def disassemble(memory: Sequence[int] | None, num_instrs: int) -> list[str] | None:
    if check_block(memory, num_instrs) is not None:
        return None

    lines = []

    for i, word in enumerate(cast(Sequence[int], memory)):
        offset = i * WORD_SIZE

        if i >= num_instrs:
            lines.append(dump_word(offset, word))
            continue

        fields = decode_fields(word)
        rejection = check_instruction(
            fields.opcode, fields.reg1, fields.reg2, fields.reg3,
            fields.addr_or_constant
        )

        if rejection is not None:
            lg.debug(f'Word {word:08x} at {offset:03x} is not an instruction')
            return None

        lines.append(disassemble_word(offset, word))

    return lines


def print_disassembly(
    memory: Sequence[int] | None, num_instrs: int, file: TextIO | None = None
) -> bool:
    lines = disassemble(memory, num_instrs)

    if lines is None:
        return False

    out = file if file is not None else sys.stdout

    for line in lines:
        out.write(line + '\n')

    return True
