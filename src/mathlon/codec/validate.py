import logging as lg
from enum import Enum

import mathlon.common.ops as ops
from mathlon.common.ops import Shape
from mathlon.common.hwconf import (
    NUM_OPCODES, NUM_REGS, FIRST_WRITABLE_REG,
    CONST_LIMIT, ADDR_LIMIT, ADDR_ALIGN
)
from mathlon.codec.word import is_int


class Rejection(Enum):
    INVALID_OPCODE = 'invalid-opcode'
    INVALID_OPERAND_RANGE = 'invalid-operand-range'
    INVALID_CALL = 'invalid-call'


def valid_reg(reg: int, lowest: int = 0) -> bool:
    return lowest <= reg < NUM_REGS


def valid_dest(reg: int) -> bool:
    return valid_reg(reg, FIRST_WRITABLE_REG)


def valid_const(value: int) -> bool:
    return 0 <= value < CONST_LIMIT


def valid_addr(addr: int) -> bool:
    return 0 <= addr < ADDR_LIMIT and addr % ADDR_ALIGN == 0


def valid_operands(
    opcode: int, reg1: int, reg2: int, reg3: int, addr_or_constant: int
) -> bool:
    shape = ops.shape_of(opcode)
    reg1_ok = valid_reg(reg1) if opcode in ops.READS_REG1 else valid_dest(reg1)

    if shape == Shape.HALT:
        return True

    if shape == Shape.R3:
        return reg1_ok and valid_reg(reg2) and valid_reg(reg3)

    if shape == Shape.R2:
        return reg1_ok and valid_reg(reg2)

    if shape == Shape.RI:
        return reg1_ok and valid_const(addr_or_constant)

    if shape == Shape.BRANCH:
        return reg1_ok and valid_reg(reg2) and valid_reg(reg3) \
            and valid_addr(addr_or_constant)

    if shape == Shape.MEM:
        return reg1_ok and valid_addr(addr_or_constant)

    return False


def check_instruction(
    opcode: int, reg1: int, reg2: int, reg3: int, addr_or_constant: int
) -> Rejection | None:
    fields = (opcode, reg1, reg2, reg3, addr_or_constant)

    if not all(is_int(value) for value in fields):
        lg.debug('Instruction fields must be integers')
        return Rejection.INVALID_CALL

    if not 0 <= opcode < NUM_OPCODES:
        lg.debug(f'Rejected opcode {opcode}')
        return Rejection.INVALID_OPCODE

    if not valid_operands(opcode, reg1, reg2, reg3, addr_or_constant):
        lg.debug(
            f'Rejected operands of {ops.MNEMONICS[opcode]}: '
            f'R{reg1} R{reg2} R{reg3} {addr_or_constant}'
        )
        return Rejection.INVALID_OPERAND_RANGE

    return None


def valid_instruction(
    opcode: int, reg1: int, reg2: int, reg3: int, addr_or_constant: int
) -> bool:
    return check_instruction(opcode, reg1, reg2, reg3, addr_or_constant) is None
