import mathlon.common.ops as ops
from mathlon.common.ops import AddrFormat
from mathlon.codec.word import decode_fields


def compare_instructions(instr1: int, instr2: int) -> bool:
    first = decode_fields(instr1)
    second = decode_fields(instr2)

    if first.opcode != second.opcode:
        return False

    operands = ops.operands_of(first.opcode)
    used = slice(0, operands.regs)

    if first.regs()[used] != second.regs()[used]:
        return False

    # Undefined opcodes carry no known shape, so every bit counts
    compare_addr = operands.addr != AddrFormat.NONE \
        or ops.shape_of(first.opcode) == ops.Shape.UNDEFINED

    if compare_addr:
        return first.addr_or_constant == second.addr_or_constant

    return True
