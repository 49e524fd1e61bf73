from dataclasses import dataclass

from mathlon.common.hwconf import (
    OPCODE_SHIFT, REG1_SHIFT, REG2_SHIFT, REG3_SHIFT,
    OPCODE_MASK, REG_MASK, ADDR_MASK, WORD_MASK
)


@dataclass(frozen=True)
class Fields:
    opcode: int
    reg1: int
    reg2: int
    reg3: int
    addr_or_constant: int

    def regs(self) -> tuple[int, int, int]:
        return (self.reg1, self.reg2, self.reg3)


FIELD_LIMITS = {
    'opcode': OPCODE_MASK,
    'reg1': REG_MASK,
    'reg2': REG_MASK,
    'reg3': REG_MASK,
    'addr_or_constant': ADDR_MASK,
}


def is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_word(value) -> bool:
    return is_int(value) and 0 <= value <= WORD_MASK


def fits_fields(**fields) -> bool:
    for name, value in fields.items():
        if not is_int(value):
            return False

        if value < 0 or value > FIELD_LIMITS[name]:
            return False

    return True


def decode_fields(word: int) -> Fields:
    return Fields(
        opcode=(word >> OPCODE_SHIFT) & OPCODE_MASK,
        reg1=(word >> REG1_SHIFT) & REG_MASK,
        reg2=(word >> REG2_SHIFT) & REG_MASK,
        reg3=(word >> REG3_SHIFT) & REG_MASK,
        addr_or_constant=word & ADDR_MASK
    )


def pack_fields(fields: Fields) -> int:
    return (fields.opcode << OPCODE_SHIFT) \
        | (fields.reg1 << REG1_SHIFT) \
        | (fields.reg2 << REG2_SHIFT) \
        | (fields.reg3 << REG3_SHIFT) \
        | fields.addr_or_constant
