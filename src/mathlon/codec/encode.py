import logging as lg

from mathlon.codec.word import Fields, fits_fields, pack_fields
from mathlon.codec.validate import valid_instruction


def encode_instruction(
    opcode: int,
    reg1: int = 0,
    reg2: int = 0,
    reg3: int = 0,
    addr_or_constant: int = 0
) -> int | None:
    fields = dict(
        opcode=opcode, reg1=reg1, reg2=reg2, reg3=reg3,
        addr_or_constant=addr_or_constant
    )

    # Unused fields are not validated, but must still fit their bits
    if not fits_fields(**fields):
        lg.debug(f'Fields do not fit the word layout: {fields}')
        return None

    if not valid_instruction(**fields):
        return None

    return pack_fields(Fields(**fields))
