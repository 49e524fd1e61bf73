from enum import Enum
from typing import NamedTuple


HALT = 0x00
ADD = 0x01
SUB = 0x02
MUL = 0x03
DIV = 0x04
REM = 0x05
INV = 0x06
AND = 0x07
OR = 0x08
NOT = 0x09
CMP = 0x0A
MV = 0x0B   # R2 -> R1
LI = 0x0C   # C -> R1
LOAD = 0x0D   # M[A] -> R1
STORE = 0x0E  # R1 -> M[A]

UNDEFINED = 0x0F


class Shape(Enum):
    HALT = 'halt'
    R3 = 'r3'
    R2 = 'r2'
    RI = 'ri'
    BRANCH = 'branch'
    MEM = 'mem'
    UNDEFINED = 'undefined'


class AddrFormat(Enum):
    NONE = 'none'
    CONST = 'const'     # Plain decimal
    ADDR = 'addr'       # Zero-padded to 4 digits


class Operands(NamedTuple):
    regs: int               # How many leading register fields are used
    addr: AddrFormat


OPERANDS: dict[Shape, Operands] = {
    Shape.HALT: Operands(0, AddrFormat.NONE),
    Shape.R3: Operands(3, AddrFormat.NONE),
    Shape.R2: Operands(2, AddrFormat.NONE),
    Shape.RI: Operands(1, AddrFormat.CONST),
    Shape.BRANCH: Operands(3, AddrFormat.ADDR),
    Shape.MEM: Operands(1, AddrFormat.ADDR),
    Shape.UNDEFINED: Operands(3, AddrFormat.NONE),
}

SHAPES: dict[int, Shape] = {
    HALT: Shape.HALT,
    ADD: Shape.R3,
    SUB: Shape.R3,
    MUL: Shape.R3,
    DIV: Shape.R3,
    REM: Shape.R3,
    INV: Shape.R2,
    AND: Shape.R3,
    OR: Shape.R3,
    NOT: Shape.R2,
    CMP: Shape.BRANCH,
    MV: Shape.R2,
    LI: Shape.RI,
    LOAD: Shape.MEM,
    STORE: Shape.MEM,
}

MNEMONICS: dict[int, str] = {
    HALT: 'halt',
    ADD: 'add',
    SUB: 'sub',
    MUL: 'mul',
    DIV: 'div',
    REM: 'rem',
    INV: 'inv',
    AND: 'and',
    OR: 'or',
    NOT: 'not',
    CMP: 'cmp',
    MV: 'mv',
    LI: 'li',
    LOAD: 'load',
    STORE: 'store',
}

# Opcodes whose first register is read, not written
READS_REG1 = frozenset([CMP, STORE])


def shape_of(opcode: int) -> Shape:
    return SHAPES.get(opcode, Shape.UNDEFINED)


def operands_of(opcode: int) -> Operands:
    return OPERANDS[shape_of(opcode)]
