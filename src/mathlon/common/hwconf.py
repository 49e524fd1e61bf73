# Word layout
WORD_BITS = 32
WORD_SIZE = 4   # Bytes per word, the unit of memory offsets
WORD_MASK = (1 << WORD_BITS) - 1

OPCODE_SHIFT = 28
REG1_SHIFT = 23
REG2_SHIFT = 18
REG3_SHIFT = 13
REG_SHIFTS = (REG1_SHIFT, REG2_SHIFT, REG3_SHIFT)

OPCODE_MASK = 0x0F
REG_MASK = 0x1F         # 5 bits
ADDR_MASK = 0x1FFF      # 13 bits, 8191

# Machine
NUM_OPCODES = 15        # 0..14, 15 is undefined
NUM_REGS = 20           # R0..R19 are addressable
FIRST_WRITABLE_REG = 2  # R0 and R1 are reserved
CONST_LIMIT = ADDR_MASK + 1
ADDR_LIMIT = 2048       # Addressable memory in bytes
ADDR_ALIGN = WORD_SIZE
MEMORY_WORDS = ADDR_LIMIT // WORD_SIZE  # 512
