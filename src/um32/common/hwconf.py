WORD_SIZE        = 4                    # bytes per platter
WORD_BITS        = WORD_SIZE * 8
WORD_MASK        = (1 << WORD_BITS) - 1
REGISTERS        = 8

PROGRAM_ARRAY    = 0                    # array id the machine executes from

OPCODE_SHIFT     = 28
OPCODE_MASK      = 0xF
REG_MASK         = 0x7
REG_A_SHIFT      = 6
REG_B_SHIFT      = 3
REG_C_SHIFT      = 0

ORTHOG_REG_SHIFT = 25                   # orthography keeps A right below the opcode
ORTHOG_VALUE_MASK = 0x1FFFFFF           # 25 bit immediate

CONSOLE_MAX      = 0xFF                 # output accepts a single byte
END_OF_INPUT     = WORD_MASK            # input yields all ones at end of stream
