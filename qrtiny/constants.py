# fixed symbol parameters: version 1, error correction level M, mask pattern 000

VERSION = 1
SIZE = 17 + 4 * VERSION  # 21 modules per side

LEVEL = 'M'
MASK = [0, 0, 0]

# codeword counts for 1-M
N_DATA = 16
N_ECC = 10
N_TOTAL = N_DATA + N_ECC

# byte mode capacity: 4 mode bits + 8 length bits + 4 terminator bits leave 14 bytes
MAX_LENGTH = 14

MODE_BYTE = '0100'
TERMINATOR = '0000'
PAD_BYTES = (0xEC, 0x11)

# x^8 + x^4 + x^3 + x^2 + 1
PRIM_POLY = 0x11D

TIMING_INDEX = 6
