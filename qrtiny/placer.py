import numpy as np

from .constants import SIZE, TIMING_INDEX
from .format_info import FORMAT_BITS


def finder_pattern():
    PosPattern = np.ones((7, 7), dtype=int)
    PosPattern[[1, 5], 1:6] = 0
    PosPattern[1:6, [1, 5]] = 0
    return PosPattern


def function_patterns(format_bits=FORMAT_BITS):
    # Place every fixed module of a version 1 symbol.
    # INPUT:
    #  -format_bits: the 15 format information bits, MSB first
    # OUTPUT:
    #  -QRmatrix: a 21 by 21 numpy array with 0's and 1's, indexed [y, x]
    #  -nogo: a 21 by 21 boolean numpy array, True for modules data may not use
    L = SIZE
    QRmatrix = np.zeros((L, L), dtype=int)

    # finder patterns, the surrounding separators stay 0
    PosPattern = finder_pattern()
    QRmatrix[0:7, 0:7] = PosPattern
    QRmatrix[-7:, 0:7] = PosPattern
    QRmatrix[0:7, -7:] = PosPattern

    L_timing = L - 2*8
    TimingPattern = np.zeros(L_timing, dtype=int)
    TimingPattern[0::2] = 1

    QRmatrix[TIMING_INDEX, 8:(L_timing+8)] = TimingPattern
    QRmatrix[8:(L_timing+8), TIMING_INDEX] = TimingPattern

    # FI[i] is bit i counted from the least significant end
    FI = np.flip(np.array(format_bits, dtype=int))
    assert FI.size == 15, 'format information must be 15 bits'

    QRmatrix[0:6, 8] = FI[0:6]
    QRmatrix[7:9, 8] = FI[6:8]
    QRmatrix[8, 7] = FI[8]
    QRmatrix[8, 5::-1] = FI[9:]
    QRmatrix[8, L-1:L-9:-1] = FI[0:8]
    QRmatrix[L-7:L, 8] = FI[8:]

    # dark module
    QRmatrix[L-8, 8] = 1

    nogo = np.zeros((L, L), dtype=bool)
    nogo[0:9, 0:9] = True
    nogo[L-8:L, 0:9] = True
    nogo[0:9, L-8:L] = True
    nogo[TIMING_INDEX, 8:(L_timing+8)] = True
    nogo[8:(L_timing+8), TIMING_INDEX] = True

    return QRmatrix, nogo


def traversal(nogo):
    # Data module order: start bottom right, walk two-column strips moving up,
    # then down, stepping two columns left after each strip. The vertical
    # timing column is skipped entirely, reserved modules are passed over.
    # OUTPUT:
    #  -coords: list of (x, y) tuples, 208 of them for version 1
    L = nogo.shape[0]
    coords = []
    x = L - 1
    upward = True
    while x > 0:
        if x == TIMING_INDEX:
            x -= 1
        rows = range(L - 1, -1, -1) if upward else range(L)
        for y in rows:
            for col in (x, x - 1):
                if not nogo[y, col]:
                    coords.append((col, y))
        x -= 2
        upward = not upward
    return coords


def place(bits, coords, QRmatrix):
    # write the (already masked) data bits onto a copy of the fixed patterns
    assert len(bits) == len(coords), 'placement needs exactly one bit per data module'
    QRmatrix = QRmatrix.copy()
    for bit, (x, y) in zip(bits, coords):
        QRmatrix[y, x] = bit
    return QRmatrix
