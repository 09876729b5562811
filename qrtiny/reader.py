import functools
import logging

import galois
import numpy as np

from .constants import LEVEL, MASK, MAX_LENGTH, MODE_BYTE, N_DATA, N_TOTAL, SIZE
from .encoder import from_bits, to_bits
from .errors import DecodeError
from .format_info import closest
from .gf256 import field
from .mask import MaskPolicy, mask_sequence
from .placer import function_patterns, traversal

logger = logging.getLogger(__name__)


@functools.lru_cache(maxsize=None)
def reed_solomon():
    # full length (255, 245) code with first consecutive root a^0; 26 symbol
    # codewords are decoded as a shortened version of it
    n_ecc = N_TOTAL - N_DATA
    return galois.ReedSolomon(255, 255 - n_ecc, c=0, field=field())


def read_format(QRmatrix):
    # read both format copies and keep the one closest to a valid codeword
    L = SIZE

    FI1 = np.zeros((15), dtype=int)
    FI1[0:6] = QRmatrix[0:6, 8]
    FI1[6:8] = QRmatrix[7:9, 8]
    FI1[8] = QRmatrix[8, 7]
    FI1[9:] = QRmatrix[8, 5::-1]

    # second copy next to the other two finder patterns
    FI2 = np.zeros((15), dtype=int)
    FI2[0:8] = QRmatrix[8, L-1:L-9:-1]
    FI2[8:] = QRmatrix[L-7:L, 8]

    distance, level, mask = min(closest(FI1[-1::-1]), closest(FI2[-1::-1]),
                                key=lambda result: result[0])
    if distance > 3:
        logger.warning('Format information was not decoded successfully')
        raise DecodeError('format information is unreadable')
    return level, mask


def read_dataStream(block):
    # inverse of encode_message: parse the byte mode segment of the data codewords
    # INPUT:
    #  -block: the 16 data codewords
    # OUTPUT:
    #  -data: the message bytes
    bits = to_bits(block)

    mode = ''.join(str(b) for b in bits[0:4])
    if mode != MODE_BYTE:
        raise DecodeError('unsupported mode indicator %s' % mode)

    length = int(''.join(str(b) for b in bits[4:12]), 2)
    if not 1 <= length <= MAX_LENGTH:
        raise DecodeError('invalid character count %d' % length)

    return from_bits(bits[12:12 + 8*length])


def read(QRmatrix, mask_policy=MaskPolicy.STANDARD):
    # function to read the message from a version 1-M symbol
    # INPUT:
    #  -QRmatrix: a 21 by 21 array of 0's and 1's (or booleans), indexed [y, x]
    #  -mask_policy: MaskPolicy the symbol was generated with
    # OUTPUT:
    #  -data: the message bytes
    QRmatrix = np.asarray(QRmatrix).astype(int)
    assert QRmatrix.shape == (SIZE, SIZE), 'QRmatrix must be a 21 by 21 array'
    mask_policy = MaskPolicy(mask_policy)

    level, mask = read_format(QRmatrix)
    if level != LEVEL or mask != MASK:
        raise DecodeError('only level %s with mask %s is supported, got %s %s'
                          % (LEVEL, MASK, level, mask))

    _, nogo = function_patterns()
    coords = traversal(nogo)
    raw = np.array([QRmatrix[y, x] for x, y in coords], dtype=np.uint8)

    bits = raw ^ mask_sequence(coords, 0, MaskPolicy.STANDARD)
    if mask_policy is MaskPolicy.LEGACY:
        # the length field is masked normally, it tells where the terminator sits
        length = int(''.join(str(b) for b in bits[4:12]), 2)
        if 1 <= length <= MAX_LENGTH:
            bits = raw ^ mask_sequence(coords, length, mask_policy)
        else:
            logger.debug('Length field reads %d, unmasking without legacy exemptions', length)

    GF = field()
    codeword = GF(list(from_bits(bits)))
    message, n_errors = reed_solomon().decode(codeword, errors=True)
    if n_errors < 0:
        logger.warning('Reed-Solomon decoding failed')
        raise DecodeError('too many codeword errors to correct')
    if n_errors:
        logger.debug('Corrected %d codeword errors', n_errors)

    block = bytes(int(v) for v in message)
    return read_dataStream(block)
