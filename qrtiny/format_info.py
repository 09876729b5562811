import numpy as np

from .constants import LEVEL, MASK

# BCH (15,5) generator x^10 + x^8 + x^5 + x^4 + x^2 + x + 1
BCH_GENERATOR = 0b10100110111
FORMAT_MASK = 0b101010000010010

LEVEL_BITS = {'L': '01', 'M': '00', 'Q': '11', 'H': '10'}

# format information for level M, mask 000, most significant bit first
FORMAT_BITS = (1, 0, 1, 0, 1, 0, 0, 0, 0, 0, 1, 0, 0, 1, 0)


def encodeFormat(level, mask):
    # Encodes the 5 bit format to a 15 bit sequence using a BCH code
    # INPUT:
    #  -level: specified level 'L','M','Q' or'H'
    #  -mask: three bits that represent the mask. 1D list e.g. mask=[1,0,0]
    # OUTPUT:
    #  -format: 1D numpy array with the FI-codeword, with the FI-mask applied
    assert type(mask) is list and len(mask) == 3, 'mask must be a list of length 3'
    if level not in LEVEL_BITS:
        raise ValueError("Invalid error correction level. Choose from 'L', 'M', 'Q', 'H'.")

    format_value = int(LEVEL_BITS[level] + ''.join(str(b) for b in mask), 2)

    # divide data * x^10 by the generator in GF(2), bits 14 down to 10
    r = format_value << 10
    for i in range(14, 9, -1):
        if (r >> i) & 1:
            r ^= BCH_GENERATOR << (i - 10)
    remainder = r & ((1 << 10) - 1)

    final_codeword = ((format_value << 10) | remainder) ^ FORMAT_MASK

    format = np.array([(final_codeword >> i) & 1 for i in range(14, -1, -1)])
    assert format.size == 15, 'format must be a 1D numpy array of length 15'
    return format


def _candidates():
    for level in LEVEL_BITS:
        for number in range(8):
            mask = [int(b) for b in format(number, '03b')]
            yield level, mask, encodeFormat(level, mask)


def closest(Format):
    # (distance, level, mask) of the valid format codeword nearest to Format
    Format = np.asarray(Format, dtype=int)
    assert Format.shape == (15,), 'format must be a 1D array of length 15'

    best = None
    for level, mask, codeword in _candidates():
        distance = int(np.sum(codeword != Format))
        if best is None or distance < best[0]:
            best = (distance, level, mask)
    return best


def decodeFormat(Format):
    # Decode the format information by picking the closest valid codeword.
    # The code has minimum distance 7, so up to 3 bit errors are corrected.
    # INPUT:
    # -Format: 15 bits with format information (with FI-mask applied), MSB first
    # OUTPUT:
    # -success: True if decoding succeeded, False if it failed
    # -level: being an element of {'L','M','Q','H'}
    # -mask: three bits that represent the mask. 1D list e.g. mask=[1,0,0]
    distance, level, mask = closest(Format)
    if distance > 3:
        return False, LEVEL, list(MASK)
    return True, level, mask
