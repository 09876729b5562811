import logging

import numpy as np

from .constants import MAX_LENGTH, MODE_BYTE, N_DATA, PAD_BYTES, TERMINATOR
from .errors import InvalidLength

logger = logging.getLogger(__name__)


def as_message(data):
    # bytes-like input only, text must already be in the reader's encoding
    if isinstance(data, str):
        raise TypeError('message must be bytes, not str; encode it first')
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError('message must be bytes-like, got %s' % type(data).__name__)
    message = bytes(data)
    if not 1 <= len(message) <= MAX_LENGTH:
        raise InvalidLength(len(message))
    return message


def to_bits(data):
    """Unpack bytes into a 1D numpy array of bits, most significant bit first."""
    return np.unpackbits(np.frombuffer(bytes(data), dtype=np.uint8))


def from_bits(bits):
    """Pack a bit sequence (MSB first) into bytes, zero filling the last byte."""
    return np.packbits(np.asarray(bits, dtype=np.uint8)).tobytes()


def terminator_offset(length):
    # mode (4) + length (8) + payload
    return 4 + 8 + 8 * length


def encode_message(data):
    # Build the 16 data codewords of a 1-M symbol in byte mode.
    # INPUT:
    #  -data: message bytes, 1 to 14 of them e.g. data=b'PagedOut!'
    # OUTPUT:
    #  -block: bytes of length 16 (mode, length, payload, terminator, padding)
    message = as_message(data)

    bits = []
    # 1. mode indicator for byte mode: "0100"
    bits.extend([int(bit) for bit in MODE_BYTE])
    # 2. character count indicator, 8 bits for versions 1-9
    bits.extend([int(bit) for bit in format(len(message), '08b')])
    # 3. payload bytes verbatim
    bits.extend(to_bits(message).tolist())
    # 4. terminator; 16 + 8L bits always ends on a byte boundary
    bits.extend([int(bit) for bit in TERMINATOR])

    codewords = list(from_bits(bits))

    # alternate 0xec, 0x11 up to the data capacity
    pad_index = 0
    while len(codewords) < N_DATA:
        codewords.append(PAD_BYTES[pad_index % 2])
        pad_index += 1

    block = bytes(codewords)
    assert len(block) == N_DATA, 'codeword block must be %d bytes' % N_DATA
    logger.debug('Codeword block for %d byte message: %s', len(message), list(block))
    return block
