import logging

from .constants import LEVEL, MASK, N_TOTAL, SIZE, VERSION
from .ecc import full_codeword
from .encoder import as_message, encode_message, to_bits
from .mask import MaskPolicy, applyMask
from .placer import function_patterns, place, traversal

logger = logging.getLogger(__name__)


class QRCode:
    def __init__(self, mask_policy=MaskPolicy.STANDARD):
        self.level = LEVEL  # error correction level, only 'M' is implemented
        self.mask = MASK  # the mask pattern, only [0,0,0] is implemented
        self.version = VERSION  # only version 1 is implemented
        self.mask_policy = MaskPolicy(mask_policy)

    def generate(self, data, show=False):
        # This function creates the QR code matrix for a message
        # INPUT:
        #  -data: message bytes, 1 to 14 of them e.g. data=b'PagedOut!'
        # OUTPUT:
        #  -QRmatrix: a read-only 21 by 21 boolean numpy array, True for dark modules
        message = as_message(data)

        block = self.generate_dataStream(message)
        data_bits = self.encodeData(block)

        return self.construct(data_bits, len(message), show=show)

    @staticmethod
    def generate_dataStream(data):
        return encode_message(data)

    @staticmethod
    def encodeData(block):
        # append the ECC block and unpack to the bits placed in the symbol
        # OUTPUT:
        #  -data_enc: 1D numpy array of 26*8 bits
        data_enc = to_bits(full_codeword(block))
        assert data_enc.shape == (N_TOTAL*8,), 'data_enc must hold %d bits' % (N_TOTAL*8)
        return data_enc

    def construct(self, data, length, show=False):
        # This function creates a QR code matrix with specified data bits
        # INPUT:
        #  -data: the output from encodeData, 208 bits
        #  -length: message length, needed to locate the terminator for the mask policy
        # OUTPUT:
        #  -QRmatrix: a read-only 21 by 21 boolean numpy array
        QRmatrix, nogo = function_patterns()
        coords = traversal(nogo)

        masked = applyMask(data, coords, length, self.mask_policy)
        QRmatrix = place(masked, coords, QRmatrix).astype(bool)
        QRmatrix.setflags(write=False)

        logger.debug('Placed %d bits in %dx%d matrix with %s masking',
                     len(coords), SIZE, SIZE, self.mask_policy.value)

        if show:
            from . import render
            render.show(QRmatrix)

        return QRmatrix


def encode(data, mask_policy=MaskPolicy.STANDARD):
    return QRCode(mask_policy).generate(data)
