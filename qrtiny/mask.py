import enum

import numpy as np

from .encoder import terminator_offset


class MaskPolicy(enum.Enum):
    # STANDARD masks every data and ECC module, as any conformant reader expects.
    # LEGACY leaves the 4 mode indicator bits and the 4 terminator bits unmasked,
    # bit compatible with encoders that never mask those two fields.
    STANDARD = 'standard'
    LEGACY = 'legacy'


def maskfun(x, y):
    # mask pattern 000, checkerboard
    return (x + y) % 2 == 0


def exempt_indices(length, policy=MaskPolicy.STANDARD):
    policy = MaskPolicy(policy)
    if policy is MaskPolicy.STANDARD:
        return frozenset()
    terminator = terminator_offset(length)
    return frozenset(range(0, 4)) | frozenset(range(terminator, terminator + 4))


def mask_sequence(coords, length, policy=MaskPolicy.STANDARD):
    # Mask bits aligned with the placement order.
    # INPUT:
    #  -coords: list of (x, y) module coordinates in traversal order
    #  -length: message length in bytes, locates the terminator
    #  -policy: MaskPolicy
    # OUTPUT:
    #  -mask: 1D numpy array of 0's and 1's, one per coordinate
    exempt = exempt_indices(length, policy)
    mask = np.zeros(len(coords), dtype=np.uint8)
    for k, (x, y) in enumerate(coords):
        if k not in exempt and maskfun(x, y):
            mask[k] = 1
    return mask


def applyMask(bits, coords, length, policy=MaskPolicy.STANDARD):
    bits = np.asarray(bits, dtype=np.uint8)
    assert bits.shape == (len(coords),), 'one bit per traversal coordinate expected'
    return bits ^ mask_sequence(coords, length, policy)
