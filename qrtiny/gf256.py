import functools

import galois

from .constants import PRIM_POLY


def multiply(x, y):
    # Carryless product in GF(2^8): add (XOR) x for every set bit of y while
    # doubling x, reducing by 0x11d whenever the doubling overflows a byte.
    # INPUT:
    #  -x, y: field elements, integers in 0..255
    # OUTPUT:
    #  -product: integer in 0..255
    if not (0 <= x < 256 and 0 <= y < 256):
        raise ValueError('GF(256) elements must be in 0..255, got %r and %r' % (x, y))

    result = 0
    while y > 0:
        if y & 1:
            result ^= x
        y >>= 1
        x <<= 1
        if x >= 256:
            x ^= PRIM_POLY
    return result


@functools.lru_cache(maxsize=None)
def field():
    # galois field class over the same primitive polynomial; its primitive element is alpha = 2
    return galois.GF(2**8, irreducible_poly=PRIM_POLY)
