import logging

import galois

from .constants import N_ECC
from .gf256 import field, multiply

logger = logging.getLogger(__name__)

# g(x) = (x - a^0)(x - a^1)...(x - a^9), highest degree first
GENERATOR = (1, 216, 194, 159, 111, 199, 94, 95, 113, 157, 193)


def makeGenerator(n_ecc=N_ECC):
    # Generate the Reed-Solomon generator polynomial with n_ecc parity symbols over GF(2^8)
    # INPUT:
    #  -n_ecc: number of error correction codewords, positive integer
    # OUTPUT:
    #  -generator: galois.Poly object representing the generator polynomial
    GF = field()
    alpha = GF.primitive_element
    x = galois.Poly([1, 0], field=GF)
    generator = galois.Poly([1], field=GF)

    # product_{i=0}^{n_ecc-1} (x - alpha^i)
    for i in range(0, n_ecc):
        generator *= (x - alpha**i)

    return generator


def remainder(block, generator=GENERATOR):
    # Remainder of block(x) * x^(len(generator)-1) divided by generator(x).
    # INPUT:
    #  -block: data codewords, highest degree first
    #  -generator: monic generator coefficients, highest degree first
    # OUTPUT:
    #  -ecc: bytes of length len(generator) - 1
    assert generator[0] == 1, 'generator must be monic'
    n_ecc = len(generator) - 1

    # long division on a private copy, the input is never touched
    a = list(block) + [0] * n_ecc
    for i in range(len(block)):
        factor = a[i]
        if factor == 0:
            continue
        for j, coeff in enumerate(generator):
            a[i + j] ^= multiply(coeff, factor)

    return bytes(a[-n_ecc:])


def full_codeword(block):
    ecc = remainder(block)
    logger.debug('ECC block: %s', list(ecc))
    return bytes(block) + ecc
