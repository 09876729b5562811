import galois

from qrtiny.ecc import GENERATOR, full_codeword, makeGenerator, remainder
from qrtiny.gf256 import field


def test_generator_matches_galois():
    generator = makeGenerator(10)
    assert generator.degree == 10
    assert tuple(int(c) for c in generator.coeffs) == GENERATOR


def test_known_vector(hello_world_block):
    assert list(remainder(hello_world_block)) == [196, 35, 39, 119, 235, 215, 231, 226, 93, 23]


def test_all_zero_block():
    assert remainder(bytes(16)) == bytes(10)


def test_deterministic_and_input_untouched(paged_out):
    from qrtiny.encoder import encode_message

    block = bytearray(encode_message(paged_out))
    snapshot = bytes(block)
    first = remainder(block)
    second = remainder(block)
    assert first == second
    assert bytes(block) == snapshot
    assert len(first) == 10


def test_remainder_matches_polynomial_division(paged_out):
    from qrtiny.encoder import encode_message

    # same systematic encoding as divmod(M(x) * x^(n-k), g(x))
    GF = field()
    block = encode_message(paged_out)
    M = galois.Poly(GF(list(block)), field=GF)
    x = galois.Poly([1, 0], field=GF)
    _, R = divmod(M * x**10, makeGenerator(10))
    coeffs = [int(c) for c in R.coeffs]
    expected = [0] * (10 - len(coeffs)) + coeffs
    assert list(remainder(block)) == expected


def test_full_codeword_layout(hello_world_block):
    codeword = full_codeword(hello_world_block)
    assert len(codeword) == 26
    assert codeword[:16] == hello_world_block
    assert codeword[16:] == remainder(hello_world_block)
