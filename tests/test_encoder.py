import numpy as np
import pytest

from qrtiny.encoder import encode_message, from_bits, terminator_offset, to_bits
from qrtiny.errors import InvalidLength, QRError

from conftest import random_message


def test_paged_out(paged_out):
    assert list(encode_message(paged_out)) == [
        64, 149, 6, 22, 118, 86, 68, 247, 87, 66, 16, 236, 17, 236, 17, 236]


@pytest.mark.parametrize("length", range(1, 15))
def test_block_is_16_bytes(length):
    message = random_message(length)
    block = encode_message(message)
    assert len(block) == 16

    bits = to_bits(block)
    assert ''.join(str(b) for b in bits[0:4]) == '0100'
    assert int(''.join(str(b) for b in bits[4:12]), 2) == length
    assert from_bits(bits[12:12 + 8*length]) == message
    t = terminator_offset(length)
    assert not bits[t:t + 4].any()

    pad = list(block[2 + length:])
    assert pad == [0xEC, 0x11] * (len(pad) // 2) + [0xEC] * (len(pad) % 2)


def test_single_byte():
    assert list(encode_message(b'A')[:3]) == [0x40, 0x14, 0x10]


def test_full_capacity_has_no_padding():
    message = bytes(range(1, 15))
    block = encode_message(message)
    assert len(block) == 16
    # terminator ends exactly on the last bit
    assert terminator_offset(14) + 4 == 128
    assert block[15] & 0x0F == 0
    assert from_bits(to_bits(block)[12:124]) == message


@pytest.mark.parametrize("message", [b'', bytes(15), bytes(100)])
def test_invalid_length(message):
    with pytest.raises(InvalidLength) as excinfo:
        encode_message(message)
    assert excinfo.value.length == len(message)
    assert isinstance(excinfo.value, QRError)
    assert isinstance(excinfo.value, ValueError)


def test_str_rejected():
    with pytest.raises(TypeError):
        encode_message('PagedOut!')


def test_bytearray_accepted(paged_out):
    assert encode_message(bytearray(paged_out)) == encode_message(paged_out)


def test_bits_helpers():
    bits = to_bits(b'\x80\x01')
    assert bits.tolist() == [1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1]
    assert from_bits(np.array([1, 1])) == b'\xc0'


def test_int_rejected():
    with pytest.raises(TypeError):
        encode_message(5)
