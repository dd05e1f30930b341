import random

import pytest

from raopkit.garble import (
    garble,
    rol8,
    rol8x,
    weird_rol8,
    weird_rol32,
    weird_ror8,
)

BUFFER0 = bytes([0x96, 0x5F, 0xC6, 0x53, 0xF8, 0x46, 0xCC, 0x18, 0xDF, 0xBE,
                 0xB2, 0xF8, 0x38, 0xD7, 0xEC, 0x22, 0x03, 0xD1, 0x20, 0x8F])
BUFFER2 = bytes([0x43, 0x54, 0x62, 0x7A, 0x18, 0xC3, 0xD6, 0xB3, 0x9A, 0x56,
                 0xF6, 0x1C, 0x14, 0x3F, 0x0C, 0x1D, 0x3B, 0x36, 0x83, 0xB1,
                 0x39, 0x51, 0x4A, 0xAA, 0x09, 0x3E, 0xFE, 0x44, 0xAF, 0xDE,
                 0xC3, 0x20, 0x9D, 0x42, 0x3A])
BUFFER4 = bytes([0xED, 0x25, 0xD1, 0xBB, 0xBC, 0x27, 0x9F, 0x02, 0xA2, 0xA9,
                 0x11, 0x00, 0x0C, 0xB3, 0x52, 0xC0, 0xBD, 0xE3, 0x1B, 0x49,
                 0xC7])


def _buffers(seed, fill3=0):
    rng = random.Random(seed)
    b1 = bytearray(rng.randrange(256) for _ in range(210))
    return (bytearray(BUFFER0), b1, bytearray(BUFFER2),
            bytearray([fill3] * 132), bytearray(BUFFER4))


@pytest.mark.parametrize("value", range(256))
def test_rol8_full_rotation_is_identity(value):
    assert rol8(value, 8) == value
    assert rol8(value, 0) == value


@pytest.mark.parametrize("count", range(1, 8))
def test_rol8_inverse(count):
    for value in range(256):
        assert rol8(rol8(value, count), 8 - count) == value


@pytest.mark.parametrize("count", range(0, 9))
def test_rol8x_low_byte_matches_rol8(count):
    for value in range(256):
        assert rol8x(value, count) & 0xFF == rol8(value, count)


@pytest.mark.parametrize("count", range(1, 8))
def test_weird_ror8_low_byte_is_right_rotation(count):
    for value in range(256):
        assert weird_ror8(value, count) & 0xFF == rol8(value, 8 - count)


@pytest.mark.parametrize("count", range(1, 9))
def test_weird_rol8_matches_rol8_for_nonzero_count(count):
    for value in range(256):
        assert weird_rol8(value, count) == rol8(value, count)


@pytest.mark.parametrize("count", range(1, 8))
def test_weird_rol32_matches_rol8x(count):
    for value in range(256):
        assert weird_rol32(value, count) == rol8x(value, count)


@pytest.mark.parametrize("func", [weird_ror8, weird_rol8, weird_rol32])
def test_weird_rotations_zero_count_give_zero(func):
    assert [func(v, 0) for v in (0x01, 0x5C, 0xFF)] == [0, 0, 0]


@pytest.mark.parametrize("func", [rol8, rol8x, weird_ror8, weird_rol8, weird_rol32])
def test_rotation_count_out_of_range(func):
    with pytest.raises(ValueError):
        func(1, 9)
    with pytest.raises(ValueError):
        func(1, -1)


def test_rotation_truncates_input_to_byte():
    assert rol8(0x1AB, 3) == rol8(0xAB, 3)
    assert weird_ror8(0x2C5, 2) == weird_ror8(0xC5, 2)


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_garble_sets_fixed_bytes(seed):
    b0, b1, b2, b3, b4 = _buffers(seed)
    garble(b0, b1, b2, b3, b4)
    assert b2[34] == 0xB8
    assert b0[17] == 115
    assert b1[190] == 56
    assert b2[29] == 162
    assert (b3[52], b3[56], b3[100]) == (27, 199, 27)


@pytest.mark.parametrize("seed", [4, 5, 6])
def test_garble_copies_input_bytes(seed):
    b0, b1, b2, b3, b4 = _buffers(seed)
    original = bytes(b1)
    garble(b0, b1, b2, b3, b4)
    assert b3[96] == original[143]
    assert b3[24] == original[151]
    assert b1[95] == b4[b3[20] % 21]


@pytest.mark.parametrize("seed", [7, 8])
def test_garble_leaves_buffer4_unchanged(seed):
    b0, b1, b2, b3, b4 = _buffers(seed)
    garble(b0, b1, b2, b3, b4)
    assert bytes(b4) == BUFFER4


@pytest.mark.parametrize("seed", [9, 10, 11])
def test_garble_ignores_initial_buffer3(seed):
    first = _buffers(seed, fill3=0x00)
    second = _buffers(seed, fill3=0xFF)
    garble(*first)
    garble(*second)
    for index in (0, 1, 2, 4):
        assert bytes(first[index]) == bytes(second[index])
    assert [first[3][i] for i in range(0, 132, 4)] == [second[3][i] for i in range(0, 132, 4)]


def test_garble_writes_only_word_aligned_buffer3_bytes():
    b0, b1, b2, b3, b4 = _buffers(12, fill3=0x5A)
    garble(b0, b1, b2, b3, b4)
    assert all(b3[i] == 0x5A for i in range(132) if i % 4)


def test_garble_is_deterministic():
    first = _buffers(13)
    second = _buffers(13)
    garble(*first)
    garble(*second)
    assert [bytes(b) for b in first] == [bytes(b) for b in second]


def test_garble_output_depends_on_input():
    first = _buffers(14)
    second = _buffers(15)
    garble(*first)
    garble(*second)
    assert bytes(first[3]) != bytes(second[3]) or bytes(first[1]) != bytes(second[1])


def test_garble_accepts_lists():
    as_lists = [list(b) for b in _buffers(16)]
    as_arrays = _buffers(16)
    garble(*as_lists)
    garble(*as_arrays)
    assert [bytes(b) for b in as_lists] == [bytes(b) for b in as_arrays]


def test_garble_rejects_short_buffers():
    b0, b1, b2, b3, b4 = _buffers(17)
    with pytest.raises(ValueError):
        garble(b0, b1[:200], b2, b3, b4)
    with pytest.raises(ValueError):
        garble(b0, b1, b2, b3[:100], b4)
    with pytest.raises(ValueError):
        garble(b0[:19], b1, b2, b3, b4)