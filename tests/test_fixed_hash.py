import pytest

from devcore.common_data import BadHexCharacter
from devcore.fixed_hash import (
    H64,
    H128,
    H160,
    H256,
    H512,
    H520,
    H1024,
    H2048,
    Align,
    FixedHash,
    format_hashes,
)


@pytest.mark.parametrize(
    "cls,size",
    [(H64, 8), (H128, 16), (H160, 20), (H256, 32), (H512, 64), (H520, 65), (H1024, 128), (H2048, 256)],
)
def test_sizes_and_default_zero(cls, size):
    h = cls()
    assert len(h) == size
    assert bytes(h) == bytes(size)
    assert not h


def test_base_class_has_no_size():
    with pytest.raises(TypeError):
        FixedHash()


def test_init_wrong_length_raises():
    with pytest.raises(ValueError):
        H64(b"\x01\x02")


def test_from_bytes_fail_if_different_gives_zero():
    h = H64.from_bytes(b"\x01\x02\x03")
    assert bytes(h) == bytes(8)


def test_from_bytes_align_left_and_right():
    data = b"\x01\x02\x03"
    left = H64.from_bytes(data, Align.LEFT)
    right = H64.from_bytes(data, Align.RIGHT)
    assert bytes(left) == data + bytes(5)
    assert bytes(right) == bytes(5) + data


def test_from_bytes_crops_when_longer():
    data = bytes(range(1, 11))
    assert bytes(H64.from_bytes(data, Align.LEFT)) == data[:8]
    assert bytes(H64.from_bytes(data, Align.RIGHT)) == data[2:]


def test_from_hash_between_sizes():
    big = H256.random()
    small_left = H64.from_hash(big, Align.LEFT)
    small_right = H64.from_hash(big, Align.RIGHT)
    assert bytes(small_left) == bytes(big)[:8]
    assert bytes(small_right) == bytes(big)[-8:]
    back = H256.from_hash(small_left)
    assert bytes(back) == bytes(small_left) + bytes(24)


def test_from_hex_round_trip():
    h = H256.random()
    assert H256.from_hex(h.hex()) == h
    assert H256.from_hex(h.hex(prefix=True)) == h
    assert h.hex(prefix=True) == "0x" + h.hex()


def test_from_hex_bad_character_raises():
    with pytest.raises(BadHexCharacter):
        H64.from_hex("zz" * 8)


def test_from_hex_wrong_length_gives_zero():
    assert bytes(H64.from_hex("0102")) == bytes(8)


def test_int_round_trip_and_truncation():
    h = H64.from_int(1)
    assert h[7] == 1
    assert int(h) == 1
    value = (1 << 64) + 5
    assert int(H64.from_int(value)) == value % (1 << 64)


def test_comparisons_follow_big_endian_order():
    a = H64.from_int(1)
    b = H64.from_int(256)
    assert a < b
    assert a <= b
    assert b > a
    assert b >= a
    assert a <= H64.from_int(1)
    assert not (a > a)
    assert (a < b) == (int(a) < int(b))


def test_equality_and_hash():
    a = H128.random()
    b = H128(bytes(a))
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert H64() != H128()


def test_bitwise_operators():
    a = H64.random()
    b = H64.random()
    assert int(a ^ b) == int(a) ^ int(b)
    assert int(a | b) == int(a) | int(b)
    assert int(a & b) == int(a) & int(b)
    assert int(~a) == (~int(a)) & ((1 << 64) - 1)
    assert (a ^ a) == H64()


def test_bitwise_with_different_size_fails():
    with pytest.raises(TypeError):
        H64() ^ H128()


def test_increment_carries_and_wraps():
    h = H64.from_int(0xFF)
    h.increment()
    assert int(h) == 0x100
    top = ~H64()
    top.increment()
    assert int(top) == 0


def test_setitem_and_clear():
    h = H64()
    h[0] = 0xAB
    assert h[0] == 0xAB
    assert bool(h)
    with pytest.raises(ValueError):
        h[1] = 256
    h.clear()
    assert not h


def test_abridged_and_str():
    h = H256.from_bytes(bytes(range(32)))
    assert h.abridged().startswith("00010203")
    assert len(h.abridged()) in (9, 11)
    assert str(h) == h.hex()
    assert len(h.hex()) == 64


def test_format_hashes():
    assert format_hashes([]) == "[ ]"
    hs = [H256.random(), H256.random()]
    text = format_hashes(hs)
    assert text == "[ " + hs[0].abridged() + ", " + hs[1].abridged() + ", ]"


def test_random_values_are_distinct_and_sized():
    values = [bytes(H256.random()) for _ in range(8)]
    assert all(len(value) == 32 for value in values)
    assert len(set(values)) == 8