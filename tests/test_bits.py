import pytest

from wififrame.bits import BitReader
from wififrame.errors import Incomplete, ParseFailure


def test_take_reads_most_significant_bits_first():
    reader = BitReader(bytes([0xAB]))
    assert reader.take(4) == 0xA
    assert reader.take(4) == 0xB
    assert reader.remaining() == b""


def test_take_across_byte_boundary_round_trips_sixteen_bits():
    reader = BitReader(bytes([0x12, 0x34, 0x56]))
    assert reader.take(16) == 0x1234
    assert reader.remaining() == bytes([0x56])


def test_take_splits_reassemble():
    data = bytes([0x9C, 0x5E])
    whole = BitReader(data).take(16)
    reader = BitReader(data)
    high = reader.take(5)
    low = reader.take(11)
    assert (high << 11) | low == whole


def test_take_zero_bits():
    reader = BitReader(bytes([0xFF]))
    assert reader.take(0) == 0
    assert reader.remaining() == bytes([0xFF])


def test_flags_read_from_least_significant_bit():
    reader = BitReader(bytes([0b0000_0100]))
    assert [reader.flag(), reader.flag(), reader.flag()] == [False, False, True]


def test_eight_flags_move_to_next_byte():
    reader = BitReader(bytes([0b1000_0001, 0b0000_0001]))
    flags = [reader.flag() for _ in range(8)]
    assert flags[0] is True and flags[7] is True
    assert not any(flags[1:7])
    assert reader.remaining() == bytes([0b0000_0001])
    assert reader.flag() is True


def test_take_after_flags_continues_from_offset():
    reader = BitReader(bytes([0b0001_1111]))
    assert all(reader.flag() for _ in range(3))
    assert reader.take(5) == 0b11111


def test_remaining_drops_partial_byte():
    reader = BitReader(bytes([1, 2, 3]))
    reader.take(3)
    assert reader.remaining() == bytes([2, 3])


def test_take_past_end_raises_failure():
    reader = BitReader(bytes([0xFF, 0x01]))
    reader.take(8)
    with pytest.raises(ParseFailure) as info:
        reader.take(9)
    assert info.value.data == bytes([0x01])


def test_flag_on_empty_input_is_incomplete():
    with pytest.raises(Incomplete) as info:
        BitReader(b"").flag()
    assert info.value.needed == 1


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        BitReader(b"\x00").take(-1)