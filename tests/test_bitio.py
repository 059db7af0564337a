import io

import pytest

from pocketalgo.bitio import BitReader, BitWriter


def _write(bits, flush=True):
    stream = io.BytesIO()
    writer = BitWriter(stream)
    for bit in bits:
        writer.write_bit(bit)
    if flush:
        writer.flush()
    return stream.getvalue()


def test_partial_byte_is_padded_with_zeros():
    assert _write([1, 0, 1]) == bytes([0b10100000])


def test_full_byte_is_written_without_flush():
    assert _write([1, 1, 1, 1, 0, 0, 0, 0], flush=False) == bytes([0b11110000])


def test_unfilled_bits_stay_pending_until_flush():
    assert _write([1, 0, 1], flush=False) == b""


def test_flush_with_nothing_pending_writes_nothing():
    assert _write([]) == b""


def test_only_lowest_bit_is_used():
    assert _write([3, 2, 1, 0, 0, 0, 0, 1]) == _write([1, 0, 1, 0, 0, 0, 0, 1])


def test_round_trip():
    bits = [1, 0, 0, 1, 1, 1, 0, 1, 0, 1, 1, 0, 0, 0, 1, 1, 1]
    reader = BitReader(io.BytesIO(_write(bits)))
    assert [reader.read_bit() for _ in bits] == bits


def test_reader_reads_msb_first():
    reader = BitReader(io.BytesIO(bytes([0b10000001])))
    assert [reader.read_bit() for _ in range(8)] == [1, 0, 0, 0, 0, 0, 0, 1]


def test_reader_raises_at_end_of_stream():
    reader = BitReader(io.BytesIO(bytes([0xFF])))
    for _ in range(8):
        assert reader.read_bit() == 1
    with pytest.raises(EOFError):
        reader.read_bit()


def test_reader_on_empty_stream_raises():
    with pytest.raises(EOFError):
        BitReader(io.BytesIO(b"")).read_bit()