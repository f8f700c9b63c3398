import io

import pytest

from pycos.errors import CosError, ErrorCode
from pycos.runlength import RunLengthDecoder


def _encode(data: bytes) -> bytes:
    """Run-length encode ``data`` and append the end-of-data marker."""
    out = bytearray()
    i = 0
    n = len(data)
    while i < n:
        j = i
        while j + 1 < n and data[j + 1] == data[i] and j - i + 1 < 128:
            j += 1
        run = j - i + 1
        if run >= 2:
            out += bytes((257 - run, data[i]))
            i = j + 1
            continue
        start = i
        while i < n and i - start < 128 and not (i + 1 < n and data[i + 1] == data[i]):
            i += 1
        if i == start:
            i += 1
        literal = data[start:i]
        out.append(len(literal) - 1)
        out += literal
    out.append(128)
    return bytes(out)


class _OneByteReader(io.RawIOBase):
    def __init__(self, data: bytes) -> None:
        self._data = data
        self._pos = 0

    def readable(self) -> bool:
        return True

    def read(self, n: int = -1) -> bytes:
        if self._pos >= len(self._data) or n == 0:
            return b""
        chunk = self._data[self._pos:self._pos + 1]
        self._pos += 1
        return chunk


def _decode(encoded: bytes) -> bytes:
    return RunLengthDecoder(io.BytesIO(encoded)).read()


def test_literal_run():
    assert _decode(bytes([2]) + b"abc" + bytes([128])) == b"abc"


def test_copy_run():
    assert _decode(bytes([255, 0x41, 128])) == b"AA"


def test_longest_copy_run():
    assert _decode(bytes([129, 0x00, 128])) == bytes(128)


def test_data_after_eod_is_ignored():
    assert _decode(bytes([0]) + b"q" + bytes([128]) + bytes([0]) + b"z") == b"q"


def test_missing_eod_ends_at_source_end():
    assert _decode(bytes([1]) + b"hi") == b"hi"


def test_truncated_literal_run():
    assert _decode(bytes([4]) + b"ab") == b"ab"


def test_truncated_copy_run():
    assert _decode(bytes([200])) == b""


def test_empty_source():
    assert _decode(b"") == b""


@pytest.mark.parametrize(
    "payload",
    [
        b"hello world",
        b"aaaaaaaaaabbbbbbbbbbcdefg",
        bytes(range(256)) * 3,
        b"x" * 1000,
        b"ab" * 300 + b"c" * 500,
    ],
)
def test_round_trip(payload):
    assert _decode(_encode(payload)) == payload


def test_round_trip_with_small_reads():
    payload = b"zz" * 50 + bytes(range(200)) + b"y" * 400
    decoder = RunLengthDecoder(io.BytesIO(_encode(payload)))
    pieces = []
    while True:
        chunk = decoder.read(7)
        if not chunk:
            break
        pieces.append(chunk)
    assert b"".join(pieces) == payload


def test_source_read_byte_by_byte():
    payload = b"mississippi" + b"s" * 300
    decoder = RunLengthDecoder(_OneByteReader(_encode(payload)))
    assert decoder.read() == payload


def test_readinto_fills_buffer():
    payload = b"k" * 600
    decoder = RunLengthDecoder(io.BytesIO(_encode(payload)))
    buffer = bytearray(500)
    assert decoder.readinto(buffer) == 500
    assert bytes(buffer) == payload[:500]


def test_no_source_raises():
    decoder = RunLengthDecoder()
    with pytest.raises(CosError) as info:
        decoder.read(4)
    assert info.value.code is ErrorCode.INVALID_ARGUMENT


def test_close_closes_source():
    source = io.BytesIO(bytes([0]) + b"a" + bytes([128]))
    decoder = RunLengthDecoder(source)
    decoder.close()
    assert source.closed


def test_read_after_close_raises():
    decoder = RunLengthDecoder(io.BytesIO(bytes([128])))
    decoder.close()
    with pytest.raises(ValueError):
        decoder.readinto(bytearray(1))