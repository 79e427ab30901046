import pytest

from tagvarint.serialization import (
    BadDataError,
    InvalidTagError,
    MaxBytesExceededError,
    RangeError,
    TruncatedInputError,
)
from tagvarint.utils import tagged_varint
from tagvarint.utils.result import Err, Ok


@pytest.mark.parametrize(
    ['value', 'expected'],
    [
        (0, bytes([0x01])),
        (127, bytes([0xff])),
        (128, bytes([0x02, 0x02])),
        (16383, bytes([0xfe, 0xff])),
        (2**61 - 1, bytes([0xf8] + [0xff] * 7)),
    ],
)
def test_encode(value: int, expected: bytes) -> None:
    assert tagged_varint.encode(value) == expected


def test_encode_out_of_range() -> None:
    with pytest.raises(RangeError):
        tagged_varint.encode(2**61)


@pytest.mark.parametrize(
    ['data', 'expected'],
    [
        (bytes([0x01]), (0, b'')),
        (bytes([0x02, 0x02]) + b'test', (128, b'test')),
        (bytes.fromhex('04000200ff'), (16384, b'\xff')),
    ],
)
def test_decode(data: bytes, expected: tuple[int, bytes]) -> None:
    assert tagged_varint.decode(data) == expected


@pytest.mark.parametrize('data', [b'', bytes([0x02]), bytes([0x04, 0x00, 0x00]), bytes(7)])
def test_decode_truncated(data: bytes) -> None:
    with pytest.raises(TruncatedInputError):
        tagged_varint.decode(data)


def test_max_bytes() -> None:
    assert tagged_varint.encode(128, max_bytes=2) == bytes([0x02, 0x02])
    with pytest.raises(MaxBytesExceededError, match='cannot encode more than 1 bytes'):
        tagged_varint.encode(128, max_bytes=1)
    assert tagged_varint.decode(bytes([0x02, 0x02]), max_bytes=2) == (128, b'')
    with pytest.raises(ValueError, match='cannot decode more than 1 bytes'):
        tagged_varint.decode(bytes([0x02, 0x02]), max_bytes=1)


def test_max_bytes_checks_range_first() -> None:
    with pytest.raises(RangeError):
        tagged_varint.encode(2**61, max_bytes=1)


@pytest.mark.parametrize('data', [bytes([0x02]), bytes([0x04, 0x00])])
def test_max_bytes_reports_truncation_first(data: bytes) -> None:
    with pytest.raises(TruncatedInputError):
        tagged_varint.decode(data, max_bytes=1)


def test_decode_exact() -> None:
    assert tagged_varint.decode_exact(bytes([0x02, 0x02])) == 128
    with pytest.raises(BadDataError, match='trailing data'):
        tagged_varint.decode_exact(bytes([0x02, 0x02, 0x01]))


def test_try_encode() -> None:
    assert tagged_varint.try_encode(128) == Ok(bytes([0x02, 0x02]))
    result = tagged_varint.try_encode(2**61)
    assert isinstance(result, Err)
    assert isinstance(result.err(), RangeError)


def test_try_decode() -> None:
    assert tagged_varint.try_decode(bytes([0xff, 0x01])) == Ok((127, b'\x01'))
    result = tagged_varint.try_decode(bytes([0x04]))
    assert result.is_err()
    assert isinstance(result.err(), TruncatedInputError)
    assert not isinstance(result.err(), InvalidTagError)
