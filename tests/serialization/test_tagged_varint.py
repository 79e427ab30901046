import random
from typing import Iterator

import pytest

from tagvarint.serialization import (
    Deserializer,
    InvalidTagError,
    RangeError,
    Serializer,
    TruncatedInputError,
)
from tagvarint.serialization.encoding.tagged_varint import (
    decode_tagged_varint,
    encode_tagged_varint,
    peek_tagged_varint_size,
    tagged_varint_size,
)
from tagvarint.serialization.encoding.width_class import BYTE1, BYTE2, BYTE4, WidthClass, WidthClassTable


def _encode(value: int) -> bytes:
    se = Serializer.build_bytes_serializer()
    written = encode_tagged_varint(se, value)
    data = bytes(se.finalize())
    assert written == len(data)
    return data


def _decode(data: bytes) -> int:
    de = Deserializer.build_bytes_deserializer(data)
    value = decode_tagged_varint(de)
    de.finalize()
    return value


@pytest.mark.parametrize(
    ['value', 'encoded'],
    [
        (0, '01'),
        (1, '03'),
        (127, 'ff'),
        (128, '0202'),
        (16383, 'feff'),
        (16384, '04000200'),
        (2**29 - 1, 'fcffffff'),
        (2**29, '0000000001000000'),
        (2**61 - 1, 'f8ffffffffffffff'),
    ],
)
def test_known_encodings(value: int, encoded: str) -> None:
    assert _encode(value).hex() == encoded
    assert _decode(bytes.fromhex(encoded)) == value


SIZE_BOUNDARIES = {
    1: (0, 2**7 - 1),
    2: (2**7, 2**14 - 1),
    4: (2**14, 2**29 - 1),
    8: (2**29, 2**61 - 1),
}


def gen_size_test_cases() -> list[tuple[int, int]]:
    test_cases = []
    for size, (lo, hi) in SIZE_BOUNDARIES.items():
        test_cases.append((lo, size))
        test_cases.append((lo + 1, size))
        test_cases.append((hi - 1, size))
        test_cases.append((hi, size))
    rng = random.Random(0x7a66)
    for size, (lo, hi) in SIZE_BOUNDARIES.items():
        for _ in range(20):
            test_cases.append((rng.randint(lo, hi), size))
    return test_cases


@pytest.mark.parametrize('n, encoded_size', gen_size_test_cases())
def test_round_trip_with_size(n: int, encoded_size: int) -> None:
    encoded = _encode(n)
    assert len(encoded) == encoded_size
    assert tagged_varint_size(n) == encoded_size
    assert _decode(encoded) == n


def test_encoding_is_injective() -> None:
    values = [value for value, _ in gen_size_test_cases()]
    encodings = {_encode(value) for value in set(values)}
    assert len(encodings) == len(set(values))


@pytest.mark.parametrize('value', [2**61, 2**61 + 1, 2**63, 2**64 - 1, -1])
def test_out_of_range_writes_nothing(value: int) -> None:
    out: list[int] = []
    se = Serializer.build_callback_serializer(out.append)
    with pytest.raises(RangeError) as exc_info:
        encode_tagged_varint(se, value)
    assert exc_info.value.value == value
    assert exc_info.value.max_value == 2**61 - 1
    assert out == []
    assert se.cur_pos() == 0
    with pytest.raises(RangeError):
        tagged_varint_size(value)


def test_range_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        _encode(2**61)


@pytest.mark.parametrize('value', [0, 200, 70000, 2**40])
def test_callback_is_called_once_per_byte(value: int) -> None:
    out: list[int] = []
    se = Serializer.build_callback_serializer(out.append)
    written = encode_tagged_varint(se, value)
    assert written == len(out) == se.cur_pos()
    assert bytes(out) == _encode(value)


def test_decode_empty() -> None:
    with pytest.raises(TruncatedInputError):
        _decode(b'')


def test_decode_only_tag_byte() -> None:
    de = Deserializer.build_bytes_deserializer(bytes([0x02]))
    with pytest.raises(TruncatedInputError):
        decode_tagged_varint(de)


@pytest.mark.parametrize('value', [128, 16384, 2**29, 2**61 - 1])
def test_decode_truncated(value: int) -> None:
    encoded = _encode(value)
    for length in range(len(encoded)):
        with pytest.raises(TruncatedInputError):
            decode_tagged_varint(Deserializer.build_bytes_deserializer(encoded[:length]))


def _tracking(data: bytes, pulled: list[int]) -> Iterator[int]:
    for byte in data:
        pulled.append(byte)
        yield byte


@pytest.mark.parametrize('value', [5, 300, 100000, 2**50])
def test_decode_reads_only_its_record(value: int) -> None:
    encoded = _encode(value)
    pulled: list[int] = []
    de = Deserializer.build_iterator_deserializer(_tracking(encoded + b'\xff\xff', pulled))
    assert decode_tagged_varint(de) == value
    assert bytes(pulled) == encoded


@pytest.mark.parametrize('value', [300, 100000, 2**50])
def test_decode_truncated_stream_never_reads_past_the_end(value: int) -> None:
    encoded = _encode(value)[:-1]
    pulled: list[int] = []
    de = Deserializer.build_iterator_deserializer(_tracking(encoded, pulled))
    with pytest.raises(TruncatedInputError):
        decode_tagged_varint(de)
    assert bytes(pulled) == encoded


def test_decode_accepts_any_first_byte() -> None:
    for first_byte in range(256):
        de = Deserializer.build_bytes_deserializer(bytes([first_byte]) + bytes(7) + b'rest')
        decode_tagged_varint(de)
        assert len(bytes(de.read_all())) in (4, 8, 10, 11)


def test_decode_non_minimal_record() -> None:
    # an 8-byte record holding a small value is still readable
    assert _decode(bytes.fromhex('0800000000000000')) == 1


def test_consecutive_records() -> None:
    values = [0, 127, 128, 16383, 16384, 2**29 - 1, 2**29, 2**61 - 1]
    se = Serializer.build_bytes_serializer()
    for value in values:
        encode_tagged_varint(se, value)
    de = Deserializer.build_bytes_deserializer(se.finalize())
    decoded = []
    while not de.is_empty():
        decoded.append(decode_tagged_varint(de))
    de.finalize()
    assert decoded == values


def test_peek_size_does_not_consume() -> None:
    de = Deserializer.build_bytes_deserializer(bytes.fromhex('0202ff'))
    assert peek_tagged_varint_size(de) == 2
    assert decode_tagged_varint(de) == 128
    assert peek_tagged_varint_size(de) == 1
    assert decode_tagged_varint(de) == 127
    with pytest.raises(TruncatedInputError):
        peek_tagged_varint_size(de)


def test_custom_table_invalid_tag() -> None:
    table = WidthClassTable(classes=(BYTE1, BYTE2, BYTE4))
    de = Deserializer.build_bytes_deserializer(bytes(8))
    with pytest.raises(InvalidTagError) as exc_info:
        decode_tagged_varint(de, table=table)
    assert exc_info.value.first_byte == 0
    with pytest.raises(InvalidTagError):
        peek_tagged_varint_size(Deserializer.build_bytes_deserializer(bytes(8)), table=table)


def test_custom_table_range() -> None:
    table = WidthClassTable(classes=(BYTE1, BYTE2, BYTE4))
    se = Serializer.build_bytes_serializer()
    assert encode_tagged_varint(se, 2**29 - 1, table=table) == 4
    with pytest.raises(RangeError) as exc_info:
        encode_tagged_varint(se, 2**29, table=table)
    assert exc_info.value.max_value == 2**29 - 1
    assert bytes(se.finalize()).hex() == 'fcffffff'


@pytest.mark.parametrize('value', [0, 63, 64, 2**15 - 1])
def test_custom_table_round_trip(value: int) -> None:
    table = WidthClassTable(classes=(
        WidthClass(name='short', byte_capacity=1, tag_size=2, tag_pattern=0b01, payload_bits=6),
        WidthClass(name='long', byte_capacity=2, tag_size=1, tag_pattern=0b0, payload_bits=15),
    ))
    se = Serializer.build_bytes_serializer()
    size = encode_tagged_varint(se, value, table=table)
    de = Deserializer.build_bytes_deserializer(se.finalize())
    assert peek_tagged_varint_size(de, table=table) == size
    assert decode_tagged_varint(de, table=table) == value
    de.finalize()
