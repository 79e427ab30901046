# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Helpers to work with tagged varints directly on `bytes`.

>>> encode(0) == bytes([0x01])
True
>>> encode(300).hex()
'b204'
>>> decode(bytes.fromhex('b204') + b'test')
(300, b'test')
>>> decode_exact(bytes.fromhex('b204'))
300
>>> try_decode(bytes([0x02]))
Err(TruncatedInputError('a 2-byte record needs 1 more byte(s) after its first byte'))
"""

from tagvarint.serialization import BadDataError, Deserializer, MaxBytesExceededError, SerializationError, Serializer
from tagvarint.serialization.encoding.tagged_varint import (
    decode_tagged_varint,
    encode_tagged_varint,
    tagged_varint_size,
)
from tagvarint.utils.result import as_result


def encode(value: int, *, max_bytes: int | None = None) -> bytes:
    """
    Receive an unsigned integer and return its tagged varint bytes.

    Raises `RangeError` when the value is negative or not below 2**61, and `MaxBytesExceededError` (a `ValueError`)
    when the record would be larger than `max_bytes`. Nothing is encoded in either case.

    >>> encode(127).hex()
    'ff'
    >>> encode(128).hex()
    '0202'
    >>> try:
    ...     encode(16384, max_bytes=2)
    ... except ValueError as e:
    ...     print(e)
    cannot encode more than 2 bytes
    """
    if max_bytes is not None and tagged_varint_size(value) > max_bytes:
        raise MaxBytesExceededError(f'cannot encode more than {max_bytes} bytes')
    serializer = Serializer.build_bytes_serializer()
    encode_tagged_varint(serializer, value)
    return bytes(serializer.finalize())


def decode(data: bytes, *, max_bytes: int | None = None) -> tuple[int, bytes]:
    """
    Receive and consume a buffer returning a tuple of the decoded value and the remaining buffer.

    The record is decoded before `max_bytes` is checked, so a truncated or invalid record is reported as such even when
    its tag announces more bytes than allowed.

    >>> decode(bytes([0xff, 0xff]))
    (127, b'\\xff')
    >>> try:
    ...     decode(bytes.fromhex('04000200'), max_bytes=2)
    ... except ValueError as e:
    ...     print(e)
    cannot decode more than 2 bytes
    >>> try:
    ...     decode(bytes([0x02]), max_bytes=1)
    ... except ValueError as e:
    ...     print(type(e).__name__, e)
    TruncatedInputError a 2-byte record needs 1 more byte(s) after its first byte
    """
    deserializer = Deserializer.build_bytes_deserializer(data)
    value = decode_tagged_varint(deserializer)
    remaining_data = bytes(deserializer.read_all())
    deserializer.finalize()
    if max_bytes is not None and len(data) - len(remaining_data) > max_bytes:
        raise MaxBytesExceededError(f'cannot decode more than {max_bytes} bytes')
    return value, remaining_data


def decode_exact(data: bytes) -> int:
    """Decode a buffer that must hold exactly one record."""
    value, remaining_data = decode(data)
    if remaining_data:
        raise BadDataError(f'trailing data: {len(remaining_data)} byte(s) after the record')
    return value


@as_result(SerializationError)
def try_encode(value: int) -> bytes:
    """Same as `encode` but failures are returned as `Err`."""
    return encode(value)


@as_result(SerializationError)
def try_decode(data: bytes) -> tuple[int, bytes]:
    """Same as `decode` but failures are returned as `Err`."""
    return decode(data)

