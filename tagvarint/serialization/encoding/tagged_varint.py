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
This module implements the tagged varint encoding for unsigned integers.

A value is stored in 1, 2, 4 or 8 bytes, whichever is the narrowest that fits it. The low bits of the first byte hold
a tag that identifies the width, so a reader knows the size of the whole record from its first byte alone and no
length prefix is needed:

- the record is `(value << tag_size) | tag_pattern` written as `byte_capacity` little-endian bytes;
- values from 0 to 2**61 - 1 can be encoded, `width_class` has the table of widths and tags.

>>> se = Serializer.build_bytes_serializer()
>>> se.write_bytes(b'test')  # writes 74657374
>>> encode_tagged_varint(se, 0)  # writes 01
1
>>> encode_tagged_varint(se, 128)  # writes 0202
2
>>> encode_tagged_varint(se, 16384)  # writes 04000200
4
>>> encode_tagged_varint(se, 2**61 - 1)  # writes f8ffffffffffffff
8
>>> bytes(se.finalize()).hex()
'7465737401020204000200f8ffffffffffffff'

>>> data = bytes.fromhex('01 0202 04000200 f8ffffffffffffff 74657374')
>>> de = Deserializer.build_bytes_deserializer(data)
>>> decode_tagged_varint(de)  # reads 01
0
>>> decode_tagged_varint(de)  # reads 0202
128
>>> decode_tagged_varint(de)  # reads 04000200
16384
>>> decode_tagged_varint(de)  # reads f8ffffffffffffff
2305843009213693951
>>> bytes(de.read_all())  # reads 74657374
b'test'
>>> de.finalize()

>>> try:
...     encode_tagged_varint(Serializer.build_bytes_serializer(), 2**61)
... except RangeError as e:
...     print(e)
value 2305843009213693952 is out of range, must be between 0 and 2305843009213693951

>>> try:
...     decode_tagged_varint(Deserializer.build_bytes_deserializer(bytes([0x02])))
... except TruncatedInputError as e:
...     print(e)
a 2-byte record needs 1 more byte(s) after its first byte
"""

from tagvarint.serialization import (
    Deserializer,
    InvalidTagError,
    OutOfDataError,
    RangeError,
    Serializer,
    TruncatedInputError,
)
from tagvarint.serialization.encoding.width_class import DEFAULT_WIDTH_CLASS_TABLE, WidthClass, WidthClassTable


def _width_class_for_value(value: int, table: WidthClassTable) -> WidthClass:
    width_class = table.find_for_value(value)
    if width_class is None:
        raise RangeError(value, table.max_value)
    return width_class


def tagged_varint_size(value: int, *, table: WidthClassTable = DEFAULT_WIDTH_CLASS_TABLE) -> int:
    """Number of bytes `encode_tagged_varint` would write for `value`, raises `RangeError` the same way."""
    return _width_class_for_value(value, table).byte_capacity


def encode_tagged_varint(
    serializer: Serializer,
    value: int,
    *,
    table: WidthClassTable = DEFAULT_WIDTH_CLASS_TABLE,
) -> int:
    """ Encodes an unsigned integer using the narrowest width class that fits it.

    Returns the number of bytes written. Raises `RangeError` when no class can hold the value, nothing is written
    in that case.

    This module's docstring has more details and examples.
    """
    width_class = _width_class_for_value(value, table)
    tagged = (value << width_class.tag_size) | width_class.tag_pattern
    serializer.write_bytes(tagged.to_bytes(width_class.byte_capacity, byteorder='little'))
    return width_class.byte_capacity


def decode_tagged_varint(deserializer: Deserializer, *, table: WidthClassTable = DEFAULT_WIDTH_CLASS_TABLE) -> int:
    """ Decodes a tagged varint.

    Raises `TruncatedInputError` when the deserializer runs out of bytes before the record is complete, and
    `InvalidTagError` when the first byte matches no width class of the table.

    This module's docstring has more details and examples.
    """
    try:
        first_byte = deserializer.read_byte()
    except OutOfDataError as e:
        raise TruncatedInputError('no data left to read a record') from e

    width_class = table.find_for_tag(first_byte)
    if width_class is None:
        raise InvalidTagError(first_byte)

    missing = width_class.byte_capacity - 1
    try:
        rest = deserializer.read_bytes(missing)
    except OutOfDataError as e:
        raise TruncatedInputError(
            f'a {width_class.byte_capacity}-byte record needs {missing} more byte(s) after its first byte'
        ) from e

    tagged = first_byte | (int.from_bytes(rest, byteorder='little') << 8)
    return tagged >> width_class.tag_size


def peek_tagged_varint_size(
    deserializer: Deserializer,
    *,
    table: WidthClassTable = DEFAULT_WIDTH_CLASS_TABLE,
) -> int:
    """ Size of the record at the current position, without consuming anything.

    Useful to check that enough data is buffered before decoding. Raises like `decode_tagged_varint` when there is no
    first byte or its tag is not valid.
    """
    try:
        first_byte = deserializer.peek_byte()
    except OutOfDataError as e:
        raise TruncatedInputError('no data left to read a record') from e
    width_class = table.find_for_tag(first_byte)
    if width_class is None:
        raise InvalidTagError(first_byte)
    return width_class.byte_capacity
