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
Tagged varint: unsigned integers stored in 1, 2, 4 or 8 bytes, with the width identified by the low bits of the first
byte.
"""

from tagvarint.serialization import (
    BytesDeserializer,
    BytesSerializer,
    CallbackSerializer,
    Deserializer,
    InvalidTagError,
    IteratorDeserializer,
    RangeError,
    SerializationError,
    Serializer,
    TruncatedInputError,
)
from tagvarint.serialization.encoding.tagged_varint import (
    decode_tagged_varint,
    encode_tagged_varint,
    peek_tagged_varint_size,
    tagged_varint_size,
)
from tagvarint.serialization.encoding.width_class import (
    DEFAULT_WIDTH_CLASS_TABLE,
    MAX_VALUE,
    WidthClass,
    WidthClassTable,
)
from tagvarint.version import __version__

__all__ = [
    'BytesDeserializer',
    'BytesSerializer',
    'CallbackSerializer',
    'DEFAULT_WIDTH_CLASS_TABLE',
    'Deserializer',
    'InvalidTagError',
    'IteratorDeserializer',
    'MAX_VALUE',
    'RangeError',
    'SerializationError',
    'Serializer',
    'TruncatedInputError',
    'WidthClass',
    'WidthClassTable',
    'decode_tagged_varint',
    'encode_tagged_varint',
    'peek_tagged_varint_size',
    'tagged_varint_size',
    '__version__',
]
