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

class SerializationError(Exception):
    """Base class for all errors raised while writing or reading encoded data."""


class OutOfDataError(SerializationError, ValueError):
    """The deserializer was exhausted before the requested bytes could be read."""


class BadDataError(SerializationError, ValueError):
    """The data being read is not valid."""


class TooLongError(SerializationError, ValueError):
    """A length limit was exceeded."""


class MaxBytesExceededError(TooLongError):
    """A record is larger than the number of bytes the caller allows."""


class RangeError(SerializationError, ValueError):
    """The value cannot be represented by any width class of the table in use."""

    def __init__(self, value: int, max_value: int) -> None:
        super().__init__(f'value {value} is out of range, must be between 0 and {max_value}')
        self.value = value
        self.max_value = max_value


class TruncatedInputError(OutOfDataError):
    """The byte source ended before the number of bytes implied by the tag could be read.

    Callers that read from a stream can treat this as "need more data" instead of a protocol error.
    """


class InvalidTagError(BadDataError):
    """The low bits of the first byte do not match the tag pattern of any width class."""

    def __init__(self, first_byte: int) -> None:
        super().__init__(f'first byte 0x{first_byte:02x} does not match any width class tag')
        self.first_byte = first_byte
