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

from collections import deque
from typing import Iterable

from typing_extensions import override

from .deserializer import Deserializer
from .exceptions import BadDataError, OutOfDataError


class IteratorDeserializer(Deserializer):
    """Deserializer that pulls bytes on demand from any iterable of ints.

    Bytes are only pulled from the source when a read needs them. Peeking keeps the pulled bytes in a small
    look-ahead queue so they are returned again by the next read. Exhaustion of the source is reported as
    `OutOfDataError`, no default bytes are ever produced.

    >>> de = IteratorDeserializer(iter([1, 2, 3]))
    >>> de.peek_byte()
    1
    >>> de.read_byte(), bytes(de.read_bytes(2))
    (1, b'\\x02\\x03')
    >>> de.is_empty()
    True
    """

    def __init__(self, source: Iterable[int]) -> None:
        self._source = iter(source)
        self._lookahead: deque[int] = deque()

    def _pull(self) -> bool:
        """Move one byte from the source to the look-ahead, return False if the source is exhausted."""
        try:
            byte = next(self._source)
        except StopIteration:
            return False
        if not isinstance(byte, int) or not 0 <= byte <= 0xff:
            raise BadDataError(f'byte source produced an invalid byte: {byte!r}')
        self._lookahead.append(byte)
        return True

    def _fill(self, n: int) -> bool:
        """Pull from the source until there are `n` bytes of look-ahead, return False if it ran out first."""
        while len(self._lookahead) < n:
            if not self._pull():
                return False
        return True

    @override
    def finalize(self) -> None:
        if not self.is_empty():
            raise ValueError('trailing data')
        del self._source
        del self._lookahead

    @override
    def is_empty(self) -> bool:
        return not self._fill(1)

    @override
    def peek_byte(self) -> int:
        if not self._fill(1):
            raise OutOfDataError('not enough bytes to read')
        return self._lookahead[0]

    @override
    def peek_bytes(self, n: int, *, exact: bool = True) -> bytes:
        if n < 0:
            raise ValueError('value cannot be negative')
        if not self._fill(n) and exact:
            raise OutOfDataError(f'not enough bytes to read: {n} requested, {len(self._lookahead)} available')
        return bytes(self._lookahead[i] for i in range(min(n, len(self._lookahead))))

    @override
    def read_byte(self) -> int:
        b = self.peek_byte()
        self._lookahead.popleft()
        return b

    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> bytes:
        b = self.peek_bytes(n, exact=exact)
        for _ in range(len(b)):
            self._lookahead.popleft()
        return b

    @override
    def read_all(self) -> bytes:
        while self._pull():
            pass
        result = bytes(self._lookahead)
        self._lookahead.clear()
        return result
