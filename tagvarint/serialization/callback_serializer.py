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

from typing import Callable

from typing_extensions import Buffer, TypeAlias, override

from .serializer import Serializer

ByteConsumer: TypeAlias = Callable[[int], None]


class CallbackSerializer(Serializer):
    """Serializer that hands every byte to a callback, in the order they are written.

    This is the least demanding sink possible: no buffering happens here and `emit` is called exactly once per
    byte, so the caller decides where the bytes end up (a bytearray, a socket, a hash, ...).

    >>> out = []
    >>> se = CallbackSerializer(out.append)
    >>> se.write_bytes(b'ab')
    >>> se.write_byte(0x63)
    >>> out, se.cur_pos()
    ([97, 98, 99], 3)
    """

    def __init__(self, emit: ByteConsumer) -> None:
        self._emit = emit
        self._pos = 0

    @override
    def cur_pos(self) -> int:
        return self._pos

    @override
    def write_byte(self, data: int) -> None:
        if not 0 <= data <= 0xff:
            raise ValueError(f'byte must be in range(0, 256), got {data}')
        self._emit(data)
        self._pos += 1

    @override
    def write_bytes(self, data: Buffer) -> None:
        for byte in bytes(memoryview(data)):
            self._emit(byte)
            self._pos += 1
