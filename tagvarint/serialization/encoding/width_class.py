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
This module defines the width classes used by the tagged varint encoding.

A width class is one fixed-size layout for a record: how many bytes it takes, and which bit pattern in the low bits of
its first byte identifies it. A table is the ordered list of classes a codec can use, narrowest first.

The default table:

    | bytes | tag size | tag  | payload bits | max value                 |
    |-------|----------|------|--------------|---------------------------|
    | 1     | 1        | 1    | 7            | 127                       |
    | 2     | 2        | 10   | 14           | 16383                     |
    | 4     | 3        | 100  | 29           | 536870911                 |
    | 8     | 3        | 000  | 61           | 2305843009213693951       |

No two tags agree on the low bits they share, so a first byte matches at most one class. Together the four default
tags cover every possible first byte.

>>> DEFAULT_WIDTH_CLASS_TABLE.find_for_value(127).byte_capacity
1
>>> DEFAULT_WIDTH_CLASS_TABLE.find_for_value(128).byte_capacity
2
>>> DEFAULT_WIDTH_CLASS_TABLE.find_for_tag(0b1010_0100).byte_capacity
4
>>> DEFAULT_WIDTH_CLASS_TABLE.find_for_value(2**61) is None
True
>>> MAX_VALUE == 2**61 - 1
True
"""

from typing import Optional

from pydantic import Field, field_validator, model_validator
from typing_extensions import Self

from tagvarint.utils.pydantic import BaseModel


class WidthClass(BaseModel):
    """One fixed-size record layout.

    Attributes:
        name: human readable name, only used for display.

        byte_capacity: total number of bytes of a record of this class.

        tag_size: number of low bits of the first byte that hold the tag.

        tag_pattern: the value the `tag_size` low bits must have.

        payload_bits: number of value bits the record carries, always `8 * byte_capacity - tag_size`.
    """
    name: str
    byte_capacity: int = Field(ge=1, le=8)
    tag_size: int = Field(ge=1, le=8)
    tag_pattern: int = Field(ge=0)
    payload_bits: int

    @model_validator(mode='after')
    def _validate_layout(self) -> Self:
        if self.tag_pattern > self.tag_mask:
            raise ValueError(f'tag_pattern {self.tag_pattern:#b} does not fit in {self.tag_size} bits')
        if self.payload_bits != 8 * self.byte_capacity - self.tag_size:
            raise ValueError('payload_bits must be 8 * byte_capacity - tag_size')
        if self.payload_bits <= 0:
            raise ValueError('width class has no room for payload bits')
        return self

    @property
    def tag_mask(self) -> int:
        return (1 << self.tag_size) - 1

    @property
    def max_value(self) -> int:
        return (1 << self.payload_bits) - 1

    def matches(self, first_byte: int) -> bool:
        """Whether the low bits of the first byte of a record hold this class' tag."""
        return (first_byte & self.tag_mask) == self.tag_pattern

    def can_represent(self, value: int) -> bool:
        return value >= 0 and (value >> self.payload_bits) == 0


class WidthClassTable(BaseModel):
    """Ordered width classes, narrowest first.

    The order is used for picking the class of a value (first one that fits). Tags must not overlap, so the class of a
    record is the same whatever order its first byte is tested in.
    """
    classes: tuple[WidthClass, ...]

    @field_validator('classes')
    @classmethod
    def _validate_classes(cls, classes: tuple[WidthClass, ...]) -> tuple[WidthClass, ...]:
        if not classes:
            raise ValueError('a width class table needs at least one class')
        _validate_increasing_sizes(classes)
        _validate_disjoint_tags(classes)
        return classes

    @property
    def max_value(self) -> int:
        """The largest value that can be encoded with this table."""
        return self.classes[-1].max_value

    def find_for_value(self, value: int) -> Optional[WidthClass]:
        """Narrowest class that can represent `value`, None if there isn't one."""
        for width_class in self.classes:
            if width_class.can_represent(value):
                return width_class
        return None

    def find_for_tag(self, first_byte: int) -> Optional[WidthClass]:
        """Class identified by the first byte of a record, None if no tag matches."""
        for width_class in self.classes:
            if width_class.matches(first_byte):
                return width_class
        return None


def _validate_increasing_sizes(classes: tuple[WidthClass, ...]) -> None:
    """Validates that both byte_capacity and payload_bits strictly increase along the table."""
    for prev, cur in zip(classes, classes[1:]):
        if cur.byte_capacity <= prev.byte_capacity:
            raise ValueError(f'byte_capacity must strictly increase: {prev.name} -> {cur.name}')
        if cur.payload_bits <= prev.payload_bits:
            raise ValueError(f'payload_bits must strictly increase: {prev.name} -> {cur.name}')


def _validate_disjoint_tags(classes: tuple[WidthClass, ...]) -> None:
    """Validates that no first byte can match the tags of two classes.

    The payload bits above a short tag are free, so a record of one class can start with any byte that ends in its
    tag. If another tag agrees with it on the low bits both of them cover, some records would be decoded with the wrong
    width.
    """
    for i, cur in enumerate(classes):
        for prev in classes[:i]:
            shared_mask = (1 << min(prev.tag_size, cur.tag_size)) - 1
            if (prev.tag_pattern & shared_mask) == (cur.tag_pattern & shared_mask):
                raise ValueError(f'tags of {prev.name} and {cur.name} overlap')


BYTE1 = WidthClass(name='1-byte', byte_capacity=1, tag_size=1, tag_pattern=0b1, payload_bits=7)
BYTE2 = WidthClass(name='2-byte', byte_capacity=2, tag_size=2, tag_pattern=0b10, payload_bits=14)
BYTE4 = WidthClass(name='4-byte', byte_capacity=4, tag_size=3, tag_pattern=0b100, payload_bits=29)
BYTE8 = WidthClass(name='8-byte', byte_capacity=8, tag_size=3, tag_pattern=0b000, payload_bits=61)

DEFAULT_WIDTH_CLASS_TABLE = WidthClassTable(classes=(BYTE1, BYTE2, BYTE4, BYTE8))

# 2**61 - 1
MAX_VALUE = DEFAULT_WIDTH_CLASS_TABLE.max_value


def find_width_class_for_value(
    value: int,
    table: WidthClassTable = DEFAULT_WIDTH_CLASS_TABLE,
) -> Optional[WidthClass]:
    return table.find_for_value(value)


def find_width_class_for_tag(
    first_byte: int,
    table: WidthClassTable = DEFAULT_WIDTH_CLASS_TABLE,
) -> Optional[WidthClass]:
    return table.find_for_tag(first_byte)
