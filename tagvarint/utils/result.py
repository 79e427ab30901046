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
A small `Result` type inspired by Rust, for APIs that report failures as values instead of raising.

>>> from tagvarint.serialization import RangeError
>>> @as_result(RangeError)
... def check(value: int) -> int:
...     if value > 10:
...         raise RangeError(value, 10)
...     return value
>>> check(3)
Ok(3)
>>> check(11)
Err(RangeError('value 11 is out of range, must be between 0 and 10'))
>>> is_err(check(11)), check(3).unwrap()
(True, 3)
"""

from __future__ import annotations

import functools
from typing import Any, Callable, Generic, Literal, NoReturn, ParamSpec, Type, TypeAlias, TypeVar

from typing_extensions import TypeIs

T = TypeVar('T', covariant=True)  # Success type
E = TypeVar('E', covariant=True)  # Error type
P = ParamSpec('P')
TE = TypeVar('TE', bound=Exception)


class Ok(Generic[T]):
    """Successful result, holding the return value."""

    __slots__ = ('_value',)
    __match_args__ = ('_value',)

    def __init__(self, value: T) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f'Ok({self._value!r})'

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Ok) and self._value == other._value

    def is_err(self) -> Literal[False]:
        return False

    def err(self) -> None:
        return None

    def unwrap(self) -> T:
        return self._value


class Err(Generic[E]):
    """Failed result, holding the error."""

    __slots__ = ('_value',)
    __match_args__ = ('_value',)

    def __init__(self, value: E) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f'Err({self._value!r})'

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Err) and self._value == other._value

    def is_err(self) -> Literal[True]:
        return True

    def err(self) -> E:
        return self._value

    def unwrap(self) -> NoReturn:
        """There is no value to return, so the contained exception is raised again."""
        if isinstance(self._value, BaseException):
            raise self._value
        raise ValueError(f'called `unwrap()` on an `Err` value: {self._value!r}')


Result: TypeAlias = Ok[T] | Err[E]


def as_result(
    *exceptions: Type[TE],
) -> Callable[[Callable[P, T]], Callable[P, Result[T, TE]]]:
    """
    Make a decorator to turn a function into one that returns a `Result`.

    Regular return values are turned into `Ok(return_value)`. Raised
    exceptions of the specified exception type(s) are turned into `Err(exc)`.
    """
    if not exceptions or not all(isinstance(exc, type) and issubclass(exc, BaseException) for exc in exceptions):
        raise TypeError('as_result() requires one or more exception types')

    def decorator(f: Callable[P, T]) -> Callable[P, Result[T, TE]]:
        @functools.wraps(f)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, TE]:
            try:
                return Ok(f(*args, **kwargs))
            except exceptions as exc:
                return Err(exc)

        return wrapper

    return decorator


def is_err(result: Result[T, E]) -> TypeIs[Err[E]]:
    """A type guard to check if a result is an Err"""
    return result.is_err()
