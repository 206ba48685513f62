"""Stringer callables used to format a resolved field value.

A stringer takes any value and returns its string form. ``value`` is the
default; ``Array`` and ``Const`` are small frozen value types that carry
their configuration and are called like plain functions.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

Stringer = Callable[[Any], str]


def value(v: Any) -> str:
    """Default stringer: the value's ``str()`` form."""
    return str(v)


def _is_sequence(v: Any) -> bool:
    return isinstance(v, (list, tuple))


@dataclass(frozen=True)
class Array:
    """Join a list or tuple with *separator*.

    String items are joined directly; any other item is formatted with
    :func:`value` first. A non-sequence input falls back to :func:`value`.

    Examples:
        >>> Array(", ")(["foo", "bar"])
        'foo, bar'
        >>> Array("/")([1, 2, 3])
        '1/2/3'
        >>> Array(", ")("solo")
        'solo'
    """

    separator: str

    def __call__(self, v: Any) -> str:
        if not _is_sequence(v):
            return value(v)
        if all(isinstance(item, str) for item in v):
            return self.separator.join(v)
        return self.separator.join(value(item) for item in v)


@dataclass(frozen=True)
class Const:
    """Ignore the input and always return *text*."""

    text: str

    def __call__(self, _v: Any) -> str:
        return self.text
