"""NonEmptyString — a string value that always holds at least one character.

The value is stored as a distinguished ``head`` character plus a
possibly-empty ``tail``. Because ``head`` always exists, taking the first
character or the remainder never needs an optional result.

Operations that can legitimately produce an empty result (slicing,
trimming, filtering) return a plain ``str``. Everything else returns a new
NonEmptyString built directly from a known head and tail.

INVARIANT: ``len(value) >= 1`` and ``value.head == str(value)[0]``.
INVARIANT: Values never mutate. Equality, hashing, and ordering depend
only on the denoted string.
"""

from __future__ import annotations

import decimal
import functools
import re
import sys
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic_core import CoreSchema, core_schema

from nestr.domain.chars import require_char, simple_lower, simple_upper
from nestr.domain.sequence import NonEmptySequence

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler

B = TypeVar("B")

# Optional sign, ASCII digits, nothing else (no whitespace or underscores).
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
# Decimal float literal; "nan" and "inf" spellings are rejected.
_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def _int_from_digits(text: str) -> int:
    """Parse a signed digit string of any length.

    Text longer than ``sys.get_int_max_str_digits()`` goes through Decimal,
    which has no conversion limit.
    """
    limit = sys.get_int_max_str_digits()
    if limit and len(text) > limit:
        return int(decimal.Decimal(text))
    return int(text)


def _digits_of(number: int) -> str:
    """Decimal text of *number* regardless of its size."""
    try:
        return str(number)
    except ValueError:
        # Past the interpreter's int/str digit limit.
        return str(decimal.Decimal(number))


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class NonEmptyString:
    """Immutable string of length >= 1.

    Attributes:
        head: The first character. Always present.
        tail: Everything after the first character. May be empty.

    Examples:
        >>> value = NonEmptyString("h", "ello")
        >>> value.head, value.tail, len(value)
        ('h', 'ello', 5)
        >>> NonEmptyString.from_string("") is None
        True
    """

    head: str
    tail: str = ""

    def __post_init__(self) -> None:
        require_char(self.head, "head")
        if not isinstance(self.tail, str):
            msg = f"tail must be a str, got {type(self.tail).__name__}"
            raise TypeError(msg)

    # --- Construction ---

    @classmethod
    def from_string(cls, text: str) -> NonEmptyString | None:
        """Split *text* into head and tail, or return None if it is empty."""
        if not text:
            return None
        return cls._split(text)

    @classmethod
    def from_char(cls, char: str) -> NonEmptyString:
        return cls(char)

    @classmethod
    def from_int(cls, number: int) -> NonEmptyString:
        """Decimal text of *number*, with a leading ``-`` when negative."""
        return cls._split(_digits_of(int(number)))

    @classmethod
    def from_float(cls, number: float) -> NonEmptyString:
        """Shortest text that reads back as the same float (``repr``)."""
        return cls._split(repr(float(number)))

    @classmethod
    def from_nonempty_sequence(cls, chars: NonEmptySequence[str]) -> NonEmptyString:
        """Inverse of :meth:`to_nonempty_sequence`."""
        return cls(chars.head, "".join(require_char(c, "tail element") for c in chars.tail))

    @classmethod
    def _split(cls, text: str) -> NonEmptyString:
        """Re-split a string already known to be non-empty.

        Reaching this with an empty string is a bug in the caller, so it
        fails loudly instead of substituting a placeholder.
        """
        assert text, "attempted to build a NonEmptyString from an empty string"
        return cls(text[0], text[1:])

    # --- Decomposition ---

    def cons(self, char: str) -> NonEmptyString:
        """Prepend *char*; the old head moves into the tail."""
        return NonEmptyString(char, str(self))

    def uncons(self) -> tuple[str, str]:
        return self.head, self.tail

    def to_string(self) -> str:
        return self.head + self.tail

    def __str__(self) -> str:
        return self.head + self.tail

    def __repr__(self) -> str:
        return f"NonEmptyString({str(self)!r})"

    def __len__(self) -> int:
        return 1 + len(self.tail)

    def __iter__(self) -> Iterator[str]:
        yield self.head
        yield from self.tail

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NonEmptyString):
            return NotImplemented
        return str(self) == str(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, NonEmptyString):
            return NotImplemented
        return str(self) < str(other)

    def __hash__(self) -> int:
        return hash(str(self))

    def __contains__(self, needle: object) -> bool:
        return isinstance(needle, str) and needle in str(self)

    def __add__(self, other: object) -> NonEmptyString:
        if isinstance(other, (str, NonEmptyString)):
            return self.append(str(other))
        return NotImplemented

    def __radd__(self, other: object) -> NonEmptyString:
        if isinstance(other, str):
            return self.prepend(other)
        return NotImplemented

    # --- Reversal, append ---

    def reverse(self) -> NonEmptyString:
        if not self.tail:
            return self
        return NonEmptyString(self.tail[-1], self.tail[-2::-1] + self.head)

    def prepend(self, prefix: str) -> NonEmptyString:
        """Put an ordinary string in front. An empty *prefix* is a no-op."""
        if not prefix:
            return self
        return NonEmptyString(prefix[0], prefix[1:] + str(self))

    def append(self, suffix: str) -> NonEmptyString:
        """Put an ordinary string at the end. The head never changes."""
        return NonEmptyString(self.head, self.tail + suffix)

    # --- Substrings and search (plain str results) ---

    def slice(self, start: int | None, end: int | None = None) -> str:
        """Half-open ``[start, end)`` slice; negative indices count from the end."""
        return str(self)[start:end]

    def left(self, count: int) -> str:
        if count <= 0:
            return ""
        return str(self)[:count]

    def right(self, count: int) -> str:
        if count <= 0:
            return ""
        return str(self)[-count:]

    def drop_left(self, count: int) -> str:
        if count <= 0:
            return str(self)
        return str(self)[count:]

    def drop_right(self, count: int) -> str:
        if count <= 0:
            return str(self)
        return str(self)[:-count]

    def contains(self, needle: str) -> bool:
        return needle in str(self)

    def starts_with(self, prefix: str) -> bool:
        return str(self).startswith(prefix)

    def ends_with(self, suffix: str) -> bool:
        return str(self).endswith(suffix)

    def indexes(self, needle: str) -> list[int]:
        """Start offsets of every occurrence of *needle*, overlaps included.

        An empty *needle* has no occurrences.

        Examples:
            >>> NonEmptyString("a", "aaa").indexes("aa")
            [0, 1, 2]
        """
        if not needle:
            return []
        text = str(self)
        found: list[int] = []
        position = text.find(needle)
        while position != -1:
            found.append(position)
            position = text.find(needle, position + 1)
        return found

    indices = indexes

    def split(self, separator: str | None = None) -> list[str]:
        """Split on *separator* (whitespace runs when None).

        An empty separator splits into single characters.
        """
        if separator == "":
            return list(self)
        return str(self).split(separator)

    def words(self) -> list[NonEmptyString]:
        """Whitespace-separated words; every word is itself non-empty."""
        return [self._split(word) for word in str(self).split()]

    # --- Numbers ---

    def to_int(self) -> int | None:
        text = str(self)
        if _INT_PATTERN.fullmatch(text) is None:
            return None
        return _int_from_digits(text)

    def to_float(self) -> float | None:
        text = str(self)
        if _FLOAT_PATTERN.fullmatch(text) is None:
            return None
        return float(text)

    # --- Case, padding, trimming ---

    def to_upper(self) -> NonEmptyString:
        return self.map(simple_upper)

    def to_lower(self) -> NonEmptyString:
        return self.map(simple_lower)

    def pad(self, width: int, char: str) -> NonEmptyString:
        """Center within *width* using *char*.

        When the padding needed is odd, the extra character goes on the
        right. Values already at least *width* long are returned unchanged.

        Examples:
            >>> str(NonEmptyString("a", "b").pad(5, "*"))
            '*ab**'
        """
        require_char(char)
        missing = width - len(self)
        if missing <= 0:
            return self
        before = missing // 2
        after = missing - before
        if before == 0:
            return NonEmptyString(self.head, self.tail + char * after)
        return NonEmptyString(char, char * (before - 1) + str(self) + char * after)

    def pad_left(self, width: int, char: str) -> NonEmptyString:
        require_char(char)
        missing = width - len(self)
        if missing <= 0:
            return self
        return NonEmptyString(char, char * (missing - 1) + str(self))

    def pad_right(self, width: int, char: str) -> NonEmptyString:
        require_char(char)
        missing = width - len(self)
        if missing <= 0:
            return self
        return NonEmptyString(self.head, self.tail + char * missing)

    def trim(self) -> str:
        """Strip surrounding whitespace. The result may be empty."""
        return str(self).strip()

    def trim_left(self) -> str:
        return str(self).lstrip()

    def trim_right(self) -> str:
        return str(self).rstrip()

    # --- Higher-order ---

    def map(self, func: Callable[[str], str]) -> NonEmptyString:
        """Apply *func* to every character; it must return one character each."""
        return NonEmptyString(
            require_char(func(self.head), "mapped char"),
            "".join(require_char(func(c), "mapped char") for c in self.tail),
        )

    def filter(self, predicate: Callable[[str], bool]) -> str:
        return "".join(c for c in self if predicate(c))

    def foldl(self, func: Callable[[B, str], B], seed: B) -> B:
        """Fold from the left, calling ``func(acc, char)``."""
        return functools.reduce(func, self, seed)

    def foldr(self, func: Callable[[str, B], B], seed: B) -> B:
        """Fold from the right, calling ``func(char, acc)``."""
        acc = seed
        for char in reversed(str(self)):
            acc = func(char, acc)
        return acc

    def any(self, predicate: Callable[[str], bool]) -> bool:
        return any(predicate(c) for c in self)

    def all(self, predicate: Callable[[str], bool]) -> bool:
        return all(predicate(c) for c in self)

    # --- Sequence conversion ---

    def to_nonempty_sequence(self) -> NonEmptySequence[str]:
        return NonEmptySequence(self.head, tuple(self.tail))

    # --- Pydantic integration ---

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        """Validate from ``str`` or NonEmptyString; serialize as plain ``str``."""
        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    @classmethod
    def _coerce(cls, value: Any) -> NonEmptyString:
        if isinstance(value, NonEmptyString):
            return value
        if not isinstance(value, str):
            msg = f"expected str, got {type(value).__name__}"
            raise ValueError(msg)
        result = cls.from_string(value)
        if result is None:
            msg = "string must contain at least one character"
            raise ValueError(msg)
        return result


def concat(values: NonEmptySequence[NonEmptyString]) -> NonEmptyString:
    """Concatenate all values in order, seeded with the first.

    Examples:
        >>> parts = NonEmptySequence.of(NonEmptyString("E", "xpected"), NonEmptyString(" ", "test"))
        >>> str(concat(parts))
        'Expected test'
    """
    return values.reduce(lambda acc, value: acc.append(str(value)))


def join(separator: str, values: NonEmptySequence[NonEmptyString]) -> NonEmptyString:
    """Concatenate all values in order with *separator* between neighbours."""
    return values.reduce(lambda acc, value: acc.append(separator + str(value)))
