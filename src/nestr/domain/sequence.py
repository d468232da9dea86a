"""NonEmptySequence — an ordered collection with at least one element.

Exposes a distinguished ``head`` and an ordered ``tail``. Folds visit the
head before the tail, in sequence order.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")
B = TypeVar("B")


@dataclass(frozen=True)
class NonEmptySequence(Generic[T]):
    """Immutable non-empty sequence of ``head`` followed by ``tail``."""

    head: T
    tail: tuple[T, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.tail, tuple):
            object.__setattr__(self, "tail", tuple(self.tail))

    @classmethod
    def of(cls, first: T, *rest: T) -> NonEmptySequence[T]:
        """Build a sequence from one or more positional items."""
        return cls(first, rest)

    @classmethod
    def from_iterable(cls, items: Iterable[T]) -> NonEmptySequence[T] | None:
        """Build a sequence from *items*, or return None if there are none."""
        iterator = iter(items)
        for first in iterator:
            return cls(first, tuple(iterator))
        return None

    def __iter__(self) -> Iterator[T]:
        yield self.head
        yield from self.tail

    def __len__(self) -> int:
        return 1 + len(self.tail)

    def to_list(self) -> list[T]:
        return [self.head, *self.tail]

    def foldl(self, func: Callable[[B, T], B], seed: B) -> B:
        """Left fold over every element, head first."""
        acc = seed
        for item in self:
            acc = func(acc, item)
        return acc

    def reduce(self, func: Callable[[T, T], T]) -> T:
        """Left fold over the tail, seeded with the head."""
        acc = self.head
        for item in self.tail:
            acc = func(acc, item)
        return acc

    def map(self, func: Callable[[T], U]) -> NonEmptySequence[U]:
        return NonEmptySequence(func(self.head), tuple(func(item) for item in self.tail))
