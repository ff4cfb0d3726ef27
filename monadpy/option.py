from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from .errors import NoSuchElementError, require, require_instance

T = TypeVar("T")
U = TypeVar("U")


class Option(Generic[T]):
    def is_some(self) -> bool: raise NotImplementedError
    def is_none(self) -> bool: return not self.is_some()

    def get(self) -> T:
        if self.is_some():
            return self.value  # type: ignore[attr-defined]
        raise NoSuchElementError()

    def map(self, f: Callable[[T], U]) -> "Option[U]":
        require(f, "function")
        if self.is_some():
            return from_nullable(f(self.value))  # type: ignore[attr-defined]
        return NONE

    def flat_map(self, f: Callable[[T], "Option[U]"]) -> "Option[U]":
        require(f, "function")
        if self.is_some():
            return require_instance(f(self.value), Option, "function result")  # type: ignore[attr-defined]
        return NONE

    def filter(self, predicate: Callable[[T], bool]) -> "Option[T]":
        require(predicate, "predicate")
        if self.is_some() and predicate(self.value):  # type: ignore[attr-defined]
            return self
        return NONE  # type: ignore[return-value]

    def if_some(self, consumer: Callable[[T], object]) -> "Option[T]":
        require(consumer, "consumer")
        if self.is_some():
            consumer(self.value)  # type: ignore[attr-defined]
        return self

    def get_or_else(self, default: U) -> T | U:
        return self.value if self.is_some() else default  # type: ignore[attr-defined]


@dataclass(frozen=True)
class Some(Option[T]):
    value: T
    def is_some(self) -> bool: return True


class _None(Option[None]):
    __slots__ = ()
    def __repr__(self) -> str: return "NONE"
    def is_some(self) -> bool: return False


NONE: Option[None] = _None()


def from_nullable(v: Optional[T]) -> Option[T]:
    return Some(v) if v is not None else NONE  # type: ignore[return-value]
