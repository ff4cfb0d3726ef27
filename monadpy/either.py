"""Right biased either.

``Left`` and ``Right`` are frozen dataclasses, so equality and hashing are
structural and a ``Left`` never equals a ``Right``. Combinators run caller
functions inline and let their exceptions propagate; use ``Try`` to capture.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from .errors import NoSuchElementError, require, require_instance
from .option import Option, NONE, from_nullable

L = TypeVar("L")
R = TypeVar("R")
T = TypeVar("T")


class Either(Generic[L, R]):

    @staticmethod
    def left(value: L) -> "Either[L, R]":
        return Left(value)

    @staticmethod
    def right(value: R) -> "Either[L, R]":
        return Right(value)

    def is_left(self) -> bool: raise NotImplementedError
    def is_right(self) -> bool: return not self.is_left()

    def get_left(self) -> L:
        if self.is_left():
            return self.value  # type: ignore[attr-defined]
        raise NoSuchElementError("get_left() on Right")

    def get(self) -> R:
        if self.is_right():
            return self.value  # type: ignore[attr-defined]
        raise NoSuchElementError("get() on Left")

    def or_else(self, other: R) -> R:
        return self.get() if self.is_right() else other

    def or_else_get(self, supplier: Callable[[], R]) -> R:
        require(supplier, "supplier")
        return self.get() if self.is_right() else supplier()

    def or_else_map(self, f: Callable[[L], R]) -> R:
        require(f, "function")
        return self.get() if self.is_right() else f(self.get_left())

    def or_else_raise(self, supplier: Callable[[], BaseException]) -> R:
        require(supplier, "supplier")
        if self.is_left():
            raise supplier()
        return self.get()

    def fold(self, on_left: Callable[[L], T], on_right: Callable[[R], T]) -> T:
        require(on_left, "on_left")
        require(on_right, "on_right")
        if self.is_right():
            return on_right(self.get())
        return on_left(self.get_left())

    def swap(self) -> "Either[R, L]":
        if self.is_right():
            return Left(self.get())
        return Right(self.get_left())

    def map(self, f: Callable[[R], T]) -> "Either[L, T]":
        require(f, "function")
        if self.is_right():
            return Right(f(self.get()))
        return self  # type: ignore[return-value]

    def flat_map(self, f: Callable[[R], "Either[L, T]"]) -> "Either[L, T]":
        require(f, "function")
        if self.is_right():
            return require_instance(f(self.get()), Either, "function result")
        return self  # type: ignore[return-value]

    def map_left(self, f: Callable[[L], T]) -> "Either[T, R]":
        require(f, "function")
        if self.is_left():
            return Left(f(self.get_left()))
        return self  # type: ignore[return-value]

    def flat_map_left(self, f: Callable[[L], "Either[T, R]"]) -> "Either[T, R]":
        require(f, "function")
        if self.is_left():
            return require_instance(f(self.get_left()), Either, "function result")
        return self  # type: ignore[return-value]

    def if_right(self, consumer: Callable[[R], object]) -> "Either[L, R]":
        require(consumer, "consumer")
        if self.is_right():
            consumer(self.get())
        return self

    def if_left(self, consumer: Callable[[L], object]) -> "Either[L, R]":
        require(consumer, "consumer")
        if self.is_left():
            consumer(self.get_left())
        return self

    def to_optional(self) -> Option[R]:
        if self.is_right():
            return from_nullable(self.get())
        return NONE  # type: ignore[return-value]


@dataclass(frozen=True)
class Left(Either[L, R]):
    value: L
    def is_left(self) -> bool: return True


@dataclass(frozen=True)
class Right(Either[L, R]):
    value: R
    def is_left(self) -> bool: return False


def left(value: L) -> Either[L, R]:
    return Left(value)


def right(value: R) -> Either[L, R]:
    return Right(value)
