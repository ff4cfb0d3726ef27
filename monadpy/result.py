"""Eager try.

``Try.of`` runs a computation once, right away, and keeps whichever came out
of it: the value as ``Success`` or the raised error as ``Failure``. Every
combinator returns a new instance; the receiver is never changed.

Only ``CAPTURED`` error categories are turned into data. Anything else
(``KeyboardInterrupt``, ``SystemExit``, ``GeneratorExit``,
``asyncio.CancelledError``) propagates out of ``capture`` untouched.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, Tuple, Type, TypeVar

from .either import Either, Left, Right
from .errors import FailureAccessError, UnsupportedOperationError, require, require_instance
from .logger import get_logger
from .option import Option, NONE, from_nullable

T = TypeVar("T")
U = TypeVar("U")
X = TypeVar("X", bound=BaseException)

CAPTURED: Tuple[Type[BaseException], ...] = (Exception,)


def capture(thunk: Callable[[], T]) -> "Try[T]":
    try:
        return Success(thunk())
    except CAPTURED as ex:
        get_logger().debug("captured failure", error=type(ex).__name__)
        return Failure(ex)


def _chain(cause: Any) -> Optional[BaseException]:
    return cause if isinstance(cause, BaseException) else None


def _unwrap(outcome: "Try[Try[U]]") -> "Try[U]":
    if outcome.is_failure():
        return outcome  # type: ignore[return-value]
    return require_instance(outcome.get(), Try, "function result")


class Try(Generic[T]):

    @staticmethod
    def of(supplier: Callable[[], T]) -> "Try[T]":
        require(supplier, "supplier")
        return capture(supplier)

    @staticmethod
    def of_runnable(procedure: Callable[[], Any]) -> "Try[None]":
        require(procedure, "procedure")

        def run() -> None:
            procedure()

        return capture(run)

    @staticmethod
    def success(value: T) -> "Try[T]":
        return Success(value)

    @staticmethod
    def failure(error: Optional[BaseException]) -> "Try[T]":
        return Failure(error)

    def is_success(self) -> bool: raise NotImplementedError
    def is_failure(self) -> bool: return not self.is_success()

    def get(self) -> T:
        if self.is_success():
            return self.value  # type: ignore[attr-defined]
        raise FailureAccessError(self.cause) from _chain(self.cause)  # type: ignore[attr-defined]

    def get_cause(self) -> Optional[BaseException]:
        if self.is_failure():
            return self.cause  # type: ignore[attr-defined]
        raise UnsupportedOperationError("get_cause() on Success")

    def map(self, f: Callable[[T], U]) -> "Try[U]":
        require(f, "function")
        if self.is_success():
            return capture(lambda: f(self.get()))
        return self  # type: ignore[return-value]

    def flat_map(self, f: Callable[[T], "Try[U]"]) -> "Try[U]":
        require(f, "function")
        if self.is_success():
            return _unwrap(capture(lambda: f(self.get())))
        return self  # type: ignore[return-value]

    def or_else(self, other: T) -> T:
        return self.get() if self.is_success() else other

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        require(supplier, "supplier")
        return self.get() if self.is_success() else supplier()

    def or_else_raise(self, mapper: Callable[[Optional[BaseException]], X]) -> T:
        require(mapper, "mapper")
        if self.is_failure():
            cause = self.get_cause()
            raise mapper(cause) from _chain(cause)
        return self.get()

    def if_success(self, consumer: Callable[[T], object]) -> "Try[T]":
        require(consumer, "consumer")
        if self.is_success():
            consumer(self.get())
        return self

    def if_failure(self, consumer: Callable[[Optional[BaseException]], object]) -> "Try[T]":
        require(consumer, "consumer")
        if self.is_failure():
            consumer(self.get_cause())
        return self

    def recover(self, f: Callable[[Optional[BaseException]], T]) -> "Try[T]":
        return self.recover_when(lambda _: True, f)

    def recover_when(self, predicate: Callable[[Optional[BaseException]], bool], f: Callable[[Optional[BaseException]], T]) -> "Try[T]":
        require(predicate, "predicate")
        require(f, "function")
        if self.is_success() or not predicate(self.get_cause()):
            return self
        return capture(lambda: f(self.get_cause()))

    def exchange(self, f: Callable[[Optional[BaseException]], "Try[T]"]) -> "Try[T]":
        return self.exchange_when(lambda _: True, f)

    def exchange_when(self, predicate: Callable[[Optional[BaseException]], bool], f: Callable[[Optional[BaseException]], "Try[T]"]) -> "Try[T]":
        require(predicate, "predicate")
        require(f, "function")
        if self.is_success() or not predicate(self.get_cause()):
            return self
        return _unwrap(capture(lambda: f(self.get_cause())))

    def to_either(self) -> Either[Optional[BaseException], T]:
        if self.is_success():
            return Right(self.get())
        return Left(self.get_cause())

    def to_optional(self) -> Option[T]:
        if self.is_success():
            return from_nullable(self.get())
        return NONE  # type: ignore[return-value]


@dataclass(frozen=True)
class Success(Try[T]):
    value: T
    def is_success(self) -> bool: return True


@dataclass(frozen=True)
class Failure(Try[T]):
    cause: Optional[BaseException]
    def is_success(self) -> bool: return False


def success(value: T) -> Try[T]:
    return Success(value)


def failure(error: Optional[BaseException]) -> Try[T]:
    return Failure(error)


def from_either(e: Either[Any, T]) -> Try[T]:
    require_instance(e, Either, "either")
    if e.is_left():
        return Failure(e.get_left())
    return Success(e.get())
