from __future__ import annotations
from typing import Any, Optional, Type, TypeVar

T = TypeVar("T")


class MonadError(Exception):
    """Base class for errors raised by monadpy itself."""


class NoSuchElementError(MonadError, LookupError):
    def __init__(self, message: str = "no value present"):
        super().__init__(message)


class UnsupportedOperationError(MonadError, TypeError):
    def __init__(self, message: str = "operation not supported"):
        super().__init__(message)


class FailureAccessError(MonadError, RuntimeError):
    """Raised by ``Failure.get()``; ``cause`` is the captured error."""

    def __init__(self, cause: Optional[BaseException]):
        super().__init__(f"get() on Failure({cause!r})")
        self.cause = cause


class InvalidArgumentError(MonadError, ValueError):
    pass


def require(value: Optional[T], name: str) -> T:
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None")
    return value


def require_instance(value: Any, kind: Type[T], name: str) -> T:
    # None gets its own message so contract failures read the same everywhere
    require(value, name)
    if not isinstance(value, kind):
        raise InvalidArgumentError(f"{name} must be {kind.__name__}, got {type(value).__name__}")
    return value
