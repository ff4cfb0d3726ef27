from .errors import (
    MonadError,
    NoSuchElementError,
    UnsupportedOperationError,
    FailureAccessError,
    InvalidArgumentError,
)
from .logger import ConsoleLogger, get_logger, set_logger
from .option import Option, Some, NONE, from_nullable
from .either import Either, Left, Right, left, right
from .result import (
    Try,
    Success,
    Failure,
    success,
    failure,
    capture,
    from_either as try_from_either,
)
