# src/ensure/guards.py
"""Argument guard clauses.

Call these at the top of a function to reject None or empty arguments:

    def load(path: str, columns: list[str]) -> Table:
        not_null_or_empty(path, "path")
        not_empty(columns, "columns")
        ...
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sized
from typing import NoReturn

from ensure.errors import ContractViolationError, EmptyArgumentError, NullArgumentError
from ensure.logging import get_logger

__all__ = [
    "does_not_throw",
    "not_empty",
    "not_null",
    "not_null_or_empty",
]

logger = get_logger(__name__)

_EMPTY = object()


def _raise(error: ContractViolationError) -> NoReturn:
    logger.debug("contract_violation", **error.to_error_reason())
    raise error


def not_null(value: object, parameter: str, caller: str | None = None) -> None:
    """Raise NullArgumentError if value is None.

    Args:
        value: Argument to check
        parameter: Name of the argument, used in the error
        caller: Name of the calling operation, used in the error (optional)
    """
    assert parameter, "parameter cannot be null"

    if value is None:
        if caller is None:
            message = f"Expected parameter {parameter} to not be null"
        else:
            message = f"Expected parameter {parameter} in member {caller} to not be null"
        _raise(NullArgumentError(parameter, message, caller=caller))


def not_null_or_empty(value: str | Iterable[object] | None, parameter: str, message: str | None = None) -> None:
    """Raise if a string is None or empty, or if an iterable yields nothing.

    Strings and None take the string path: None raises NullArgumentError and
    "" raises EmptyArgumentError. Any other value is treated as an iterable
    and checked with not_empty().
    """
    assert parameter, "parameter cannot be null"

    if value is None:
        _raise(NullArgumentError(parameter, message))
    if isinstance(value, str):
        if value == "":
            _raise(EmptyArgumentError(parameter, message))
        return
    not_empty(value, parameter, message)


def not_empty(value: Iterable[object], parameter: str, message: str | None = None) -> None:
    """Raise EmptyArgumentError if an iterable has no elements.

    Sized values are checked with len(). Other iterables are probed for a
    first element, which consumes it from a one-shot iterator such as a
    generator.
    """
    assert parameter, "parameter cannot be null"

    if isinstance(value, Sized):
        empty = len(value) == 0
    else:
        empty = next(iter(value), _EMPTY) is _EMPTY

    if empty:
        if message is None:
            message = f"Expected {parameter} to not be empty"
        _raise(EmptyArgumentError(parameter, message))


def does_not_throw(operation: Callable[[], object]) -> bool:
    """Run operation and return True. Exceptions propagate unchanged.

    Lets a test assert on a call that is expected to succeed:

        assert does_not_throw(lambda: format_args("{0}", [1]))
    """
    operation()
    return True
