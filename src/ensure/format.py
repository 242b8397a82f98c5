# src/ensure/format.py
"""Format-template / argument consistency check.

A format template uses positional placeholders ``{0}``, ``{1}``... The
check does not format anything. It only verifies that the template and
the argument list agree before the caller hands both to a formatter:

    from ensure import format_args

    format_args("Expected {0} to be {1}", [name, kind])   # ok
    format_args("Expected {1}", [name])                   # InvalidStateError

Rules:
- The template must be a non-empty string.
- A template without placeholders takes no arguments.
- Distinct placeholder indices must be exactly 0..K-1. Repeats collapse,
  so ``"{0} and {0}"`` needs one argument.
- Exactly K arguments must be supplied.

Only ``{digits}`` is recognised. Format specs such as ``{0:N2}`` are not
placeholders, and an escaped ``{{0}}`` still contains ``{0}``.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import NoReturn

from ensure.errors import EmptyArgumentError, InvalidStateError, NullArgumentError
from ensure.logging import get_logger

__all__ = [
    "format_args",
    "placeholder_indices",
]

logger = get_logger(__name__)

_PLACEHOLDER = re.compile(r"\{([0-9]+)\}")


def placeholder_indices(template: str) -> tuple[int, ...]:
    """Return the distinct placeholder indices in a template, sorted ascending.

    Examples:
        >>> placeholder_indices("{1} {0} {1}")
        (0, 1)

        >>> placeholder_indices("no placeholders")
        ()
    """
    return tuple(sorted({int(match) for match in _PLACEHOLDER.findall(template)}))


def format_args(template: str | None, args: Sequence[object] | None = None) -> None:
    """Verify that a format template and its arguments are consistent.

    Args:
        template: Template with ``{N}`` placeholders
        args: Arguments that will be substituted (None means no arguments)

    Raises:
        NullArgumentError: If template is None
        EmptyArgumentError: If template is an empty string
        InvalidStateError: If placeholder numbering or argument count is wrong
    """
    if template is None:
        raise NullArgumentError("format", "format must be supplied")
    if template == "":
        raise EmptyArgumentError("format", "format must be supplied")

    indices = placeholder_indices(template)
    supplied = 0 if args is None else len(args)

    if not indices:
        if supplied:
            joined = ",".join(str(arg) for arg in args or ())
            _fail(
                f"The format string: {template} contains no arguments but: {joined} was passed as args",
                template=template,
                indices=indices,
                expected=0,
                actual=supplied,
            )
        return

    if indices[0] != 0:
        _fail(f"Indexes must start at zero. String was: {template}", template=template, indices=indices)

    expected = len(indices)
    if indices[-1] != expected - 1:
        _fail(f"Invalid indexes. String was: {template}", template=template, indices=indices)

    if supplied == 0:
        _fail(
            f"The format string: {template} contains {expected} arguments but: no arguments were passed.",
            template=template,
            indices=indices,
            expected=expected,
            actual=0,
        )

    if supplied != expected:
        _fail(
            f"The format string: {template} contains {expected} arguments but: {supplied} arguments were provided",
            template=template,
            indices=indices,
            expected=expected,
            actual=supplied,
        )


def _fail(message: str, **context: object) -> NoReturn:
    error = InvalidStateError(message, **context)
    logger.debug("contract_violation", **error.to_error_reason())
    raise error
