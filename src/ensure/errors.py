# src/ensure/errors.py
"""Contract violation exceptions.

Every check in this package fails by raising a subclass of
ContractViolationError. The subclasses also inherit from the builtin
exception a Python caller would expect (ValueError for bad arguments,
RuntimeError for inconsistent state), so existing ``except ValueError``
handlers keep working.

Violations are programming errors. Nothing in this package catches them.
"""

from __future__ import annotations

from typing import Any


class ContractViolationError(Exception):
    """Base class for all precondition failures.

    Attributes:
        parameter: Name of the offending parameter, if one applies
        context: Structured diagnostic data (template, counts, type name...)
    """

    def __init__(
        self,
        message: str,
        *,
        parameter: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.parameter = parameter
        self.context: dict[str, Any] = dict(context) if context else {}

    def to_error_reason(self) -> dict[str, Any]:
        """Convert to a plain dict suitable for structured logging or reporting."""
        reason: dict[str, Any] = {
            "reason": "contract_violation",
            "violation_type": type(self).__name__,
            "message": self.message,
        }
        if self.parameter is not None:
            reason["parameter"] = self.parameter
        reason.update(self.context)
        return reason


class NullArgumentError(ContractViolationError, ValueError):
    """Raised when a required argument is None.

    Attributes:
        parameter: Name of the argument that was None
        caller: Name of the operation that received it (optional)
    """

    def __init__(self, parameter: str, message: str | None = None, *, caller: str | None = None) -> None:
        if message is None:
            message = f"Value cannot be null. Parameter name: {parameter}"
        super().__init__(message, parameter=parameter)
        self.caller = caller
        if caller is not None:
            self.context["caller"] = caller


class EmptyArgumentError(ContractViolationError, ValueError):
    """Raised when a required string or iterable is present but empty."""

    def __init__(self, parameter: str, message: str | None = None) -> None:
        if message is None:
            message = f"Value cannot be null or empty. Parameter name: {parameter}"
        super().__init__(message, parameter=parameter)


class InvalidStateError(ContractViolationError, RuntimeError):
    """Raised when arguments are individually valid but mutually inconsistent.

    Covers format-template / argument mismatches and duplicate singleton
    registration. ``context`` holds the offending template or type name.
    """

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message, context=context)
