"""ensure: precondition checks that fail fast.

Import patterns:
    from ensure import format_args, not_empty, not_null, not_null_or_empty, singleton

    def render(template: str, args: list[object]) -> str:
        format_args(template, args)
        ...

All failures raise a subclass of ContractViolationError.
"""

from ensure.errors import (
    ContractViolationError,
    EmptyArgumentError,
    InvalidStateError,
    NullArgumentError,
)
from ensure.format import format_args, placeholder_indices
from ensure.guards import does_not_throw, not_empty, not_null, not_null_or_empty
from ensure.singleton import SingletonRegistry, default_registry, singleton

__version__ = "0.1.0"

__all__ = [
    "ContractViolationError",
    "EmptyArgumentError",
    "InvalidStateError",
    "NullArgumentError",
    "SingletonRegistry",
    "default_registry",
    "does_not_throw",
    "format_args",
    "not_empty",
    "not_null",
    "not_null_or_empty",
    "placeholder_indices",
    "singleton",
]
