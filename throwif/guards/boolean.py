"""Guards for boolean arguments"""

from __future__ import annotations

from throwif.builder import (
    GuardBuilder,
    guard,
)
from throwif.exceptions import ArgumentError
from throwif.messages import finalize_message

from .generic import is_null


@guard
def is_true(
    builder: GuardBuilder,
    argument: bool,
    message: str | None = None,
    argument_name: str | None = None,
) -> bool:
    """Guards against an argument being ``True``"""
    is_null(builder, argument, message, argument_name)
    if not argument:
        return argument
    raise ArgumentError(
        finalize_message(message, 'Value cannot be true.'),
        argument_name,
        argument,
    )


@guard
def is_false(
    builder: GuardBuilder,
    argument: bool,
    message: str | None = None,
    argument_name: str | None = None,
) -> bool:
    """Guards against an argument being ``False``"""
    is_null(builder, argument, message, argument_name)
    if argument:
        return argument
    raise ArgumentError(
        finalize_message(message, 'Value cannot be false.'),
        argument_name,
        argument,
    )
