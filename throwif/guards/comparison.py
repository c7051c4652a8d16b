"""Guards for relational comparisons

Each guard is named after the condition it guards *against*. For example,
``is_less_than(argument, comparison)`` raises exactly when
``argument < comparison``. Equality at the boundary is only rejected by the
``..._or_equal_to`` variants.

These guards work with any values that support the respective comparison
operator, such as ``int``, ``float``, ``Decimal``, ``Fraction``, ``str``,
or ``datetime``. Incomparable values raise ``TypeError``, as the comparison
operators do.
"""

from __future__ import annotations

from numbers import Number
import operator
from typing import (
    Any,
    Callable,
    TypeVar,
)

from throwif.builder import (
    GuardBuilder,
    guard,
)
from throwif.exceptions import ArgumentError
from throwif.messages import finalize_message

from .generic import (
    is_equal_to,
    is_null,
)

T = TypeVar('T')


@guard
def is_zero(
    builder: GuardBuilder,
    argument: T,
    message: str | None = None,
    argument_name: str | None = None,
    *,
    tolerance: float | None = None,
) -> T:
    """Guards against an argument being equal to zero

    This is :func:`~throwif.guards.generic.is_equal_to` with a zero of the
    argument's own type as the comparison value. For floating point numbers
    the ``tolerance`` rules of that guard apply.
    """
    is_null(builder, argument, message, argument_name)
    if not isinstance(argument, Number):
        raise TypeError(
            f'Cannot compare {type(argument).__name__!r} to zero')
    zero = type(argument)(0)
    return is_equal_to(
        builder, argument, zero, message, argument_name,
        tolerance=tolerance,
    )


@guard
def is_less_than(
    builder: GuardBuilder,
    argument: T,
    comparison: T,
    message: str | None = None,
    argument_name: str | None = None,
) -> T:
    """Guards against an argument being less than ``comparison``"""
    return _check_relation(
        builder, argument, comparison, operator.lt, 'less than',
        message, argument_name,
    )


@guard
def is_less_than_or_equal_to(
    builder: GuardBuilder,
    argument: T,
    comparison: T,
    message: str | None = None,
    argument_name: str | None = None,
) -> T:
    """Guards against an argument being less than or equal to ``comparison``
    """
    return _check_relation(
        builder, argument, comparison, operator.le, 'less than or equal to',
        message, argument_name,
    )


@guard
def is_greater_than(
    builder: GuardBuilder,
    argument: T,
    comparison: T,
    message: str | None = None,
    argument_name: str | None = None,
) -> T:
    """Guards against an argument being greater than ``comparison``"""
    return _check_relation(
        builder, argument, comparison, operator.gt, 'greater than',
        message, argument_name,
    )


@guard
def is_greater_than_or_equal_to(
    builder: GuardBuilder,
    argument: T,
    comparison: T,
    message: str | None = None,
    argument_name: str | None = None,
) -> T:
    """Guards against an argument being greater than or equal to
    ``comparison``
    """
    return _check_relation(
        builder, argument, comparison, operator.ge,
        'greater than or equal to',
        message, argument_name,
    )


def _check_relation(
    builder: GuardBuilder,
    argument: T,
    comparison: T,
    forbidden: Callable[[Any, Any], bool],
    relation: str,
    message: str | None,
    argument_name: str | None,
) -> T:
    is_null(builder, argument, message, argument_name)
    is_null(builder, comparison, argument_name='comparison')
    if not forbidden(argument, comparison):
        return argument
    raise ArgumentError(
        finalize_message(
            message,
            f"Value was '{argument}', but must not be {relation} "
            f"'{comparison}'.",
        ),
        argument_name,
        argument,
    )
