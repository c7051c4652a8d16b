"""Guards applicable to values of any type"""

from __future__ import annotations

from decimal import Decimal
from numbers import (
    Rational,
    Real,
)
from typing import (
    Any,
    Callable,
    TypeVar,
    get_origin,
)

from throwif.builder import (
    GuardBuilder,
    guard,
)
from throwif.config import (
    get_float_tolerance,
    validate_tolerance,
)
from throwif.exceptions import (
    ArgumentError,
    ArgumentNullError,
)
from throwif.messages import (
    describe,
    finalize_message,
)

T = TypeVar('T')


@guard
def is_null(
    builder: GuardBuilder,
    argument: T | None,
    message: str | None = None,
    argument_name: str | None = None,
) -> T:
    """Guards against ``None`` arguments

    Raises
    ------
    ArgumentNullError
      When ``argument`` is ``None``.
    """
    if argument is not None:
        return argument
    raise ArgumentNullError(
        finalize_message(message, ArgumentNullError.default_message),
        argument_name,
    )


@guard
def is_equal_to(
    builder: GuardBuilder,
    argument: T,
    comparison: T,
    message: str | None = None,
    argument_name: str | None = None,
    *,
    tolerance: float | None = None,
) -> T:
    """Guards against an argument being equal to ``comparison``

    Floating point numbers are considered equal when they differ by no more
    than ``tolerance``. If no ``tolerance`` is given, the configured
    default is used (see :func:`throwif.config.get_float_tolerance`).
    All other types are compared for exact equality.

    The tolerance band is inclusive, but it is applied to the difference
    as computed in floating point arithmetic. That difference carries a
    rounding error, hence a comparison value of exactly ``argument +
    tolerance`` may end up just outside the band. For example,
    ``(1.0 + 1e-05) - 1.0`` is slightly larger than ``1e-05``. Only
    tolerances and values with an exact binary representation (such as
    ``0.5``) give a boundary that is reliably inclusive.

    Raises
    ------
    ArgumentNullError
      When ``argument`` or ``comparison`` is ``None``. A custom ``message``
      only applies to the check of ``argument``.
    ArgumentError
      When ``argument`` is equal to ``comparison``.
    """
    is_null(builder, argument, message, argument_name)
    is_null(builder, comparison, argument_name='comparison')

    if _is_inexact(argument) or _is_inexact(comparison):
        tolerance = _get_tolerance(tolerance)
        if not _within_tolerance(argument, comparison, tolerance):
            return argument
        default = (
            f"Value was '{argument}', but must not be equal to "
            f"'{comparison}' within tolerance of '{tolerance}'."
        )
    else:
        if argument != comparison:
            return argument
        default = (
            f"Value was '{argument}', but must not be equal to "
            f"'{describe(comparison)}'."
        )
    raise ArgumentError(
        finalize_message(message, default),
        argument_name,
        argument,
    )


@guard
def is_not_equal_to(
    builder: GuardBuilder,
    argument: T,
    comparison: T,
    message: str | None = None,
    argument_name: str | None = None,
    *,
    tolerance: float | None = None,
) -> T:
    """Guards against an argument being unequal to ``comparison``

    This is the exact complement of :func:`is_equal_to`, using the same
    rules for floating point numbers.
    """
    is_null(builder, argument, message, argument_name)
    is_null(builder, comparison, argument_name='comparison')

    if _is_inexact(argument) or _is_inexact(comparison):
        tolerance = _get_tolerance(tolerance)
        if _within_tolerance(argument, comparison, tolerance):
            return argument
        default = (
            f"Value was '{argument}', but must be equal to "
            f"'{comparison}' within tolerance of '{tolerance}'."
        )
    else:
        if argument == comparison:
            return argument
        default = (
            f"Value was '{describe(argument)}', but must be equal to "
            f"'{describe(comparison)}'."
        )
    raise ArgumentError(
        finalize_message(message, default),
        argument_name,
        argument,
    )


@guard
def is_against_expression(
    builder: GuardBuilder,
    argument: T,
    expression: Callable[[T], Any],
    message: str | None = None,
    argument_name: str | None = None,
) -> T:
    """Guards against an argument for which ``expression`` is not true"""
    is_null(builder, argument, argument_name=argument_name)
    if expression(argument):
        return argument
    raise ArgumentError(
        finalize_message(
            message,
            f"Value was '{describe(argument)}', but did not match your "
            "expression.",
        ),
        argument_name,
        argument,
    )


@guard
def is_not_generic(
    builder: GuardBuilder,
    argument: Any,
    message: str | None = None,
    argument_name: str | None = None,
) -> Any:
    """Guards against a type that is not generic

    Generic types are parameterized aliases, such as ``list[int]``, and
    classes with open type parameters, such as a ``typing.Generic[T]``
    subclass.
    """
    is_null(builder, argument, message, argument_name)
    if get_origin(argument) is not None \
            or getattr(argument, '__parameters__', None):
        return argument
    name = getattr(argument, '__name__', None) or repr(argument)
    raise ArgumentError(
        finalize_message(
            message,
            f"Value was '{name}', but must be a generic type.",
        ),
        argument_name,
        argument,
    )


def _is_inexact(value: Any) -> bool:
    # floating point numbers, but not int, bool, Fraction, or Decimal
    return isinstance(value, Real) \
        and not isinstance(value, (Rational, Decimal))


def _within_tolerance(argument, comparison, tolerance: float) -> bool:
    # exact match first, infinities have no usable difference
    return argument == comparison \
        or abs(argument - comparison) <= tolerance


def _get_tolerance(tolerance: float | None) -> float:
    if tolerance is None:
        return get_float_tolerance()
    return validate_tolerance(tolerance)
