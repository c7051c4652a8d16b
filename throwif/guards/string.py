"""Guards for string arguments

Pattern matching uses the ``regex`` engine, which is compatible with the
standard library's ``re`` syntax and flags, and additionally supports
bounding the time spent on a match. A pattern matches if it is found
anywhere in the argument (``search()`` semantics).
"""

from __future__ import annotations

from datetime import timedelta

import regex

from throwif.builder import (
    GuardBuilder,
    guard,
)
from throwif.exceptions import ArgumentError
from throwif.messages import finalize_message

from .char import _is_white_space
from .generic import is_null


@guard
def is_null_or_empty(
    builder: GuardBuilder,
    argument: str | None,
    message: str | None = None,
    argument_name: str | None = None,
) -> str:
    """Guards against ``None`` or empty string arguments

    Unlike most guards, ``None`` is reported with an ``ArgumentError``
    rather than an ``ArgumentNullError``.
    """
    if argument:
        return argument
    raise ArgumentError(
        finalize_message(message, 'Cannot be null or empty.'),
        argument_name,
        argument,
    )


@guard
def is_null_or_white_space(
    builder: GuardBuilder,
    argument: str | None,
    message: str | None = None,
    argument_name: str | None = None,
) -> str:
    """Guards against ``None``, empty, or white space-only string arguments

    White space is determined per character, using the same definition as
    :func:`~throwif.guards.char.is_white_space`.
    """
    if argument and not all(_is_white_space(c) for c in argument):
        return argument
    raise ArgumentError(
        finalize_message(message, 'Cannot be null or white space.'),
        argument_name,
        argument,
    )


@guard
def is_regex_match(
    builder: GuardBuilder,
    argument: str,
    pattern: str | regex.Pattern,
    flags: int | None = None,
    timeout: float | timedelta | None = None,
    message: str | None = None,
    argument_name: str | None = None,
) -> str:
    """Guards against arguments matching a regular expression

    Parameters
    ----------
    pattern:
      Regular expression, as a string or a pattern compiled with ``regex``.
    flags: int, optional
      Flags for the regular expression engine, such as
      ``regex.IGNORECASE``. The values of the corresponding ``re`` flags
      are identical. Must not be given for compiled patterns.
    timeout: float or timedelta, optional
      Maximum time to spend on matching, in seconds. If exceeded,
      ``TimeoutError`` is raised.

    Raises
    ------
    ArgumentError
      When ``argument`` matches ``pattern``.
    TimeoutError
      When matching takes longer than ``timeout``.
    """
    is_null(builder, argument, message, argument_name)
    if not _search(argument, pattern, flags, timeout):
        return argument
    raise ArgumentError(
        finalize_message(
            message,
            f"Value was '{argument}', but cannot match pattern "
            f"'{_pattern_str(pattern)}'.",
        ),
        argument_name,
        argument,
    )


@guard
def is_not_regex_match(
    builder: GuardBuilder,
    argument: str,
    pattern: str | regex.Pattern,
    flags: int | None = None,
    timeout: float | timedelta | None = None,
    message: str | None = None,
    argument_name: str | None = None,
) -> str:
    """Guards against arguments not matching a regular expression

    Parameters are identical to those of :func:`is_regex_match`.
    """
    is_null(builder, argument, message, argument_name)
    if _search(argument, pattern, flags, timeout):
        return argument
    raise ArgumentError(
        finalize_message(
            message,
            f"Value was '{argument}', but must match pattern "
            f"'{_pattern_str(pattern)}'.",
        ),
        argument_name,
        argument,
    )


def _search(
    argument: str,
    pattern: str | regex.Pattern,
    flags: int | None,
    timeout: float | timedelta | None,
) -> bool:
    kwargs = {}
    if flags is not None:
        kwargs['flags'] = int(flags)
    if timeout is not None:
        kwargs['timeout'] = timeout.total_seconds() \
            if isinstance(timeout, timedelta) else float(timeout)
    return regex.search(pattern, argument, **kwargs) is not None


def _pattern_str(pattern: str | regex.Pattern) -> str:
    return getattr(pattern, 'pattern', pattern)
