"""Configuration query and manipulation

This module provides the process-wide configuration ``manager`` (a
``datasalad.settings.Settings`` instance). Its sources are, in order of
precedence:

``overrides``
  Items set programmatically, e.g. via :func:`set_float_tolerance`, or
  temporarily via :func:`overrides`.
``environment``
  Items declared via ``THROWIF_*`` environment variables.
``defaults``
  Implementation defaults.

The only item known at present is ``throwif.float.tolerance``, the default
tolerance used when comparing floating point numbers for equality, and no
explicit tolerance is given.

The configuration is meant to be set up once, at process startup. It is
not protected against concurrent modification, while guards are reading it
from other threads.
"""

from __future__ import annotations

__all__ = [
    'DEFAULT_FLOAT_TOLERANCE',
    'Environment',
    'FLOAT_TOLERANCE_KEY',
    'build_manager',
    'get_float_tolerance',
    'manager',
    'overrides',
    'reset_float_tolerance',
    'set_float_tolerance',
    'validate_tolerance',
]

from contextlib import contextmanager
import logging
import math
from typing import (
    Any,
    Generator,
)

from datasalad.settings import (
    InMemory,
    Setting,
    Settings,
    UnsetValue,
)

from throwif.builder import ThrowIf
from throwif.exceptions import ArgumentError

from .env import Environment

lgr = logging.getLogger('throwif.config')

FLOAT_TOLERANCE_KEY = 'throwif.float.tolerance'
DEFAULT_FLOAT_TOLERANCE = 0.00001


def build_manager() -> Settings:
    """Create a new configuration manager with all standard sources"""
    defaults = InMemory()
    defaults[FLOAT_TOLERANCE_KEY] = Setting(DEFAULT_FLOAT_TOLERANCE)
    return Settings({
        # order reflects precedence rule, first source with a
        # key takes precedence
        'overrides': InMemory(),
        'environment': Environment(),
        'defaults': defaults,
    })


manager = build_manager()


def validate_tolerance(value: Any, argument_name: str = 'tolerance') -> float:
    """Convert a tolerance value to ``float`` and check its validity

    A tolerance must be a finite, non-negative number.
    """
    ThrowIf.argument.is_null(value, argument_name=argument_name)
    try:
        tolerance = float(value)
    except (TypeError, ValueError) as e:
        raise ArgumentError(
            f"Value was '{value}', but must be a number.",
            argument_name,
            value,
        ) from e
    ThrowIf.argument.is_false(
        math.isfinite(tolerance),
        f"Value was '{value}', but must be a finite number",
        argument_name,
    )
    ThrowIf.argument.is_less_than(tolerance, 0.0, None, argument_name)
    return tolerance


def get_float_tolerance(settings: Settings | None = None) -> float:
    """Get the effective default tolerance for float comparisons

    An invalid configuration value is reported with a warning, and the
    implementation default is returned instead.
    """
    settings = manager if settings is None else settings
    value = settings[FLOAT_TOLERANCE_KEY].value
    try:
        return validate_tolerance(value, FLOAT_TOLERANCE_KEY)
    except ArgumentError as e:
        lgr.warning(
            'Ignoring invalid configuration, using %s=%s: %s',
            FLOAT_TOLERANCE_KEY, DEFAULT_FLOAT_TOLERANCE, e,
        )
        return DEFAULT_FLOAT_TOLERANCE


def set_float_tolerance(
    value: float,
    settings: Settings | None = None,
) -> float:
    """Set the default tolerance for float comparisons for this process

    The value is validated before it is stored, and returned as a
    ``float``.
    """
    settings = manager if settings is None else settings
    tolerance = validate_tolerance(value)
    lgr.debug('Setting %s=%s', FLOAT_TOLERANCE_KEY, tolerance)
    settings.sources['overrides'][FLOAT_TOLERANCE_KEY] = Setting(tolerance)
    return tolerance


def reset_float_tolerance(settings: Settings | None = None) -> None:
    """Remove any tolerance set via :func:`set_float_tolerance`"""
    settings = manager if settings is None else settings
    src = settings.sources['overrides']
    if FLOAT_TOLERANCE_KEY in src:
        lgr.debug('Resetting %s', FLOAT_TOLERANCE_KEY)
        del src[FLOAT_TOLERANCE_KEY]


@contextmanager
def overrides(
    items: dict[str, Any],
    settings: Settings | None = None,
) -> Generator[Settings]:
    """Context manager to temporarily set configuration overrides

    Any previous override of the same item is restored on exit.
    """
    settings = manager if settings is None else settings
    src = settings.sources['overrides']
    restore = {}
    for k, v in items.items():
        restore[k] = src.get(k, Setting(UnsetValue))
        lgr.debug('Temporarily overriding %s=%r', k, v)
        src[k] = Setting(v)
    try:
        yield settings
    finally:
        for k, v in restore.items():
            if v.pristine_value is UnsetValue:
                del src[k]
            else:
                src[k] = v
