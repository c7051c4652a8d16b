"""Fluent argument guards

Guards validate a function argument, and either return it unchanged, or
raise a descriptive error that names the offending parameter::

    >>> from throwif import ThrowIf
    >>> ThrowIf.argument.is_less_than(10, 5, argument_name='size')
    10

Guards can be chained by passing the return value of one guard to the
next. All guards are attached to a single entry point,
:attr:`ThrowIf.argument`. Additional guards can be attached with the
:func:`guard` decorator.

On violation, guards raise :class:`ArgumentError`, or
:class:`ArgumentNullError` when a required value is ``None``.

.. currentmodule:: throwif
.. autosummary::
   :toctree: generated

    ThrowIf
    GuardBuilder
    guard
    registered_guards
    unregister_guard

    ArgumentError
    ArgumentNullError

    add_period
    describe
    finalize_message
"""

from __future__ import annotations

__docformat__ = 'restructuredtext'

from .builder import (
    GuardBuilder,
    ThrowIf,
    guard,
    registered_guards,
    unregister_guard,
)
from .exceptions import (
    # this is the key type, almost all consuming code will want to
    # have this for `except` clauses
    ArgumentError,
    ArgumentNullError,
)
from .messages import (
    add_period,
    describe,
    finalize_message,
)
# attach all guards that ship with this package
from . import guards

__version__ = '0.1.0'
