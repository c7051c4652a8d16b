"""Guard entry point and the means to extend it with custom guards

Any guard is a plain function with the signature::

    def some_guard(builder, argument, *params, message=None, argument_name=None):
        ...

It returns ``argument`` unchanged when the argument is valid, and raises
:class:`~throwif.exceptions.ArgumentError` (or a subclass) otherwise. The
:func:`guard` decorator attaches such a function to :class:`GuardBuilder`,
which makes it available on the shared entry point::

    >>> from throwif import ThrowIf, ArgumentError, guard
    >>> @guard
    ... def is_100(builder, argument, message=None, argument_name=None):
    ...     if argument != 100:
    ...         return argument
    ...     raise ArgumentError('Cannot be 100.', argument_name, argument)
    >>> ThrowIf.argument.is_100(99, argument_name='count')
    99

No central list of guards needs to be maintained. Guards shipped with this
package are attached in exactly the same way as third-party guards.
"""

from __future__ import annotations

__docformat__ = 'restructuredtext'

__all__ = ['GuardBuilder', 'ThrowIf', 'guard', 'registered_guards',
           'unregister_guard']

import logging
from typing import (
    Callable,
    TypeVar,
)

lgr = logging.getLogger('throwif.builder')

GuardFunc = TypeVar('GuardFunc', bound=Callable)


class GuardBuilder:
    """Capability marker that all guards are attached to

    The class has no state and no behavior of its own. Its only purpose is
    to anchor guard functions, such that they can be called in a fluent
    fashion on the shared instance at :attr:`ThrowIf.argument`.
    """
    __slots__ = ()

    def __repr__(self):
        return f"{self.__class__.__name__}()"


class ThrowIf:
    """Entry point to kick off any guard

    Example::

        ThrowIf.argument.is_null(value, argument_name='value')
    """
    argument: GuardBuilder = GuardBuilder()

    def __init__(self):
        raise TypeError(f'{self.__class__.__name__} cannot be instantiated')


def guard(
    func: GuardFunc | None = None,
    *,
    name: str | None = None,
    replace: bool = False,
):
    """Decorator to attach a guard function to :class:`GuardBuilder`

    Can be used with or without arguments (``@guard`` or
    ``@guard(name='all')``). The decorated function is returned unmodified,
    and remains usable as a free function that takes a builder as its first
    argument.

    Parameters
    ----------
    func:
      Guard function to attach.
    name: str, optional
      Name under which the guard is exposed. Defaults to the function's
      ``__name__``.
    replace: bool, optional
      Whether an existing guard of the same name may be replaced.
      Otherwise attempting to do so raises ``ValueError``.
    """
    def attach(f: GuardFunc) -> GuardFunc:
        attr = name or f.__name__
        if attr.startswith('_'):
            raise ValueError(
                f'Guard name must not start with an underscore: {attr!r}')
        if hasattr(GuardBuilder, attr):
            if not replace:
                raise ValueError(f'A guard named {attr!r} already exists')
            lgr.debug('Replacing guard %r with %r', attr, f)
        else:
            lgr.debug('Attaching guard %r', attr)
        setattr(GuardBuilder, attr, f)
        return f

    if func is None:
        return attach
    return attach(func)


def unregister_guard(name: str) -> None:
    """Detach a previously attached guard

    Raises ``KeyError`` if there is no guard with the given name.
    """
    if name.startswith('_') or name not in vars(GuardBuilder):
        raise KeyError(name)
    lgr.debug('Detaching guard %r', name)
    delattr(GuardBuilder, name)


def registered_guards() -> tuple[str, ...]:
    """Return the names of all guards attached to :class:`GuardBuilder`"""
    return tuple(sorted(
        k for k, v in vars(GuardBuilder).items()
        if not k.startswith('_') and callable(v)
    ))
