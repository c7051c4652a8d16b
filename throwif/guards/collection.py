"""Guards for collections and other iterables

All guards check for ``None`` first, and report it with an
``ArgumentNullError``, before any other condition is evaluated.

Sized, re-iterable collections (lists, tuples, sets, mappings, ...) are
returned unchanged. Single-pass iterators, such as generators, cannot be
inspected without consuming them. For those a re-iterable replacement with
the same items is returned instead: a list, or for :func:`is_empty` a
``more_itertools.peekable`` that has consumed no more than the first item.
"""

from __future__ import annotations

from collections.abc import (
    Collection,
    Iterable,
)
from typing import (
    Any,
    Callable,
    TypeVar,
)

from more_itertools import peekable

from throwif.builder import (
    GuardBuilder,
    guard,
)
from throwif.exceptions import ArgumentError
from throwif.messages import (
    describe,
    finalize_message,
)

from .generic import is_null

T = TypeVar('T')


@guard
def is_empty(
    builder: GuardBuilder,
    argument: Iterable[T],
    message: str | None = None,
    argument_name: str | None = None,
) -> Iterable[T]:
    """Guards against empty iterables"""
    is_null(builder, argument, message, argument_name)
    if isinstance(argument, Collection):
        if len(argument):
            return argument
    else:
        argument = peekable(argument)
        # a peekable is falsy when exhausted, it only looks ahead one item
        if argument:
            return argument
    raise ArgumentError(
        finalize_message(message, 'Cannot be empty.'),
        argument_name,
        argument,
    )


@guard(name='any')
def any_item(
    builder: GuardBuilder,
    argument: Iterable[T],
    predicate: Callable[[T], Any],
    message: str | None = None,
    argument_name: str | None = None,
) -> Iterable[T]:
    """Guards against iterables with any item matching ``predicate``"""
    items = _materialize(builder, argument, message, argument_name)
    if not any(predicate(i) for i in items):
        return items
    raise ArgumentError(
        finalize_message(
            message,
            'Cannot have anything matching your predicate.',
        ),
        argument_name,
        items,
    )


@guard(name='all')
def all_items(
    builder: GuardBuilder,
    argument: Iterable[T],
    predicate: Callable[[T], Any],
    message: str | None = None,
    argument_name: str | None = None,
) -> Iterable[T]:
    """Guards against iterables with all items matching ``predicate``

    As with the built-in ``all()``, an empty iterable counts as all items
    matching.
    """
    items = _materialize(builder, argument, message, argument_name)
    if not all(predicate(i) for i in items):
        return items
    raise ArgumentError(
        finalize_message(
            message,
            'Cannot have all items match your predicate.',
        ),
        argument_name,
        items,
    )


@guard
def contains(
    builder: GuardBuilder,
    argument: Iterable[T],
    item: T,
    message: str | None = None,
    argument_name: str | None = None,
) -> Iterable[T]:
    """Guards against iterables containing an item equal to ``item``"""
    items = _materialize(builder, argument, message, argument_name)
    if not _has_item(items, item):
        return items
    raise ArgumentError(
        finalize_message(
            message,
            f"Cannot contain an item equal to '{describe(item)}'.",
        ),
        argument_name,
        items,
    )


@guard
def does_not_contain(
    builder: GuardBuilder,
    argument: Iterable[T],
    item: T,
    message: str | None = None,
    argument_name: str | None = None,
) -> Iterable[T]:
    """Guards against iterables without an item equal to ``item``"""
    items = _materialize(builder, argument, message, argument_name)
    if _has_item(items, item):
        return items
    raise ArgumentError(
        finalize_message(
            message,
            f"Must contain an item that is equal to '{describe(item)}'.",
        ),
        argument_name,
        items,
    )


def _materialize(
    builder: GuardBuilder,
    argument: Iterable[T],
    message: str | None,
    argument_name: str | None,
) -> Iterable[T]:
    is_null(builder, argument, message, argument_name)
    if isinstance(argument, Collection):
        return argument
    return list(argument)


def _has_item(items: Iterable[T], item: T) -> bool:
    # compare item by item, `in` would do substring matching on a str
    return any(i == item for i in items)
