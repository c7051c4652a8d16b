"""Helpers for composing guard error messages"""

from __future__ import annotations

__docformat__ = 'restructuredtext'

from dataclasses import (
    asdict,
    is_dataclass,
)
from decimal import Decimal
from enum import Enum
import json
from numbers import Number
from typing import Any


def add_period(value: str) -> str:
    """Return ``value`` with a trailing period, adding one if needed"""
    return value if value.endswith('.') else f'{value}.'


def finalize_message(candidate: str | None, default: str) -> str:
    """Determine the message of a guard violation

    A caller-supplied ``candidate`` message takes precedence, and is turned
    into a complete sentence by appending a period when it does not end
    with one already. A ``candidate`` that is ``None``, empty, or only
    consists of white space counts as not given, and the ``default`` is
    returned verbatim.
    """
    if candidate is None or not candidate.strip():
        return default
    return add_period(candidate)


def describe(value: Any) -> str:
    """Get a diagnostic text representation of a value for error messages

    Numbers are rendered with ``str()``. Anything else is serialized to
    JSON, such that structured values (mappings, sequences, dataclass
    instances) remain legible. Values without a JSON representation are
    reported via their ``repr()``, as are values that cannot be serialized
    at all, such as mappings with non-string keys or circular structures.
    """
    if isinstance(value, Number) and not isinstance(value, bool):
        return str(value)
    try:
        return json.dumps(value, default=_jsonable, ensure_ascii=False)
    except (TypeError, ValueError):
        # non-str mapping keys, circular references
        return repr(value)


def _jsonable(value: Any) -> Any:
    # called by json.dumps() for anything it cannot serialize itself
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (set, frozenset)):
        # sort for a stable report, if the items allow it
        try:
            return sorted(value)
        except TypeError:
            return list(value)
    if isinstance(value, bytes):
        return value.decode('utf-8', errors='backslashreplace')
    return repr(value)
