"""Guards classifying single characters

For each character class there is a pair of guards. ``is_<class>`` guards
against a character belonging to the class, and ``is_not_<class>`` guards
against a character not belonging to it. Both guards of a pair share the
same classification predicate, hence exactly one of them raises for any
given character.

Classes follow the Unicode general categories of a character:

================  =======================================================
class             definition
================  =======================================================
ascii             code point below 128
control           ``Cc``
digit             ``Nd``
letter            ``Lu``, ``Ll``, ``Lt``, ``Lm``, ``Lo``
lower             ``Ll``
number            ``Nd``, ``Nl``, ``No``
punctuation       ``Pc``, ``Pd``, ``Ps``, ``Pe``, ``Pi``, ``Pf``, ``Po``
separator         ``Zs``, ``Zl``, ``Zp``
surrogate         ``Cs``
symbol            ``Sm``, ``Sc``, ``Sk``, ``So``
upper             ``Lu``
high_surrogate    U+D800 to U+DBFF
low_surrogate     U+DC00 to U+DFFF
white_space       separators, and ``\\t``, ``\\n``, ``\\v``, ``\\f``, ``\\r``,
                  U+0085
letter_or_digit   letter or digit
================  =======================================================

A character is a ``str`` of length one.
"""

from __future__ import annotations

from typing import (
    Callable,
    NamedTuple,
)
from unicodedata import category

from throwif.builder import (
    GuardBuilder,
    guard,
)
from throwif.exceptions import ArgumentError
from throwif.messages import finalize_message

from .generic import is_null


def _is_ascii(c: str) -> bool:
    return ord(c) < 128


def _is_control(c: str) -> bool:
    return category(c) == 'Cc'


def _is_digit(c: str) -> bool:
    return category(c) == 'Nd'


def _is_letter(c: str) -> bool:
    return category(c) in ('Lu', 'Ll', 'Lt', 'Lm', 'Lo')


def _is_lower(c: str) -> bool:
    return category(c) == 'Ll'


def _is_number(c: str) -> bool:
    return category(c) in ('Nd', 'Nl', 'No')


def _is_punctuation(c: str) -> bool:
    return category(c) in ('Pc', 'Pd', 'Ps', 'Pe', 'Pi', 'Pf', 'Po')


def _is_separator(c: str) -> bool:
    return category(c) in ('Zs', 'Zl', 'Zp')


def _is_surrogate(c: str) -> bool:
    return category(c) == 'Cs'


def _is_symbol(c: str) -> bool:
    return category(c) in ('Sm', 'Sc', 'Sk', 'So')


def _is_upper(c: str) -> bool:
    return category(c) == 'Lu'


def _is_high_surrogate(c: str) -> bool:
    return 0xD800 <= ord(c) <= 0xDBFF


def _is_low_surrogate(c: str) -> bool:
    return 0xDC00 <= ord(c) <= 0xDFFF


def _is_white_space(c: str) -> bool:
    return c in '\t\n\x0b\x0c\r\x85' or _is_separator(c)


def _is_letter_or_digit(c: str) -> bool:
    return _is_letter(c) or _is_digit(c)


class CharClass(NamedTuple):
    label: str
    """Human-readable name of the class, as used in messages"""
    predicate: Callable[[str], bool]
    """Function reporting whether a character belongs to the class"""

    @property
    def article(self) -> str:
        return 'an' if self.label[0] in 'AEIOUaeiou' else 'a'


# key is the suffix of the guard names
char_classes = {
    'ascii': CharClass('ASCII', _is_ascii),
    'control': CharClass('control', _is_control),
    'digit': CharClass('digit', _is_digit),
    'letter': CharClass('letter', _is_letter),
    'lower': CharClass('lower', _is_lower),
    'number': CharClass('number', _is_number),
    'punctuation': CharClass('punctuation', _is_punctuation),
    'separator': CharClass('separator', _is_separator),
    'surrogate': CharClass('surrogate', _is_surrogate),
    'symbol': CharClass('symbol', _is_symbol),
    'upper': CharClass('upper', _is_upper),
    'high_surrogate': CharClass('high surrogate', _is_high_surrogate),
    'low_surrogate': CharClass('low surrogate', _is_low_surrogate),
    'white_space': CharClass('white space', _is_white_space),
    'letter_or_digit': CharClass('letter or digit', _is_letter_or_digit),
}


def _require_char(
    builder: GuardBuilder,
    argument: str,
    message: str | None,
    argument_name: str | None,
) -> str:
    is_null(builder, argument, message, argument_name)
    if isinstance(argument, str) and len(argument) == 1:
        return argument
    raise ArgumentError(
        finalize_message(
            message,
            f"Value was '{argument}', but must be a single character.",
        ),
        argument_name,
        argument,
    )


def _make_guard_pair(key: str, cc: CharClass) -> None:
    def is_class(
        builder: GuardBuilder,
        argument: str,
        message: str | None = None,
        argument_name: str | None = None,
    ) -> str:
        _require_char(builder, argument, message, argument_name)
        if not cc.predicate(argument):
            return argument
        raise ArgumentError(
            finalize_message(
                message,
                f"Value was '{argument}', but must not be {cc.article} "
                f"{cc.label} character.",
            ),
            argument_name,
            argument,
        )

    def is_not_class(
        builder: GuardBuilder,
        argument: str,
        message: str | None = None,
        argument_name: str | None = None,
    ) -> str:
        _require_char(builder, argument, message, argument_name)
        if cc.predicate(argument):
            return argument
        raise ArgumentError(
            finalize_message(
                message,
                f"Value was '{argument}', but must be {cc.article} "
                f"{cc.label} character.",
            ),
            argument_name,
            argument,
        )

    for func, name, doc in (
        (is_class, f'is_{key}',
         f'Guards against {cc.label} characters'),
        (is_not_class, f'is_not_{key}',
         f'Guards against characters that are not {cc.label} characters'),
    ):
        func.__name__ = func.__qualname__ = name
        func.__doc__ = doc
        func.__module__ = __name__
        globals()[name] = guard(func)


for _key, _cc in char_classes.items():
    _make_guard_pair(_key, _cc)
del _key, _cc
