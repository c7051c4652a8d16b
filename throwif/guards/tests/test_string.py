from datetime import timedelta
import re

import pytest
import regex

from throwif import ThrowIf

from ...exceptions import (
    ArgumentError,
    ArgumentNullError,
)
from .. import string as string_guards


@pytest.mark.parametrize('argument', ['a', ' ', ' a '])
def test_is_null_or_empty_passes(argument):
    assert ThrowIf.argument.is_null_or_empty(argument) is argument


@pytest.mark.parametrize('argument', [None, ''])
def test_is_null_or_empty(argument):
    with pytest.raises(ArgumentError) as e:
        ThrowIf.argument.is_null_or_empty(argument, argument_name='argument')
    assert str(e.value) == "Cannot be null or empty. (Parameter 'argument')"
    # no special treatment for None
    assert not isinstance(e.value, ArgumentNullError)
    with pytest.raises(ArgumentError) as e:
        ThrowIf.argument.is_null_or_empty(argument, 'need a name')
    assert e.value.message == 'need a name.'


@pytest.mark.parametrize('argument', ['a', ' a ', '\ta', '\x1c', ' \x1f '])
def test_is_null_or_white_space_passes(argument):
    assert ThrowIf.argument.is_null_or_white_space(argument) is argument


@pytest.mark.parametrize('argument', [None, '', ' ', '\t\n', '\u2003'])
def test_is_null_or_white_space(argument):
    with pytest.raises(ArgumentError) as e:
        ThrowIf.argument.is_null_or_white_space(
            argument, argument_name='argument')
    assert str(e.value) == \
        "Cannot be null or white space. (Parameter 'argument')"
    assert not isinstance(e.value, ArgumentNullError)
    assert e.value.value == argument


def test_is_regex_match():
    assert ThrowIf.argument.is_regex_match('abc', '[0-9]') == 'abc'
    with pytest.raises(ArgumentError) as e:
        ThrowIf.argument.is_regex_match(
            'abc123', '[0-9]+', argument_name='argument')
    assert str(e.value) == \
        "Value was 'abc123', but cannot match pattern '[0-9]+'. " \
        "(Parameter 'argument')"
    # search, not full match
    with pytest.raises(ArgumentError):
        ThrowIf.argument.is_regex_match('xx-yy', '-')
    with pytest.raises(ArgumentError) as e:
        ThrowIf.argument.is_regex_match('a1', r'\d', message='no digits')
    assert e.value.message == 'no digits.'


def test_is_not_regex_match():
    assert ThrowIf.argument.is_not_regex_match('abc123', '[0-9]+') == 'abc123'
    with pytest.raises(ArgumentError) as e:
        ThrowIf.argument.is_not_regex_match(
            'abc', '^[0-9]+$', argument_name='argument')
    assert str(e.value) == \
        "Value was 'abc', but must match pattern '^[0-9]+$'. " \
        "(Parameter 'argument')"


def test_regex_flags_and_compiled():
    # standard library flags are accepted
    assert ThrowIf.argument.is_not_regex_match(
        'ABC', '^abc$', flags=re.IGNORECASE) == 'ABC'
    with pytest.raises(ArgumentError):
        ThrowIf.argument.is_not_regex_match('ABC', '^abc$')
    with pytest.raises(ArgumentError):
        ThrowIf.argument.is_regex_match(
            'ABC', 'b', flags=regex.IGNORECASE)
    # compiled patterns are reported by their source
    pattern = regex.compile(r'\s')
    with pytest.raises(ArgumentError) as e:
        ThrowIf.argument.is_regex_match('a b', pattern)
    assert e.value.message == \
        r"Value was 'a b', but cannot match pattern '\s'."


def test_regex_null():
    with pytest.raises(ArgumentNullError) as e:
        ThrowIf.argument.is_regex_match(None, 'a', argument_name='argument')
    assert e.value.argument_name == 'argument'
    with pytest.raises(ArgumentNullError):
        ThrowIf.argument.is_not_regex_match(None, 'a')


@pytest.mark.parametrize('timeout,expected', [
    (timedelta(seconds=1.5), 1.5),
    (2, 2.0),
    (None, None),
])
def test_regex_timeout_passed_on(monkeypatch, timeout, expected):
    calls = []
    search = regex.search

    def recording_search(pattern, string, **kwargs):
        calls.append(kwargs)
        return search(pattern, string, **kwargs)

    monkeypatch.setattr(string_guards.regex, 'search', recording_search)
    ThrowIf.argument.is_regex_match('abc', 'x', timeout=timeout)
    assert calls[0].get('timeout') == expected


def test_regex_timeout_propagates(monkeypatch):
    def slow_search(pattern, string, **kwargs):
        raise TimeoutError('regex timed out')

    monkeypatch.setattr(string_guards.regex, 'search', slow_search)
    with pytest.raises(TimeoutError):
        ThrowIf.argument.is_not_regex_match('abc', 'a', timeout=0.1)


@pytest.mark.parametrize('c', ['\x1c', '\x1f', ' ', '\xa0', '\u2028', '\x85'])
def test_white_space_agrees_with_char_guard(c):
    # a character is white space for both guards, or for neither
    char_raised = str_raised = False
    try:
        ThrowIf.argument.is_white_space(c)
    except ArgumentError:
        char_raised = True
    try:
        ThrowIf.argument.is_null_or_white_space(c)
    except ArgumentError:
        str_raised = True
    assert char_raised == str_raised


def test_regex_timeout_bounds_matching():
    # catastrophic backtracking, would run for ages without a timeout
    with pytest.raises(TimeoutError):
        ThrowIf.argument.is_regex_match('x' * 3000, r'(x+x+)+y', timeout=0.05)
    with pytest.raises(TimeoutError):
        ThrowIf.argument.is_not_regex_match(
            'x' * 3000, r'(x+x+)+y', timeout=timedelta(milliseconds=50))
