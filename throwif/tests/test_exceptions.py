from ..exceptions import (
    ArgumentError,
    ArgumentNullError,
)


def test_argumenterror():
    e = ArgumentError('Cannot be empty.', 'items', [])
    assert isinstance(e, ValueError)
    assert e.message == 'Cannot be empty.'
    assert e.argument_name == 'items'
    assert e.value == []
    assert str(e) == "Cannot be empty. (Parameter 'items')"
    assert repr(e) == "ArgumentError('Cannot be empty.', 'items', [])"


def test_argumenterror_noname():
    e = ArgumentError('Cannot be empty.')
    assert e.argument_name is None
    assert e.value is None
    assert str(e) == 'Cannot be empty.'


def test_argumentnullerror():
    e = ArgumentNullError(argument_name='value')
    assert isinstance(e, ArgumentError)
    assert e.message == 'Value cannot be null.'
    assert e.value is None
    assert str(e) == "Value cannot be null. (Parameter 'value')"
    assert repr(e) == "ArgumentNullError('Value cannot be null.', 'value')"
    assert ArgumentNullError('Gone.').message == 'Gone.'
