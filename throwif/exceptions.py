"""Exceptions raised by guards when their conditions are violated"""

from __future__ import annotations

from typing import Any


class ArgumentError(ValueError):
    # we derive from ValueError, because it provides the seemingly best fit
    # of any built-in exception. It is defined as:
    #
    #   Raised when an operation or function receives an argument that has
    #   the right type but an inappropriate value, and the situation is not
    #   described by a more precise exception such as IndexError.
    """Exception type raised by guards when an argument violates a rule

    The message is always a complete sentence ending in a period. When the
    name of the offending argument is known, it is appended to the string
    representation of the error in the form ``(Parameter 'name')``.
    """
    def __init__(self,
                 message: str,
                 argument_name: str | None = None,
                 value: Any = None):
        """
        Parameters
        ----------
        message: str
          A finalized message describing the violation.
        argument_name: str, optional
          Name of the argument that was validated.
        value:
          The value that is in violation of a guard.
        """
        # we put `message` in the `.args` container first to match where
        # `ValueError` would have it. Everything else goes after it.
        super().__init__(message, argument_name, value)

    @property
    def message(self) -> str:
        """Get the message describing the violation"""
        return self.args[0]

    @property
    def argument_name(self) -> str | None:
        """Get the name of the argument that violated a guard"""
        return self.args[1]

    @property
    def value(self) -> Any:
        """Get the value that violated a guard"""
        return self.args[2]

    def __str__(self):
        if self.argument_name is None:
            return self.message
        return f"{self.message} (Parameter '{self.argument_name}')"

    def __repr__(self):
        return '{0}({1!r}, {2!r}, {3!r})'.format(
            self.__class__.__name__,
            *self.args,
        )


class ArgumentNullError(ArgumentError):
    """Exception type raised when a required argument is ``None``

    This is a distinct kind of failure from a value that is present, but
    invalid. It derives from ``ArgumentError`` so that a single ``except``
    clause can handle both.
    """
    default_message = 'Value cannot be null.'

    def __init__(self,
                 message: str | None = None,
                 argument_name: str | None = None):
        super().__init__(
            message or self.default_message,
            argument_name,
            None,
        )

    def __repr__(self):
        return '{0}({1!r}, {2!r})'.format(
            self.__class__.__name__,
            *self.args[:2],
        )
