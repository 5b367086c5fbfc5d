"""
libbase64.exc -- exceptions raised by the codec
"""

from __future__ import annotations

__all__ = [
    "Base64Error",
    "ValidationError",
    "EncodingError",
    "DecodingError",
    "ExpectedTypeError",
    "ExpectedStringError",
]


class Base64Error(Exception):
    """base class for all errors raised by libbase64"""


class ValidationError(Base64Error, ValueError):
    """
    raised by :class:`~libbase64.Base64Encoding` when the alphabet
    or padding character is malformed. no instance is created.
    """


class EncodingError(Base64Error, ValueError):
    """
    raised when latin-1 text passed to an encoder contains a character
    which doesn't fit in a single byte.
    """


class DecodingError(Base64Error, ValueError):
    """
    raised when encoded input contains a character outside the alphabet,
    or the decoded payload can't be represented in the requested form.
    """


class ExpectedTypeError(TypeError):
    """error raised if wrong type of value is passed as an argument"""

    def __init__(self, value: object, expected: str, param: str) -> None:
        name = type(value).__name__
        super().__init__(f"{param} must be {expected}, not {name}")


def ExpectedStringError(value: object, param: str) -> ExpectedTypeError:
    """error message when param was supposed to be unicode"""
    return ExpectedTypeError(value, "str", param)
