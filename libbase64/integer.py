"""
libbase64.integer - positional base-64 integer codec

unlike :mod:`libbase64.binary`, this treats the alphabet as the digits
of a base-64 numeral system, most significant digit first.
"""

from __future__ import annotations

import math
import operator
from typing import TYPE_CHECKING, Union

from libbase64.exc import DecodingError, ExpectedTypeError

if TYPE_CHECKING:
    from libbase64.alphabet import AlphabetTable

__all__ = [
    "encode_int",
    "decode_int",
    "encode_bigint",
    "decode_bigint",
]

Number = Union[int, float]


def _encode_digits(table: AlphabetTable, value: int) -> str:
    assert value >= 0, "caller did not sanitize input"
    if not value:
        return table.zero_symbol
    symbols = table.symbols
    digits = []
    while value:
        value, idx = divmod(value, 64)
        digits.append(symbols[idx])
    digits.reverse()
    return "".join(digits)


def _decode_digits(table: AlphabetTable, source: str) -> int | None:
    """returns ``None`` if source contains a character outside the alphabet"""
    lookup = table.symbol_to_index
    result = 0
    for char in source.lstrip(table.zero_symbol):
        idx = lookup.get(char)
        if idx is None:
            return None
        result = result * 64 + idx
    return result


def encode_int(table: AlphabetTable, value: Number) -> str:
    """encode a non-negative number as a base-64 digit string.

    floats are truncated towards zero.

    :raises ValueError: if value is negative, infinite or nan.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ExpectedTypeError(value, "int or float", "value")
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError("value is not finite")
        value = math.trunc(value)
    if value < 0:
        raise ValueError("value cannot be negative")
    return _encode_digits(table, value)


def decode_int(table: AlphabetTable, source: str) -> Number:
    """decode a base-64 digit string.

    :returns:
        the decoded integer, or ``math.nan`` if source is empty
        or contains a character outside the alphabet.
    """
    if not source:
        return math.nan
    result = _decode_digits(table, source)
    if result is None:
        return math.nan
    return result


def encode_bigint(table: AlphabetTable, value: int) -> str:
    """encode an arbitrary-precision non-negative integer as a base-64 digit string

    :raises ValueError: if value is negative.
    """
    if isinstance(value, bool):
        raise ExpectedTypeError(value, "int", "value")
    try:
        value = operator.index(value)
    except TypeError:
        raise ExpectedTypeError(value, "int", "value") from None
    if value < 0:
        raise ValueError("value cannot be negative")
    return _encode_digits(table, value)


def decode_bigint(table: AlphabetTable, source: str) -> int:
    """decode a base-64 digit string into an arbitrary-precision integer.

    :raises DecodingError:
        if source is empty or contains a character outside the alphabet.
    """
    if not source:
        raise DecodingError("invalid base64 encoded integer: empty string")
    result = _decode_digits(table, source)
    if result is None:
        raise DecodingError(f"invalid base64 encoded integer: {source!r}")
    return result
