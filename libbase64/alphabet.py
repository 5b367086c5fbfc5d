"""
libbase64.alphabet - alphabet table construction & validation
"""

from __future__ import annotations

import dataclasses
import logging
import types
from typing import TYPE_CHECKING

from libbase64._utils.validation import validate_str, validate_symbol
from libbase64.exc import ValidationError

if TYPE_CHECKING:
    from collections.abc import Mapping

log = logging.getLogger(__name__)

__all__ = [
    "BASE64_CHARS",
    "URL_BASE64_CHARS",
    "DEFAULT_PADDING",
    "AlphabetTable",
    "build_alphabet",
]

#: standard base64 charmap
BASE64_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"

#: url-safe base64 charmap -- "-_" instead of "+/"
URL_BASE64_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"

#: padding character used when none is specified
DEFAULT_PADDING = "="


@dataclasses.dataclass(frozen=True, eq=False)
class AlphabetTable:
    """Precomputed lookup tables for a single 64 character alphabet.

    .. attribute:: symbols

        string of the 64 symbols; position in string matches 6bit value.

    .. attribute:: symbol_to_index

        maps symbol -> 6bit value.

    .. attribute:: code_to_index

        maps symbol's character code -> 6bit value.

    .. attribute:: index_to_code

        bytes version of :attr:`symbols`, maps 6bit value -> character code.

    .. attribute:: padding

        padding character, or empty string if padding is disabled.

    .. attribute:: padding_code

        character code of :attr:`padding`, or ``None`` if disabled.
    """

    symbols: str
    symbol_to_index: Mapping[str, int]
    code_to_index: Mapping[int, int]
    index_to_code: bytes
    padding: str
    padding_code: int | None

    @property
    def zero_symbol(self) -> str:
        """symbol used for the 0 digit"""
        return self.symbols[0]


def build_alphabet(alphabet: str, padding: str | None = None) -> AlphabetTable:
    """build lookup tables for an alphabet, validating it along the way.

    :arg alphabet:
        string of 64 unique printable ascii characters (``0x21`` - ``0x7E``).

    :param padding:
        single padding character, ``""`` to disable padding,
        or ``None`` to use the default ``=``.

    :raises ValidationError: if alphabet or padding are malformed.
    :raises TypeError: if alphabet or padding aren't strings.
    """
    validate_str(alphabet, "alphabet")
    if len(alphabet) != 64:
        msg = f"alphabet must be 64 characters in length, not {len(alphabet)}"
        raise ValidationError(msg)

    symbol_to_index: dict[str, int] = {}
    code_to_index: dict[int, int] = {}
    for idx, char in enumerate(alphabet):
        if char in symbol_to_index:
            msg = f"alphabet must not contain duplicate characters: {char!r}"
            raise ValidationError(msg)
        code = validate_symbol(char, "alphabet")
        symbol_to_index[char] = idx
        code_to_index[code] = idx

    if padding is None:
        padding = DEFAULT_PADDING
    validate_str(padding, "padding")
    if len(padding) > 1:
        raise ValidationError("padding must be a single character")
    padding_code = None
    if padding:
        padding_code = validate_symbol(padding, "padding")
        if padding in symbol_to_index:
            msg = f"padding character {padding!r} is part of the alphabet"
            raise ValidationError(msg)

    log.debug("built alphabet table: %r (padding=%r)", alphabet, padding)
    return AlphabetTable(
        symbols=alphabet,
        symbol_to_index=types.MappingProxyType(symbol_to_index),
        code_to_index=types.MappingProxyType(code_to_index),
        index_to_code=alphabet.encode("ascii"),
        padding=padding,
        padding_code=padding_code,
    )
