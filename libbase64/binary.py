"""
libbase64.binary - base64 bit-packing engine

all functions here operate on a prebuilt :class:`~libbase64.alphabet.AlphabetTable`
and plain sequences of 8-bit values; str/bytes/buffer coercion is left to
:class:`~libbase64.encoding.Base64Encoding`.
"""

from __future__ import annotations

import enum
import logging
from typing import TYPE_CHECKING, Callable

from typing_extensions import assert_never

from libbase64.exc import DecodingError, EncodingError

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from libbase64.alphabet import AlphabetTable

log = logging.getLogger(__name__)

__all__ = [
    "GroupResult",
    "get_padded_length",
    "get_capacity",
    "get_inverse_capacity",
    "latin1_values",
    "encode_symbols",
    "encode_values",
    "decode_symbols",
]

# -------------------------------------------------------------
# bit packing tables
# -------------------------------------------------------------

ENCODING_SHIFTS = (2, 4, 6)
ENCODING_MASKS = (0x03, 0x0F, 0x3F)
ENCODING_DIGITS = (4, 2, 0)

DECODING_SHIFTS = (2, 4, 6, 0)
DECODING_MASKS = (0, 0x0F, 0x03, 0)
DECODING_DIGITS = (0, 4, 2, 0)


class GroupResult(enum.Enum):
    """outcome of decoding a single group of up to 4 symbols"""

    COMPLETE = "complete"
    PADDING = "padding"


# -------------------------------------------------------------
# capacity helpers
# -------------------------------------------------------------


def get_padded_length(length: int) -> int:
    """round length up to the next multiple of 4"""
    remainder = length % 4
    return length + (4 - remainder) if remainder else length


def get_capacity(length: int, with_padding: bool) -> int:
    """number of symbols needed to encode ``length`` bytes"""
    capacity = (length * 4 + 2) // 3
    return get_padded_length(capacity) if with_padding else capacity


def get_inverse_capacity(length: int) -> int:
    """upper bound on number of bytes decoded from ``length`` symbols"""
    return (length * 3 + 3) // 4


# -------------------------------------------------------------
# encoding
# -------------------------------------------------------------


def _latin1_code(char: str) -> int:
    code = ord(char)
    if code > 0xFF:
        raise EncodingError(f"character {char!r} doesn't fit in a single byte")
    return code


def latin1_values(source: str) -> Callable[[], int]:
    """return ``next_value`` callable yielding each char of source as a byte value"""
    return map(_latin1_code, source).__next__


def encode_symbols(next_value: Callable[[], int], length: int) -> Iterator[int]:
    """generate 6-bit values for ``length`` bytes pulled from ``next_value``.

    bytes are consumed in groups of 3, the final group may be short.
    a group of 1, 2 or 3 bytes yields 2, 3 or 4 values respectively.
    """
    #
    # output bit layout:
    #
    # first value:   v1 765432
    #
    # second value:  v1 10....
    #               +v2 ..7654
    #
    # third value:   v2 3210..
    #               +v3 ....76
    #
    # fourth value:  v3 543210
    #
    for idx in range(0, length, 3):
        count = min(length - idx, 3)
        carry = 0
        for j in range(count):
            value = next_value()
            yield carry | (value >> ENCODING_SHIFTS[j])
            carry = (value & ENCODING_MASKS[j]) << ENCODING_DIGITS[j]
        # note: for short groups, lsb of final value are zero
        yield carry


def encode_values(
    table: AlphabetTable,
    next_value: Callable[[], int],
    length: int,
    with_padding: bool,
) -> bytes:
    """encode ``length`` byte values into symbol codes.

    :arg table: alphabet to encode with.
    :arg next_value: callable returning successive byte values.
    :arg length: number of values to pull from ``next_value``.
    :param with_padding:
        pad output to a multiple of 4 symbols;
        ignored if the alphabet has no padding character.

    :returns: bytes containing the character codes of the encoded symbols.
    """
    if not length:
        return b""
    gen = encode_symbols(next_value, length)
    result = bytes(map(table.index_to_code.__getitem__, gen))
    padding_code = table.padding_code
    if with_padding and padding_code is not None:
        missing = get_capacity(length, True) - len(result)
        if missing:
            result += bytes((padding_code,)) * missing
    return result


# -------------------------------------------------------------
# decoding
# -------------------------------------------------------------


def _decode_group(
    table: AlphabetTable,
    source: Sequence[int],
    position: int,
    ignore_padding: bool,
    result: bytearray,
    index: int,
) -> tuple[GroupResult, int, int]:
    """decode the group of up to 4 symbols starting at ``position`` into ``result``.

    :returns:
        ``(status, position, index)`` -- where position is the offset
        of the first unconsumed symbol, and index the number of bytes
        written to result so far.
    """
    #
    # input bit layout:
    #
    # first byte:   v1 543210..
    #              +v2 ......54
    #
    # second byte:  v2 3210....
    #              +v3 ....5432
    #
    # third byte:   v3 10......
    #              +v4 ..543210
    #
    lookup = table.code_to_index
    count = min(len(source) - position, 4)
    carry = 0
    for j in range(count):
        code = source[position]
        position += 1
        value = lookup.get(code)
        if value is None:
            if code == table.padding_code and not ignore_padding:
                return GroupResult.PADDING, position, index
            raise DecodingError(f"invalid character: {chr(code)!r}")
        mask = DECODING_MASKS[j]
        if mask:
            result[index] = carry + (value >> DECODING_DIGITS[j])
            index += 1
            carry = (value & mask) << DECODING_SHIFTS[j]
        else:
            carry += value << DECODING_SHIFTS[j]
    if count == 4:
        result[index] = carry
        index += 1
    # NOTE: for short groups, unused lsb of the last symbol are discarded,
    # and a lone trailing symbol can't complete a byte.
    return GroupResult.COMPLETE, position, index


def decode_symbols(
    table: AlphabetTable,
    source: Sequence[int],
    ignore_padding: bool,
    allow_concatenation: bool,
) -> bytes:
    """decode sequence of symbol codes into raw bytes.

    :arg table: alphabet to decode with.
    :arg source: sequence of character codes.
    :param ignore_padding:
        treat the padding character as an invalid symbol
        instead of the end of the payload.
    :param allow_concatenation:
        after a run of padding characters, resume decoding the remaining
        input as a new segment instead of stopping.

    :raises DecodingError: if source contains a character outside the alphabet.

    :returns: decoded bytes.
    """
    length = len(source)
    if not length:
        return b""
    result = bytearray(get_inverse_capacity(length))
    position = 0
    index = 0
    while position < length:
        status, position, index = _decode_group(
            table, source, position, ignore_padding, result, index
        )
        if status is GroupResult.COMPLETE:
            continue
        elif status is GroupResult.PADDING:
            if not allow_concatenation:
                log.debug("padding at offset %d, ignoring remaining input", position - 1)
                break
            while position < length and source[position] == table.padding_code:
                position += 1
            log.debug("padding run ends at offset %d, resuming decoding", position)
        else:
            assert_never(status)
    del result[index:]
    return bytes(result)
