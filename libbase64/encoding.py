"""
libbase64.encoding - configurable base64 codec
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from libbase64._utils.bytes import as_buffer, as_bytes, as_str
from libbase64._utils.validation import validate_str
from libbase64.alphabet import BASE64_CHARS, URL_BASE64_CHARS, build_alphabet
from libbase64.binary import decode_symbols, encode_values, latin1_values
from libbase64.integer import decode_bigint, decode_int, encode_bigint, encode_int

if TYPE_CHECKING:
    from typing_extensions import Buffer

    from libbase64.alphabet import AlphabetTable
    from libbase64.integer import Number

__all__ = ["Base64Encoding", "BASIC", "URL"]


class Base64Encoding:
    """Provides routines for encoding/decoding base64 data using
    an arbitrary 64 character alphabet and optional padding character.

    :arg alphabet:
        A string of 64 unique printable ascii characters,
        which will be used to encode successive 6-bit chunks of data.
        A character's position within the string should correspond
        to its 6-bit value.

    :param padding:
        Padding character appended to reach a multiple of 4 symbols.
        Defaults to ``=``; pass ``""`` to disable padding.

    :raises ValidationError: if the alphabet or padding are malformed.

    Per-call options
    ================
    All encode methods accept ``with_padding``, which defaults to whether
    this instance has a padding character.

    All decode methods accept ``ignore_padding`` (defaults to whether
    this instance has *no* padding character), and ``allow_concatenation``
    (default False). When padding is honored, a padding character ends
    the payload: decoding stops there, unless ``allow_concatenation`` is set,
    in which case the run of padding is skipped and the remainder decoded
    as a further segment.

    Latin-1 Text <-> Encoded
    ========================
    .. automethod:: encode
    .. automethod:: encode_to_bytes
    .. automethod:: decode
    .. automethod:: decode_to_bytes

    Raw Bytes <-> Encoded
    =====================
    .. automethod:: encode_bytes
    .. automethod:: encode_bytes_to_string
    .. automethod:: decode_bytes
    .. automethod:: decode_bytes_to_string

    Unicode Text <-> Encoded
    ========================
    .. automethod:: encode_text
    .. automethod:: encode_text_to_bytes
    .. automethod:: decode_text
    .. automethod:: decode_bytes_to_text

    Integers <-> Encoded
    ====================
    .. automethod:: encode_int
    .. automethod:: decode_int
    .. automethod:: encode_bigint
    .. automethod:: decode_bigint
    """

    #: preconfigured instances, assigned at bottom of module
    BASIC: ClassVar[Base64Encoding]
    URL: ClassVar[Base64Encoding]

    def __init__(self, alphabet: str, padding: str | None = None) -> None:
        self._table = build_alphabet(alphabet, padding)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.alphabet!r}, padding={self.padding!r})"

    @property
    def alphabet(self) -> str:
        """the 64 symbols, in order of 6-bit value"""
        return self._table.symbols

    @property
    def padding(self) -> str:
        """padding character, or empty string if padding is disabled"""
        return self._table.padding

    @property
    def table(self) -> AlphabetTable:
        """precomputed lookup tables for this alphabet"""
        return self._table

    # ---------------------------------------------------------------
    # option helpers
    # ---------------------------------------------------------------

    def _with_padding(self, with_padding: bool | None) -> bool:
        if with_padding is None:
            return self._table.padding_code is not None
        return bool(with_padding)

    def _ignore_padding(self, ignore_padding: bool | None) -> bool:
        if ignore_padding is None:
            return self._table.padding_code is None
        return bool(ignore_padding)

    def _encode_buffer(self, buffer: Buffer, with_padding: bool | None) -> bytes:
        source = as_buffer(buffer)
        return encode_values(
            self._table,
            iter(source).__next__,
            len(source),
            self._with_padding(with_padding),
        )

    def _encode_latin1(self, string: str, with_padding: bool | None) -> bytes:
        validate_str(string, "string")
        return encode_values(
            self._table,
            latin1_values(string),
            len(string),
            self._with_padding(with_padding),
        )

    def _decode_buffer(
        self,
        buffer: Buffer,
        ignore_padding: bool | None,
        allow_concatenation: bool,
    ) -> bytes:
        return decode_symbols(
            self._table,
            as_buffer(buffer),
            self._ignore_padding(ignore_padding),
            bool(allow_concatenation),
        )

    def _decode_string(
        self,
        encoded: str,
        ignore_padding: bool | None,
        allow_concatenation: bool,
    ) -> bytes:
        validate_str(encoded, "encoded")
        return decode_symbols(
            self._table,
            tuple(map(ord, encoded)),
            self._ignore_padding(ignore_padding),
            bool(allow_concatenation),
        )

    # ---------------------------------------------------------------
    # latin-1 text
    # ---------------------------------------------------------------

    def encode(self, string: str, *, with_padding: bool | None = None) -> str:
        """encode latin-1 string, treating each character as a single byte.

        :raises EncodingError: if string contains characters above ``\\xff``.
        """
        return self._encode_latin1(string, with_padding).decode("ascii")

    def encode_to_bytes(self, string: str, *, with_padding: bool | None = None) -> bytes:
        """like :meth:`encode`, but returns symbol codes as bytes"""
        return self._encode_latin1(string, with_padding)

    def decode(
        self,
        encoded: str,
        *,
        ignore_padding: bool | None = None,
        allow_concatenation: bool = False,
    ) -> str:
        """decode to latin-1 string, one character per decoded byte.

        :raises DecodingError: if encoded contains characters outside the alphabet.
        """
        raw = self._decode_string(encoded, ignore_padding, allow_concatenation)
        return raw.decode("latin-1")

    def decode_to_bytes(
        self,
        encoded: str,
        *,
        ignore_padding: bool | None = None,
        allow_concatenation: bool = False,
    ) -> bytes:
        """decode string to raw bytes"""
        return self._decode_string(encoded, ignore_padding, allow_concatenation)

    # ---------------------------------------------------------------
    # raw bytes
    # ---------------------------------------------------------------

    def encode_bytes(self, buffer: Buffer, *, with_padding: bool | None = None) -> bytes:
        """encode bytes-like object.

        :returns: bytes containing the character codes of the encoded symbols.
        """
        return self._encode_buffer(buffer, with_padding)

    def encode_bytes_to_string(
        self, buffer: Buffer, *, with_padding: bool | None = None
    ) -> str:
        return self._encode_buffer(buffer, with_padding).decode("ascii")

    def decode_bytes(
        self,
        buffer: Buffer,
        *,
        ignore_padding: bool | None = None,
        allow_concatenation: bool = False,
    ) -> bytes:
        """decode bytes-like object holding symbol codes into raw bytes"""
        return self._decode_buffer(buffer, ignore_padding, allow_concatenation)

    def decode_bytes_to_string(
        self,
        buffer: Buffer,
        *,
        ignore_padding: bool | None = None,
        allow_concatenation: bool = False,
    ) -> str:
        raw = self._decode_buffer(buffer, ignore_padding, allow_concatenation)
        return raw.decode("latin-1")

    # ---------------------------------------------------------------
    # unicode text
    # ---------------------------------------------------------------

    def encode_text(self, text: str, *, with_padding: bool | None = None) -> str:
        """encode unicode text as utf-8"""
        validate_str(text, "text")
        return self.encode_bytes_to_string(as_bytes(text), with_padding=with_padding)

    def encode_text_to_bytes(
        self, text: str, *, with_padding: bool | None = None
    ) -> bytes:
        validate_str(text, "text")
        return self.encode_bytes(as_bytes(text), with_padding=with_padding)

    def decode_text(
        self,
        encoded: str,
        *,
        ignore_padding: bool | None = None,
        allow_concatenation: bool = False,
    ) -> str:
        """decode to raw bytes, then to unicode text as utf-8.

        :raises DecodingError: if the payload isn't valid utf-8.
        """
        raw = self._decode_string(encoded, ignore_padding, allow_concatenation)
        return as_str(raw)

    def decode_bytes_to_text(
        self,
        buffer: Buffer,
        *,
        ignore_padding: bool | None = None,
        allow_concatenation: bool = False,
    ) -> str:
        raw = self._decode_buffer(buffer, ignore_padding, allow_concatenation)
        return as_str(raw)

    # ---------------------------------------------------------------
    # integers
    # ---------------------------------------------------------------

    def encode_int(self, value: Number) -> str:
        """encode non-negative number as base-64 digit string (floats are truncated)"""
        return encode_int(self._table, value)

    def decode_int(self, encoded: str) -> Number:
        """decode base-64 digit string; returns ``math.nan`` if malformed"""
        validate_str(encoded, "encoded")
        return decode_int(self._table, encoded)

    def encode_bigint(self, value: int) -> str:
        return encode_bigint(self._table, value)

    def decode_bigint(self, encoded: str) -> int:
        """decode base-64 digit string; raises :exc:`DecodingError` if malformed"""
        validate_str(encoded, "encoded")
        return decode_bigint(self._table, encoded)


BASIC = Base64Encoding(BASE64_CHARS)
URL = Base64Encoding(URL_BASE64_CHARS, padding="")

Base64Encoding.BASIC = BASIC
Base64Encoding.URL = URL
