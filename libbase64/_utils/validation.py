from __future__ import annotations

from libbase64.exc import ExpectedStringError, ValidationError

#: lowest & highest character codes allowed in an alphabet (printable ascii, no space)
MIN_SYMBOL_CODE = 0x21
MAX_SYMBOL_CODE = 0x7E


def validate_str(value: object, param: str) -> str:
    if not isinstance(value, str):
        raise ExpectedStringError(value, param)
    return value


def validate_symbol(char: str, param: str) -> int:
    code = ord(char)
    if code < MIN_SYMBOL_CODE or code > MAX_SYMBOL_CODE:
        msg = f"{param} contains invalid character {char!r}"
        raise ValidationError(msg)
    return code
