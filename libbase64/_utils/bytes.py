from __future__ import annotations

from typing import Union

from typing_extensions import Buffer

from libbase64.exc import DecodingError, ExpectedTypeError

StrOrBytes = Union[str, bytes]


def as_bytes(value: StrOrBytes) -> bytes:
    return value.encode("utf8") if isinstance(value, str) else value


def as_str(value: StrOrBytes) -> str:
    if isinstance(value, str):
        return value
    try:
        return value.decode("utf8")
    except UnicodeDecodeError as err:
        raise DecodingError(f"decoded payload is not valid utf-8: {err}") from err


def as_buffer(value: Buffer, param: str = "buffer") -> memoryview:
    """
    return a flat view of unsigned bytes over any object supporting
    the buffer protocol.
    """
    if isinstance(value, str):
        raise ExpectedTypeError(value, "a bytes-like object", param)
    try:
        view = memoryview(value)
    except TypeError:
        raise ExpectedTypeError(value, "a bytes-like object", param) from None
    if not view.c_contiguous:
        view = memoryview(view.tobytes())
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view
