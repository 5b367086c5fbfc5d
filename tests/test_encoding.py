import array
import base64
import random

import pytest

import libbase64
from libbase64 import BASIC, URL, Base64Encoding
from libbase64.exc import DecodingError, EncodingError, ValidationError

HASH64_CHARS = "./0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


def test_singletons():
    assert Base64Encoding.BASIC is BASIC is libbase64.BASIC
    assert Base64Encoding.URL is URL is libbase64.URL
    assert BASIC.alphabet == (
        "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
    )
    assert BASIC.padding == "="
    assert URL.alphabet.endswith("-_")
    assert URL.padding == ""


def test_repr():
    assert repr(URL) == f"Base64Encoding({URL.alphabet!r}, padding='')"


def test_constructor_errors():
    with pytest.raises(ValidationError):
        Base64Encoding(HASH64_CHARS[:-1])
    with pytest.raises(ValidationError):
        Base64Encoding(HASH64_CHARS, padding=".")
    with pytest.raises(TypeError):
        Base64Encoding(1)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("raw", "padded", "unpadded"),
    [
        (b"", "", ""),
        (b"M", "TQ==", "TQ"),
        (b"Ma", "TWE=", "TWE"),
        (b"Man", "TWFu", "TWFu"),
        (b"hello world", "aGVsbG8gd29ybGQ=", "aGVsbG8gd29ybGQ"),
        (b"\xfb\xff", "+/8=", "+/8"),
    ],
)
def test_basic_vectors(raw: bytes, padded: str, unpadded: str) -> None:
    assert BASIC.encode_bytes_to_string(raw) == padded
    assert BASIC.encode_bytes_to_string(raw, with_padding=False) == unpadded
    assert BASIC.encode_bytes(raw) == padded.encode()
    assert BASIC.encode_bytes(raw, with_padding=False) == unpadded.encode()
    assert BASIC.decode_to_bytes(padded) == raw
    assert BASIC.decode_to_bytes(unpadded) == raw
    assert BASIC.decode_bytes(padded.encode()) == raw


def test_url_vectors():
    assert URL.encode_bytes_to_string(b"\xfb\xff") == "-_8"
    # no padding char configured -- flag has no effect
    assert URL.encode_bytes_to_string(b"\xfb\xff", with_padding=True) == "-_8"
    assert URL.decode_to_bytes("-_8") == b"\xfb\xff"
    with pytest.raises(DecodingError):
        URL.decode_to_bytes("-_8=")
    with pytest.raises(DecodingError):
        URL.decode_to_bytes("+/8")


def test_latin1_string():
    assert BASIC.encode("Man") == "TWFu"
    assert BASIC.encode("\xff") == "/w=="
    assert BASIC.encode("\xff", with_padding=False) == "/w"
    assert BASIC.encode_to_bytes("\xff") == b"/w=="
    assert BASIC.decode("/w==") == "\xff"
    assert BASIC.decode_bytes_to_string(b"/w==") == "\xff"
    with pytest.raises(EncodingError):
        BASIC.encode("Ā")
    with pytest.raises(EncodingError):
        BASIC.encode_to_bytes("abc€")


def test_unicode_text():
    assert BASIC.encode_text("\xe9") == "w6k="
    assert BASIC.encode_text_to_bytes("\xe9") == b"w6k="
    assert BASIC.encode_text("\xe9", with_padding=False) == "w6k"
    assert BASIC.decode_text("w6k=") == "\xe9"
    assert BASIC.decode_bytes_to_text(b"w6k=") == "\xe9"

    text = "snowman ☃, euro €, smile \U0001f600"
    assert BASIC.decode_text(BASIC.encode_text(text)) == text
    assert URL.decode_bytes_to_text(URL.encode_text_to_bytes(text)) == text
    assert BASIC.encode_text(text) == base64.b64encode(text.encode()).decode()


def test_decode_text_invalid_utf8():
    with pytest.raises(DecodingError):
        BASIC.decode_text("/w==")
    with pytest.raises(DecodingError):
        BASIC.decode_bytes_to_text(b"/w==")


def test_buffer_types():
    assert BASIC.encode_bytes(bytearray(b"Man")) == b"TWFu"
    assert BASIC.encode_bytes(memoryview(b"xManx")[1:4]) == b"TWFu"
    assert BASIC.decode_bytes(bytearray(b"TWFu")) == b"Man"
    assert BASIC.decode_bytes(memoryview(b"TWFu")) == b"Man"
    # multi-byte items are viewed as raw bytes
    words = array.array("H", [0x0102])
    assert BASIC.encode_bytes(words) == BASIC.encode_bytes(words.tobytes())


def test_argument_kinds():
    with pytest.raises(TypeError):
        BASIC.encode_bytes("Man")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        BASIC.encode_bytes(None)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        BASIC.decode_bytes("TWFu")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        BASIC.encode(b"Man")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        BASIC.decode_to_bytes(b"TWFu")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        BASIC.encode_text(b"Man")  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "method",
    [
        "encode",
        "encode_to_bytes",
        "decode",
        "decode_to_bytes",
        "encode_text",
        "encode_text_to_bytes",
        "decode_text",
    ],
)
def test_empty_string(method: str) -> None:
    result = getattr(BASIC, method)("")
    assert not result
    assert type(result) in (str, bytes)


@pytest.mark.parametrize(
    "method",
    [
        "encode_bytes",
        "encode_bytes_to_string",
        "decode_bytes",
        "decode_bytes_to_string",
        "decode_bytes_to_text",
    ],
)
def test_empty_buffer(method: str) -> None:
    assert not getattr(URL, method)(b"")


def test_ignore_padding():
    assert BASIC.decode_to_bytes("TWE", ignore_padding=True) == b"Ma"
    with pytest.raises(DecodingError):
        BASIC.decode_to_bytes("TWE=", ignore_padding=True)
    with pytest.raises(DecodingError):
        BASIC.decode_bytes(b"TWE=", ignore_padding=True)


def test_padding_truncates():
    assert BASIC.decode_to_bytes("TWE=TWFu") == b"Ma"
    assert BASIC.decode("TWE=TWFu") == "Ma"
    assert BASIC.decode_bytes(b"TWE=TWFu") == b"Ma"


def test_allow_concatenation():
    encoded = "AAAA==" + "AAAA=="
    first = BASIC.decode_to_bytes("AAAA==")
    assert BASIC.decode_to_bytes(encoded, allow_concatenation=True) == first * 2
    assert BASIC.decode_to_bytes(encoded) == first

    joined = BASIC.encode_bytes(b"M") + BASIC.encode_bytes(b"Ma")
    assert BASIC.decode_bytes(joined, allow_concatenation=True) == b"MMa"
    assert BASIC.decode_bytes_to_string(joined, allow_concatenation=True) == "MMa"
    assert BASIC.decode_text("TQ==TWE=", allow_concatenation=True) == "MMa"


def test_custom_padding():
    engine = Base64Encoding(HASH64_CHARS, padding="*")
    assert engine.padding == "*"
    encoded = engine.encode_bytes_to_string(b"\x00")
    assert encoded == "..**"
    assert engine.decode_to_bytes(encoded) == b"\x00"
    assert engine.decode_to_bytes("..**..**", allow_concatenation=True) == b"\x00\x00"
    with pytest.raises(DecodingError):
        engine.decode_to_bytes("..==")


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_codec_random(seed: int) -> None:
    rng = random.Random(seed)
    for _ in range(200):
        size = rng.randint(0, 40)
        raw = bytes(rng.getrandbits(8) for _ in range(size))

        padded = BASIC.encode_bytes_to_string(raw)
        assert len(padded) % 4 == 0
        assert padded == base64.b64encode(raw).decode()
        assert BASIC.decode_to_bytes(padded) == raw

        unpadded = BASIC.encode_bytes_to_string(raw, with_padding=False)
        assert "=" not in unpadded
        assert BASIC.decode_to_bytes(unpadded) == raw

        url = URL.encode_bytes(raw)
        assert url == base64.urlsafe_b64encode(raw).rstrip(b"=")
        assert URL.decode_bytes(url) == raw

        latin1 = raw.decode("latin-1")
        assert BASIC.decode(BASIC.encode(latin1)) == latin1


def test_non_contiguous_buffer():
    words = array.array("H", [1, 2, 3, 4])
    strided = memoryview(words)[::2]
    expected = BASIC.encode_bytes(strided.tobytes())
    assert BASIC.encode_bytes(strided) == expected
    assert BASIC.encode_bytes_to_string(memoryview(b"TxWxFxux")[::2]) == "VFdGdQ=="
    assert BASIC.decode_bytes(memoryview(b"TxWxFxux")[::2]) == b"Man"


def test_table():
    assert BASIC.table.symbols == BASIC.alphabet
    assert BASIC.table.padding_code == 0x3D
    assert URL.table.padding_code is None
    assert URL.table.symbol_to_index["_"] == 63
