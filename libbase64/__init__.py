"""libbase64 - configurable base64 encoding library"""

from libbase64.encoding import BASIC, URL, Base64Encoding
from libbase64.exc import DecodingError, EncodingError, ValidationError

__version__ = "1.0.0"

__all__ = [
    "BASIC",
    "URL",
    "Base64Encoding",
    "DecodingError",
    "EncodingError",
    "ValidationError",
]
