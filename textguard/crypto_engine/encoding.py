"""
Reversible binary-to-text encodings for signatures and ciphertext.

    STANDARD  → RFC 4648 alphabet (+/), padded with '='
    URL_SAFE  → URL-safe alphabet (-_), no padding
"""

import base64
import binascii
import enum

from .errors import EncodingError, UnsupportedAlgorithmError


class TextEncoding(enum.Enum):
    STANDARD = "standard"
    URL_SAFE = "urlsafe"

    @classmethod
    def parse(cls, name: str) -> "TextEncoding":
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise UnsupportedAlgorithmError(
                f"Unknown encoding: {name!r}. "
                f"Available: {[enc.value for enc in cls]}"
            ) from None

    def __str__(self) -> str:
        return self.value


def encode(data: bytes, encoding: TextEncoding) -> str:
    if encoding is TextEncoding.STANDARD:
        return base64.b64encode(data).decode("ascii")
    if encoding is TextEncoding.URL_SAFE:
        return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")
    raise UnsupportedAlgorithmError(f"Unsupported encoding: {encoding!r}")


def decode(text: str | bytes, encoding: TextEncoding) -> bytes:
    """
    Inverse of encode(). Surrounding whitespace (e.g. the trailing
    newline of a file or stdin) is ignored; any other character outside
    the alphabet raises EncodingError.
    """
    if isinstance(text, str):
        try:
            raw = text.strip().encode("ascii")
        except UnicodeEncodeError as exc:
            raise EncodingError(f"non-ASCII input for {encoding}") from exc
    else:
        raw = bytes(text).strip()

    try:
        if encoding is TextEncoding.STANDARD:
            return base64.b64decode(raw, validate=True)
        if encoding is TextEncoding.URL_SAFE:
            if b"=" in raw or b"+" in raw or b"/" in raw:
                raise EncodingError("urlsafe input must not contain '=', '+' or '/'")
            if len(raw) % 4 == 1:
                raise EncodingError("invalid urlsafe input length")
            padded = raw + b"=" * (-len(raw) % 4)
            return base64.b64decode(
                padded.translate(bytes.maketrans(b"-_", b"+/")), validate=True
            )
    except binascii.Error as exc:
        raise EncodingError(f"input is not valid {encoding} base64: {exc}") from exc
    raise UnsupportedAlgorithmError(f"Unsupported encoding: {encoding!r}")
