"""Exception hierarchy for the TextGuard crypto engine."""

__all__ = [
    "TextCryptoError",
    "KeyFormatError",
    "EncodingError",
    "AuthenticationError",
    "PlaintextDecodeError",
    "UnsupportedAlgorithmError",
]


class TextCryptoError(Exception):
    """Base exception for every failure raised by the crypto engine."""


class KeyFormatError(TextCryptoError, ValueError):
    """Key, nonce or signature bytes do not fit the algorithm."""


class EncodingError(TextCryptoError, ValueError):
    """Text could not be decoded under the selected encoding."""


class AuthenticationError(TextCryptoError):
    """AEAD tag check failed: wrong key, wrong nonce or tampered data."""


class PlaintextDecodeError(TextCryptoError):
    """Decrypted bytes are not valid UTF-8 text."""


class UnsupportedAlgorithmError(TextCryptoError, ValueError):
    """Algorithm name is unknown or has no strategy for the operation."""
