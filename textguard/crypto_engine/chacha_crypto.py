"""
ChaCha20-Poly1305 — AEAD cipher for text payloads.

Key:   32 bytes (256 bits)
Nonce: 12 bytes (96 bits), supplied by the caller
Tag:   16 bytes (128 bits) — appended to the ciphertext by the library

The nonce is NOT generated here and NOT checked for reuse. Encrypting
two payloads under the same (key, nonce) breaks confidentiality and
integrity; callers must guarantee a fresh nonce per key.
"""

import logging

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305

from ..config.settings import Settings
from .encoding import TextEncoding, decode, encode
from .errors import AuthenticationError, KeyFormatError, PlaintextDecodeError
from .key_loader import load_key

logger = logging.getLogger("TextGuard.ChaCha20")


class ChaCha20TextCipher:
    """
    ChaCha20-Poly1305 with a fixed (key, nonce).

    Output format:  text_encoding( ciphertext + Poly1305 tag 16B )
    """
    KEY_SIZE   = Settings.CHACHA20_KEY_SIZE
    NONCE_SIZE = Settings.CHACHA20_NONCE_SIZE
    TAG_SIZE   = 16

    def __init__(self, key: bytes, nonce: bytes):
        if len(key) != self.KEY_SIZE:
            raise KeyFormatError(
                f"ChaCha20 key must be {self.KEY_SIZE} bytes, got {len(key)}"
            )
        if len(nonce) != self.NONCE_SIZE:
            raise KeyFormatError(
                f"ChaCha20 nonce must be {self.NONCE_SIZE} bytes, "
                f"got {len(nonce)}"
            )
        self._nonce  = bytes(nonce)
        self._chacha = ChaCha20Poly1305(bytes(key))

    @classmethod
    def try_new(cls, key_material: bytes,
                nonce_material: bytes) -> "ChaCha20TextCipher":
        return cls(
            load_key(key_material, cls.KEY_SIZE, "ChaCha20 key"),
            load_key(nonce_material, cls.NONCE_SIZE, "ChaCha20 nonce"),
        )

    # ── raw bytes ────────────────────────────────────────────────
    def encrypt_bytes(self, plaintext: bytes) -> bytes:
        return self._chacha.encrypt(self._nonce, plaintext, None)

    def decrypt_bytes(self, data: bytes) -> bytes:
        try:
            return self._chacha.decrypt(self._nonce, data, None)
        except InvalidTag as exc:
            raise AuthenticationError(
                "decryption failed: wrong key, wrong nonce or corrupted data"
            ) from exc

    # ── text-encoded ─────────────────────────────────────────────
    def encrypt(self, plaintext: bytes,
                encoding: TextEncoding = TextEncoding.STANDARD) -> str:
        ct = self.encrypt_bytes(plaintext)
        logger.debug(
            "Encrypted %d bytes -> %d bytes (%s)",
            len(plaintext), len(ct), encoding,
        )
        return encode(ct, encoding)

    def decrypt(self, text: str | bytes,
                encoding: TextEncoding = TextEncoding.STANDARD) -> bytes:
        ct = decode(text, encoding)
        pt = self.decrypt_bytes(ct)
        logger.debug("Decrypted %d bytes -> %d bytes", len(ct), len(pt))
        return pt

    def decrypt_str(self, text: str | bytes,
                    encoding: TextEncoding = TextEncoding.STANDARD) -> str:
        """decrypt() followed by strict UTF-8 decoding."""
        pt = self.decrypt(text, encoding)
        try:
            return pt.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise PlaintextDecodeError(
                f"decrypted payload is not valid UTF-8: {exc}"
            ) from exc
