"""
BLAKE3 keyed hashing — a shared-secret signer and verifier.

Key: 32 bytes
Tag: 32 bytes, deterministic for a given (key, payload)
"""

import hmac
import logging

import blake3

from ..config.settings import Settings
from .base import AlgorithmTag, TextSigner, TextVerifier
from .errors import KeyFormatError
from .key_loader import load_key

logger = logging.getLogger("TextGuard.Blake3")


class Blake3Keyed(TextSigner, TextVerifier):
    """Keyed BLAKE3; the same secret key signs and verifies."""

    KEY_SIZE = Settings.BLAKE3_KEY_SIZE

    def __init__(self, key: bytes):
        if len(key) != self.KEY_SIZE:
            raise KeyFormatError(
                f"BLAKE3 key must be {self.KEY_SIZE} bytes, got {len(key)}"
            )
        self._key = bytes(key)

    @classmethod
    def try_new(cls, key_material: bytes) -> "Blake3Keyed":
        return cls(load_key(key_material, cls.KEY_SIZE, "BLAKE3 key"))

    @property
    def algorithm(self) -> AlgorithmTag:
        return AlgorithmTag.KEYED_HASH

    def sign(self, data: bytes) -> bytes:
        return blake3.blake3(data, key=self._key).digest()

    def verify(self, data: bytes, signature: bytes) -> bool:
        expected = self.sign(data)
        ok = hmac.compare_digest(expected, bytes(signature))
        logger.debug("BLAKE3 verify over %d bytes: %s", len(data), ok)
        return ok
