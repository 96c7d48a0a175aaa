"""
Ed25519 signing — a secret-key signer and a public-key verifier.

Seed / secret key: 32 bytes
Public key:        32 bytes
Signature:         64 bytes

The signer never exposes a verify() and the verifier never holds a
secret key, so the two cannot be swapped.
"""

import logging
import random

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey, Ed25519PublicKey,
)

from ..config.settings import Settings
from ..utils.random_gen import SecureRandom
from .base import AlgorithmTag, TextSigner, TextVerifier
from .errors import KeyFormatError
from .key_loader import load_key

logger = logging.getLogger("TextGuard.Ed25519")

_RAW = serialization.Encoding.Raw

# curve25519 field prime and twisted Edwards constants (RFC 8032, 5.1)
_P       = 2**255 - 19
_D       = -121665 * pow(121666, _P - 2, _P) % _P
_SQRT_M1 = pow(2, (_P - 1) // 4, _P)


def is_valid_point(public_key: bytes) -> bool:
    """
    True if *public_key* decodes to a point on edwards25519.

    RFC 8032 5.1.3: y must be below p, (y^2 - 1) / (d*y^2 + 1) must be a
    square, and x = 0 must not carry a set sign bit.
    """
    if len(public_key) != 32:
        return False
    y_int = int.from_bytes(public_key, "little")
    x_sign = y_int >> 255
    y = y_int & ((1 << 255) - 1)
    if y >= _P:
        return False

    u = (y * y - 1) % _P
    v = (_D * y * y + 1) % _P
    x = u * pow(v, 3, _P) * pow(u * pow(v, 7, _P), (_P - 5) // 8, _P) % _P
    vx2 = v * x * x % _P
    if vx2 == (-u) % _P:
        x = x * _SQRT_M1 % _P
    elif vx2 != u:
        return False
    return not (x == 0 and x_sign == 1)


class Ed25519TextSigner(TextSigner):
    """Signs with an Ed25519 secret key derived from a 32-byte seed."""

    KEY_SIZE = Settings.ED25519_KEY_SIZE

    def __init__(self, seed: bytes):
        if len(seed) != self.KEY_SIZE:
            raise KeyFormatError(
                f"Ed25519 seed must be {self.KEY_SIZE} bytes, got {len(seed)}"
            )
        self._key = Ed25519PrivateKey.from_private_bytes(bytes(seed))

    @classmethod
    def try_new(cls, key_material: bytes) -> "Ed25519TextSigner":
        return cls(load_key(key_material, cls.KEY_SIZE, "Ed25519 secret key"))

    @property
    def algorithm(self) -> AlgorithmTag:
        return AlgorithmTag.ASYMMETRIC_SIGN

    def sign(self, data: bytes) -> bytes:
        return self._key.sign(data)

    def verifier(self) -> "Ed25519TextVerifier":
        """Verifier for the public half of this key."""
        return Ed25519TextVerifier(self.public_bytes())

    def public_bytes(self) -> bytes:
        return self._key.public_key().public_bytes(
            _RAW, serialization.PublicFormat.Raw,
        )

    def secret_bytes(self) -> bytes:
        return self._key.private_bytes(
            _RAW, serialization.PrivateFormat.Raw,
            serialization.NoEncryption(),
        )

    # ── key generation ───────────────────────────────────────────
    @classmethod
    def generate(cls, rng: random.Random | None = None) -> "Ed25519TextSigner":
        """
        Fresh key pair. With *rng* the seed is drawn from it (tests pass
        a seeded random.Random); otherwise from the OS CSPRNG.
        """
        return cls(SecureRandom.generate_bytes(cls.KEY_SIZE, rng=rng))


class Ed25519TextVerifier(TextVerifier):
    """Verifies Ed25519 signatures with a 32-byte public key."""

    KEY_SIZE = Settings.ED25519_KEY_SIZE
    SIG_SIZE = Settings.ED25519_SIG_SIZE

    def __init__(self, public_key: bytes):
        if len(public_key) != self.KEY_SIZE:
            raise KeyFormatError(
                f"Ed25519 public key must be {self.KEY_SIZE} bytes, "
                f"got {len(public_key)}"
            )
        if not is_valid_point(public_key):
            raise KeyFormatError("invalid Ed25519 public key: not a curve point")
        self._key = Ed25519PublicKey.from_public_bytes(bytes(public_key))

    @classmethod
    def try_new(cls, key_material: bytes) -> "Ed25519TextVerifier":
        return cls(load_key(key_material, cls.KEY_SIZE, "Ed25519 public key"))

    @property
    def algorithm(self) -> AlgorithmTag:
        return AlgorithmTag.ASYMMETRIC_SIGN

    def verify(self, data: bytes, signature: bytes) -> bool:
        if len(signature) != self.SIG_SIZE:
            raise KeyFormatError(
                f"Ed25519 signature must be exactly {self.SIG_SIZE} bytes, "
                f"got {len(signature)}"
            )
        try:
            self._key.verify(bytes(signature), data)
        except InvalidSignature:
            logger.debug("Ed25519 signature rejected (%d bytes)", len(data))
            return False
        return True
