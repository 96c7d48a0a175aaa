"""
Algorithm tags and the abstract signing / verification capabilities.

Every signing primitive (BLAKE3 keyed hash, Ed25519) implements
TextSigner and/or TextVerifier so the processing layer can treat
them uniformly.
"""

import enum
from abc import ABC, abstractmethod

from .errors import UnsupportedAlgorithmError


class AlgorithmTag(enum.Enum):
    """Closed set of primitives the engine dispatches over."""

    KEYED_HASH      = "blake3"
    ASYMMETRIC_SIGN = "ed25519"
    AUTH_ENCRYPT    = "chacha20"

    @classmethod
    def parse(cls, name: str) -> "AlgorithmTag":
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise UnsupportedAlgorithmError(
                f"Unknown algorithm: {name!r}. "
                f"Available: {[tag.value for tag in cls]}"
            ) from None

    def __str__(self) -> str:
        return self.value


class TextSigner(ABC):
    """Produces a fixed-length signature over a complete payload."""

    @abstractmethod
    def sign(self, data: bytes) -> bytes:
        """Return the signature of *data*."""

    @property
    @abstractmethod
    def algorithm(self) -> AlgorithmTag:
        """Tag of the primitive behind this signer."""


class TextVerifier(ABC):
    """Checks a signature against a complete payload."""

    @abstractmethod
    def verify(self, data: bytes, signature: bytes) -> bool:
        """True if *signature* is valid for *data*; never raises on mismatch."""

    @property
    @abstractmethod
    def algorithm(self) -> AlgorithmTag:
        """Tag of the primitive behind this verifier."""
