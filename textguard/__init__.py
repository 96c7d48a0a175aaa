"""
TextGuard — sign, verify, encrypt and decrypt text payloads with
BLAKE3, Ed25519 and ChaCha20-Poly1305.
"""

from .config.settings import Settings

__version__ = Settings.APP_VERSION

__all__ = ["Settings", "__version__"]
