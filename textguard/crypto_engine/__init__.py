"""
TextGuard Crypto Engine — keyed hashing, Ed25519 signatures and
ChaCha20-Poly1305 encryption for complete in-memory payloads.
"""

# ── Tags, capabilities, errors ───────────────────────────────────
from .base       import AlgorithmTag, TextSigner, TextVerifier
from .encoding   import TextEncoding, encode, decode
from .key_loader import load_key
from .errors     import (
    TextCryptoError, KeyFormatError, EncodingError, AuthenticationError,
    PlaintextDecodeError, UnsupportedAlgorithmError,
)

# ── Primitives ───────────────────────────────────────────────────
from .hash_crypto    import Blake3Keyed
from .ed25519_crypto import Ed25519TextSigner, Ed25519TextVerifier
from .chacha_crypto  import ChaCha20TextCipher

# ── Dispatch ─────────────────────────────────────────────────────
from .text_processor import (
    TextCryptoFactory, read_source,
    process_text_sign, process_text_verify, process_text_key_generate,
    process_text_encrypt, process_text_decrypt, process_text_decrypt_str,
)

__all__ = [
    # Tags & interfaces
    "AlgorithmTag", "TextSigner", "TextVerifier",
    "TextEncoding", "encode", "decode", "load_key",
    # Errors
    "TextCryptoError", "KeyFormatError", "EncodingError",
    "AuthenticationError", "PlaintextDecodeError",
    "UnsupportedAlgorithmError",
    # Primitives
    "Blake3Keyed", "Ed25519TextSigner", "Ed25519TextVerifier",
    "ChaCha20TextCipher",
    # Dispatch
    "TextCryptoFactory", "read_source",
    "process_text_sign", "process_text_verify", "process_text_key_generate",
    "process_text_encrypt", "process_text_decrypt", "process_text_decrypt_str",
]
