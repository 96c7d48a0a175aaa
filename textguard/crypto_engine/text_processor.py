"""
TextCrypto — algorithm dispatch for signing, verification, key
generation and encryption of text payloads.

Usage:
    sig = process_text_sign(b"hello", key, AlgorithmTag.KEYED_HASH)
    ok  = process_text_verify(b"hello", key, sig, AlgorithmTag.KEYED_HASH)

    text = process_text_encrypt(b"hello", key, nonce, TextEncoding.STANDARD)
    data = process_text_decrypt(text, key, nonce, TextEncoding.STANDARD)

Payload sources may be bytes or any binary reader (open file,
sys.stdin.buffer, io.BytesIO); readers are consumed in full before
the operation runs.
"""

import logging
import random
from typing import BinaryIO, Union

from ..config.settings import Settings
from ..utils.random_gen import SecureRandom
from .base import AlgorithmTag, TextSigner, TextVerifier
from .chacha_crypto import ChaCha20TextCipher
from .ed25519_crypto import Ed25519TextSigner, Ed25519TextVerifier
from .encoding import TextEncoding
from .errors import UnsupportedAlgorithmError
from .hash_crypto import Blake3Keyed

logger = logging.getLogger("TextGuard.TextCrypto")

Source = Union[bytes, bytearray, memoryview, str, BinaryIO]


def read_source(source: Source) -> bytes:
    """Read a payload fully into memory. OSError from a reader propagates."""
    if hasattr(source, "read"):
        data = source.read()
    else:
        data = source
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


class TextCryptoFactory:
    """
    Create the strategy object for an AlgorithmTag.

    The set of tags is closed; each method handles every tag explicitly
    and rejects those without a strategy for the operation.
    """

    _REGISTRY: dict[AlgorithmTag, dict] = {
        AlgorithmTag.KEYED_HASH: {
            "primitive": "BLAKE3 keyed hash",
            "key_size":  Settings.BLAKE3_KEY_SIZE,
            "sig_size":  Settings.BLAKE3_KEY_SIZE,
            "category":  "MAC",
        },
        AlgorithmTag.ASYMMETRIC_SIGN: {
            "primitive": "Ed25519",
            "key_size":  Settings.ED25519_KEY_SIZE,
            "sig_size":  Settings.ED25519_SIG_SIZE,
            "category":  "Signature",
        },
        AlgorithmTag.AUTH_ENCRYPT: {
            "primitive":  "ChaCha20-Poly1305",
            "key_size":   Settings.CHACHA20_KEY_SIZE,
            "nonce_size": Settings.CHACHA20_NONCE_SIZE,
            "category":   "AEAD",
        },
    }

    # ── factory methods ──────────────────────────────────────────

    @classmethod
    def signer(cls, algorithm: AlgorithmTag, key: bytes) -> TextSigner:
        if algorithm is AlgorithmTag.KEYED_HASH:
            signer = Blake3Keyed.try_new(key)
        elif algorithm is AlgorithmTag.ASYMMETRIC_SIGN:
            signer = Ed25519TextSigner.try_new(key)
        elif algorithm is AlgorithmTag.AUTH_ENCRYPT:
            raise UnsupportedAlgorithmError(f"{algorithm} cannot sign")
        else:
            raise UnsupportedAlgorithmError(f"Unknown algorithm: {algorithm!r}")
        logger.debug("Created signer: %s", algorithm)
        return signer

    @classmethod
    def verifier(cls, algorithm: AlgorithmTag, key: bytes) -> TextVerifier:
        if algorithm is AlgorithmTag.KEYED_HASH:
            verifier = Blake3Keyed.try_new(key)
        elif algorithm is AlgorithmTag.ASYMMETRIC_SIGN:
            verifier = Ed25519TextVerifier.try_new(key)
        elif algorithm is AlgorithmTag.AUTH_ENCRYPT:
            raise UnsupportedAlgorithmError(f"{algorithm} cannot verify")
        else:
            raise UnsupportedAlgorithmError(f"Unknown algorithm: {algorithm!r}")
        logger.debug("Created verifier: %s", algorithm)
        return verifier

    @staticmethod
    def cipher(key: bytes, nonce: bytes) -> ChaCha20TextCipher:
        return ChaCha20TextCipher.try_new(key, nonce)

    @classmethod
    def generate(cls, algorithm: AlgorithmTag,
                 rng: random.Random | None = None) -> dict[str, bytes]:
        """
        Fresh key material as ``{file name: raw bytes}``.

        The BLAKE3 key is a 32-character password (printable, drawn from
        the password alphabets) rather than 32 uniform bytes, so it can
        be stored and copied as text. That is about 190 bits of entropy.
        """
        if algorithm is AlgorithmTag.KEYED_HASH:
            key = SecureRandom.generate_password(
                Settings.BLAKE3_KEY_SIZE, rng=rng,
            )
            keys = {Settings.BLAKE3_KEY_FILE: key.encode("ascii")}
        elif algorithm is AlgorithmTag.ASYMMETRIC_SIGN:
            sk = Ed25519TextSigner.generate(rng=rng)
            keys = {
                Settings.ED25519_SK_FILE: sk.secret_bytes(),
                Settings.ED25519_PK_FILE: sk.public_bytes(),
            }
        elif algorithm is AlgorithmTag.AUTH_ENCRYPT:
            raise UnsupportedAlgorithmError(
                f"{algorithm} keys and nonces are supplied by the caller"
            )
        else:
            raise UnsupportedAlgorithmError(f"Unknown algorithm: {algorithm!r}")
        logger.info("Generated %s key material: %s", algorithm, sorted(keys))
        return keys

    # ── discovery ────────────────────────────────────────────────

    @classmethod
    def list_algorithms(cls) -> list[str]:
        return [tag.value for tag in cls._REGISTRY]

    @classmethod
    def get_info(cls, algorithm: AlgorithmTag) -> dict:
        if algorithm not in cls._REGISTRY:
            raise UnsupportedAlgorithmError(f"Unknown algorithm: {algorithm!r}")
        return {"name": algorithm.value, **cls._REGISTRY[algorithm]}


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Process functions — one complete payload per call
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def process_text_sign(source: Source, key: bytes,
                      algorithm: AlgorithmTag) -> bytes:
    signer = TextCryptoFactory.signer(algorithm, key)
    data   = read_source(source)
    sig    = signer.sign(data)
    logger.debug("Signed %d bytes with %s", len(data), algorithm)
    return sig


def process_text_verify(source: Source, key: bytes, signature: bytes,
                        algorithm: AlgorithmTag) -> bool:
    verifier = TextCryptoFactory.verifier(algorithm, key)
    data     = read_source(source)
    ok       = verifier.verify(data, bytes(signature))
    logger.debug("Verified %d bytes with %s: %s", len(data), algorithm, ok)
    return ok


def process_text_key_generate(algorithm: AlgorithmTag,
                              rng: random.Random | None = None
                              ) -> dict[str, bytes]:
    return TextCryptoFactory.generate(algorithm, rng=rng)


def process_text_encrypt(source: Source, key: bytes, nonce: bytes,
                         encoding: TextEncoding = TextEncoding.STANDARD) -> str:
    cipher = TextCryptoFactory.cipher(key, nonce)
    return cipher.encrypt(read_source(source), encoding)


def process_text_decrypt(source: Source, key: bytes, nonce: bytes,
                         encoding: TextEncoding = TextEncoding.STANDARD) -> bytes:
    cipher = TextCryptoFactory.cipher(key, nonce)
    return cipher.decrypt(read_source(source), encoding)


def process_text_decrypt_str(source: Source, key: bytes, nonce: bytes,
                             encoding: TextEncoding = TextEncoding.STANDARD
                             ) -> str:
    cipher = TextCryptoFactory.cipher(key, nonce)
    return cipher.decrypt_str(read_source(source), encoding)
