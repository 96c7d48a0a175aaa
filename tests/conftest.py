from __future__ import annotations

import random

import pytest


@pytest.fixture
def blake3_key() -> bytes:
    # BLAKE3 reference test-vector key (exactly 32 ASCII bytes)
    return b"whats the Elvish word for friend"


@pytest.fixture
def blake3_hello_hex() -> str:
    """Keyed BLAKE3 of b"hello" under blake3_key."""
    return "fe10868990306d32193ad5922b1b9745d1eda31dabe5304fe31e2374d64c32a1"


@pytest.fixture
def blake3_hello_urlsafe() -> str:
    return "_hCGiZAwbTIZOtWSKxuXRdHtox2r5TBP4x4jdNZMMqE"


@pytest.fixture
def chacha_key() -> bytes:
    return bytes(range(32))


@pytest.fixture
def chacha_nonce() -> bytes:
    return b"unique-nonce"


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(20240519)


@pytest.fixture
def ed25519_pair(seeded_rng) -> tuple[bytes, bytes]:
    from textguard.crypto_engine import Ed25519TextSigner

    signer = Ed25519TextSigner.generate(rng=seeded_rng)
    return signer.secret_bytes(), signer.public_bytes()
