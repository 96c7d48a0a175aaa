import os


class Settings:
    """Centralised application configuration."""

    # ── application ──────────────────────────────────────────────
    APP_NAME    = "TextGuard"
    APP_VERSION = "1.0.0"

    # ── key material sizes (bytes) ───────────────────────────────
    BLAKE3_KEY_SIZE     = 32
    ED25519_KEY_SIZE    = 32
    ED25519_SIG_SIZE    = 64
    CHACHA20_KEY_SIZE   = 32
    CHACHA20_NONCE_SIZE = 12

    # ── key generation ───────────────────────────────────────────
    BLAKE3_KEY_FILE  = "blake3.txt"
    ED25519_SK_FILE  = "ed25519.sk"
    ED25519_PK_FILE  = "ed25519.pk"
    PASSWORD_LENGTH  = 16

    # ── text encodings ───────────────────────────────────────────
    SIGNATURE_ENCODING  = "urlsafe"
    CIPHERTEXT_ENCODING = "standard"

    # ── logging ──────────────────────────────────────────────────
    LOG_LEVEL  = os.environ.get("TEXTGUARD_LOG_LEVEL", "WARNING")
    LOG_FORMAT = "[%(asctime)s] [%(levelname)-8s] %(name)s — %(message)s"
    LOG_DATEFMT = "%H:%M:%S"
