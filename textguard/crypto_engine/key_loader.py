"""
Key material loader — turns an opaque byte buffer into a fixed-size key.

Only the first *required_len* bytes are used. A longer buffer is
accepted and its tail silently ignored (a whole key file with a
trailing newline still loads), so callers passing the wrong file get
no warning here. A shorter buffer is always rejected; nothing is
ever zero-padded.
"""

import logging

from .errors import KeyFormatError

logger = logging.getLogger("TextGuard.KeyLoader")


def load_key(raw: bytes, required_len: int, what: str = "key") -> bytes:
    """Return ``raw[:required_len]`` or raise KeyFormatError if too short."""
    if required_len <= 0:
        raise ValueError(f"required_len must be positive, got {required_len}")

    raw = bytes(raw)
    if len(raw) < required_len:
        raise KeyFormatError(
            f"{what} must be at least {required_len} bytes, got {len(raw)}"
        )
    if len(raw) > required_len:
        logger.debug(
            "%s buffer is %d bytes; using the first %d",
            what, len(raw), required_len,
        )
    return raw[:required_len]
