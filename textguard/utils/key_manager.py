"""
Persist and load generated key material, one file per key.
"""

import logging
import os

logger = logging.getLogger("TextGuard.KeyManager")


class KeyManager:

    def __init__(self, keys_dir: str | os.PathLike):
        self.keys_dir = os.fspath(keys_dir)
        os.makedirs(self.keys_dir, exist_ok=True)

    def path_for(self, name: str) -> str:
        if os.path.basename(name) != name or name in ("", ".", ".."):
            raise ValueError(f"invalid key file name: {name!r}")
        return os.path.join(self.keys_dir, name)

    # ── save / load ──────────────────────────────────────────────
    def save(self, keys: dict[str, bytes]) -> list[str]:
        """Write each ``name -> bytes`` entry; return the written paths."""
        paths = []
        for name, content in keys.items():
            path = self.path_for(name)
            with open(path, "wb") as f:
                f.write(content)
            logger.info("Wrote %s (%d bytes)", path, len(content))
            paths.append(path)
        return paths

    def load(self, name: str) -> bytes:
        with open(self.path_for(name), "rb") as f:
            return f.read()

    # ── helpers ──────────────────────────────────────────────────
    def key_exists(self, name: str) -> bool:
        return os.path.exists(self.path_for(name))

    def list_keys(self) -> list[str]:
        return sorted(
            f for f in os.listdir(self.keys_dir)
            if os.path.isfile(os.path.join(self.keys_dir, f))
        )
