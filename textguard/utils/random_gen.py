"""
Random value generators — raw key bytes and human-readable passwords.

Every generator accepts an optional ``rng`` (any random.Random-like
object providing choice/shuffle/randbytes). Without one, the OS
CSPRNG is used; tests pass a seeded random.Random for reproducible
output.
"""

import os
import random
import secrets

# look-alike characters (O/0, l/1 …) are left out on purpose
UPPER  = "ABCDEFGHJKLMNPQRSTUVWXYZ"
LOWER  = "abcdefghijkmnopqrstuvwxyz"
NUMBER = "123456789"
SYMBOL = "!@#$%^&*_"


class SecureRandom:

    @staticmethod
    def generate_bytes(length: int, rng: random.Random | None = None) -> bytes:
        if rng is None:
            return os.urandom(length)
        return rng.randbytes(length)

    @staticmethod
    def generate_password(length: int = 16,
                          uppercase: bool = True,
                          lowercase: bool = True,
                          number: bool = True,
                          symbol: bool = True,
                          rng: random.Random | None = None) -> str:
        """
        Uniform selection over the enabled alphabets, with at least one
        character from each enabled class. Not a KDF: the output is
        meant to be typed or read by a human.
        """
        rng = rng or secrets.SystemRandom()

        classes = [alphabet for enabled, alphabet in (
            (uppercase, UPPER),
            (lowercase, LOWER),
            (number,    NUMBER),
            (symbol,    SYMBOL),
        ) if enabled]

        if not classes:
            raise ValueError("at least one character class must be enabled")
        if length < len(classes):
            raise ValueError(
                f"length {length} is too short for {len(classes)} "
                f"character classes"
            )

        chars    = "".join(classes)
        password = [rng.choice(alphabet) for alphabet in classes]
        password += [rng.choice(chars) for _ in range(length - len(password))]

        # the guaranteed characters sit at fixed positions until shuffled
        rng.shuffle(password)
        return "".join(password)
