"""
Strong-Password Generator
==========================

Random passwords drawn from the operating system CSPRNG via :mod:`secrets`.

Every password contains at least one character from each of four
alphabets. Visually ambiguous characters (``i l o I L O 0 1``) are left
out. The required characters are placed first, the rest are filled from
the union, and the whole buffer is shuffled with Fisher-Yates so the
required characters do not sit at predictable positions.

Thread safety is that of :func:`os.urandom` on the host platform.

References:
    - NIST SP 800-90A Rev. 1 (2015). Recommendation for Random Number
      Generation Using Deterministic Random Bit Generators.
    - Knuth, D. E. (1997). The Art of Computer Programming, Vol. 2,
      Section 3.4.2 (Algorithm P).
"""

from __future__ import annotations

import secrets

from shared.math_utils import clamp

LOWER_ALPHABET = "abcdefghjkmnpqrstuvwxyz"
UPPER_ALPHABET = "ABCDEFGHJKMNPQRSTUVWXYZ"
DIGIT_ALPHABET = "23456789"
SYMBOL_ALPHABET = "!@#$%^&*-_=+?"

ALPHABETS: tuple[str, ...] = (
    LOWER_ALPHABET,
    UPPER_ALPHABET,
    DIGIT_ALPHABET,
    SYMBOL_ALPHABET,
)
FULL_ALPHABET = "".join(ALPHABETS)

MIN_LENGTH = 14
MAX_LENGTH = 24
DEFAULT_LENGTH = 16


class RandomSourceUnavailableError(RuntimeError):
    """The operating system CSPRNG could not be used."""


def generate_strong_password(length: int = DEFAULT_LENGTH) -> str:
    """Generate a random password of ``clamp(length, 14, 24)`` characters.

    Raises:
        RandomSourceUnavailableError: If the OS random source fails.
    """
    target = int(clamp(length, MIN_LENGTH, MAX_LENGTH))
    try:
        chars = [secrets.choice(alphabet) for alphabet in ALPHABETS]
        chars.extend(secrets.choice(FULL_ALPHABET) for _ in range(target - len(chars)))
        _shuffle(chars)
    except (NotImplementedError, OSError) as exc:
        raise RandomSourceUnavailableError(
            "Secure random source unavailable; refusing to generate a password"
        ) from exc
    return "".join(chars)


def _shuffle(chars: list[str]) -> None:
    """In-place Fisher-Yates shuffle using :func:`secrets.randbelow`."""
    for i in range(len(chars) - 1, 0, -1):
        j = secrets.randbelow(i + 1)
        chars[i], chars[j] = chars[j], chars[i]
