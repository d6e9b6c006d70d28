"""
Rijndael key expansion (FIPS-197 Section 5.2).

The cipher key is split into Nk big-endian 32-bit words and expanded to
4 * (Nr + 1) words; words 4r..4r+3 form round key r.

  variant  Nk  Nr  schedule words
  AES-128   4  10  44
  AES-192   6  12  52
  AES-256   8  14  60
"""

from __future__ import annotations

from enum import Enum

from .sbox import substitute_word


# Round constants, left-aligned into words: x^(i-1) in GF(2^8)
RCON = (
    0x01000000,
    0x02000000,
    0x04000000,
    0x08000000,
    0x10000000,
    0x20000000,
    0x40000000,
    0x80000000,
    0x1b000000,
    0x36000000,
)


class InvalidKeyLength(ValueError):
    """Raised when a key is not 16, 24 or 32 bytes long."""

    def __init__(self, length: int, message: str | None = None):
        self.length = length
        if message is None:
            message = f"Key must be 16, 24 or 32 bytes, got {length}"
        super().__init__(message)


class KeyVariant(Enum):
    """Key size configuration; the value is the key length in bytes."""

    AES128 = 16
    AES192 = 24
    AES256 = 32

    @classmethod
    def from_key_length(cls, length: int) -> KeyVariant:
        """Select the variant for a key of the given byte length."""
        for variant in cls:
            if variant.value == length:
                return variant
        raise InvalidKeyLength(length)

    @property
    def bits(self) -> int:
        return self.value * 8

    @property
    def key_words(self) -> int:
        """Nk: number of 32-bit words in the cipher key."""
        return self.value // 4

    @property
    def rounds(self) -> int:
        """Nr: 10, 12 or 14."""
        return self.key_words + 6

    @property
    def schedule_words(self) -> int:
        return 4 * (self.rounds + 1)

    def __str__(self) -> str:
        return f"AES-{self.bits}"


def rotate_word(w: int) -> int:
    """Cyclically rotate a word left by one byte (MSB wraps to LSB)."""
    return ((w << 8) & 0xffffffff) | (w >> 24)


def bytes_to_words(data: bytes) -> list[int]:
    """Split bytes into big-endian 32-bit words."""
    if len(data) % 4 != 0:
        raise ValueError(f"Length must be a multiple of 4, got {len(data)}")
    return [int.from_bytes(data[i:i + 4], "big") for i in range(0, len(data), 4)]


def words_to_bytes(words) -> bytes:
    """Join 32-bit words into big-endian bytes."""
    return b"".join(w.to_bytes(4, "big") for w in words)


def expand_key(key: bytes, variant: KeyVariant | None = None) -> tuple[int, ...]:
    """
    Expand a cipher key into the full round key schedule.

    Args:
        key: 16, 24 or 32 byte cipher key
        variant: Expected variant; inferred from the key length if omitted

    Returns:
        Tuple of 4 * (Nr + 1) words

    Raises:
        InvalidKeyLength: If the key length is not 16/24/32 or does not
            match the requested variant
    """
    actual = KeyVariant.from_key_length(len(key))
    if variant is not None and variant is not actual:
        raise InvalidKeyLength(
            len(key),
            f"{variant} requires a {variant.value}-byte key, got {len(key)}",
        )

    n = actual.key_words
    w = bytes_to_words(key)

    for i in range(n, actual.schedule_words):
        temp = w[i - 1]
        if i % n == 0:
            temp = substitute_word(rotate_word(temp)) ^ RCON[i // n - 1]
        elif n > 6 and i % n == 4:
            temp = substitute_word(temp)
        w.append(w[i - n] ^ temp)

    return tuple(w)


def round_key(schedule: tuple[int, ...], round_index: int) -> tuple[int, ...]:
    """Return the four words of round key ``round_index``."""
    return tuple(schedule[4 * round_index:4 * round_index + 4])
