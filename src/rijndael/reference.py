"""
Reference AES implementation using PyCryptodome for verification.
"""

from Crypto.Cipher import AES

from .key_schedule import InvalidKeyLength
from .utils import BLOCK_SIZE, KEY_SIZES


def _check_inputs(key: bytes, block: bytes) -> None:
    if len(key) not in KEY_SIZES:
        raise InvalidKeyLength(len(key))
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"Block must be 16 bytes, got {len(block)}")


def reference_encrypt(key: bytes, plaintext: bytes) -> bytes:
    """
    Encrypt a single 16-byte block with PyCryptodome (AES-ECB, one block).

    Args:
        key: 16, 24 or 32 byte AES key
        plaintext: 16-byte plaintext block

    Returns:
        16-byte ciphertext
    """
    _check_inputs(key, plaintext)
    return AES.new(key, AES.MODE_ECB).encrypt(plaintext)


def reference_decrypt(key: bytes, ciphertext: bytes) -> bytes:
    """Decrypt a single 16-byte block with PyCryptodome."""
    _check_inputs(key, ciphertext)
    return AES.new(key, AES.MODE_ECB).decrypt(ciphertext)


def validate_against_reference(
    key: bytes, plaintext: bytes, candidate_ciphertext: bytes
) -> tuple[bool, str]:
    """
    Validate a candidate ciphertext against the reference.

    Returns:
        Tuple of (is_correct, error_detail)
    """
    expected = reference_encrypt(key, plaintext)
    if candidate_ciphertext == expected:
        return True, ""
    return False, (
        f"Ciphertext mismatch: expected {expected.hex()}, "
        f"got {candidate_ciphertext.hex()}"
    )
