"""
Rijndael / AES block cipher engine.

Single-block encryption and decryption under 128, 192 and 256-bit keys,
built from GF(2^8) arithmetic, the key schedule and the round pipeline.
"""

__version__ = "0.1.0"

# Default test values from FIPS-197 Appendix C.1
DEFAULT_KEY_HEX = "000102030405060708090a0b0c0d0e0f"
DEFAULT_PT_HEX = "00112233445566778899aabbccddeeff"
DEFAULT_CT_HEX = "69c4e0d86a7b0430d8cdb78070b4c55a"

from .key_schedule import KeyVariant, InvalidKeyLength, expand_key
from .cipher import BlockCipher, encrypt_block, decrypt_block, encrypt, decrypt
from .trace import TraceRecorder

__all__ = [
    "KeyVariant",
    "InvalidKeyLength",
    "expand_key",
    "BlockCipher",
    "encrypt_block",
    "decrypt_block",
    "encrypt",
    "decrypt",
    "TraceRecorder",
]
