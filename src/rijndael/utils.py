"""
Conversions between blocks, states, words and hex text.

The state is 4x4 bytes in column-major order, state[row][col]:

  block[0]  -> state[0][0]    block[4]  -> state[0][1]   ...
  block[1]  -> state[1][0]    block[5]  -> state[1][1]
  block[2]  -> state[2][0]    block[6]  -> state[2][1]
  block[3]  -> state[3][0]    block[7]  -> state[3][1]   block[15] -> state[3][3]
"""

from __future__ import annotations

BLOCK_SIZE = 16
KEY_SIZES = (16, 24, 32)


def bytes_to_state(block: bytes) -> list[list[int]]:
    """
    Load a 16-byte block into a 4x4 state.

    Raises:
        ValueError: If the block is not 16 bytes
    """
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"Block must be 16 bytes, got {len(block)}")
    return [[block[4 * col + row] for col in range(4)] for row in range(4)]


def state_to_bytes(state: list[list[int]]) -> bytes:
    """Flatten a 4x4 state back to 16 bytes (column-major)."""
    return bytes(state[row][col] for col in range(4) for row in range(4))


def copy_state(state: list[list[int]]) -> list[list[int]]:
    return [row[:] for row in state]


def hex_to_bytes(hex_str: str) -> bytes:
    """
    Parse a hex string, tolerating whitespace and an optional 0x prefix.

    Raises:
        ValueError: On non-hex characters or an odd number of digits
    """
    cleaned = "".join(hex_str.split()).lower()
    if cleaned.startswith("0x"):
        cleaned = cleaned[2:]
    return bytes.fromhex(cleaned)


def state_to_hex(state: list[list[int]]) -> str:
    return state_to_bytes(state).hex()


def hex_to_state(hex_str: str) -> list[list[int]]:
    return bytes_to_state(hex_to_bytes(hex_str))


def format_words(words) -> str:
    """Format words as space-separated 8-digit hex groups."""
    return " ".join(f"{w:08x}" for w in words)


def format_state_grid(state: list[list[int]]) -> str:
    """
    Format state as a readable 4x4 grid, one row per line.

      19 a0 9a e9
      3d f4 c6 f8
      e3 e2 8d 48
      be 2b 2a 08
    """
    return "\n".join(
        "  " + " ".join(f"{state[row][col]:02x}" for col in range(4))
        for row in range(4)
    )


def key_from_text(text: str) -> bytes:
    """
    Turn a text key into cipher key bytes.

    The UTF-8 encoding is zero-padded up to the next supported key size
    (16, 24 or 32 bytes).

    Raises:
        ValueError: If the encoded text is longer than 32 bytes
    """
    raw = text.encode("utf-8")
    for size in KEY_SIZES:
        if len(raw) <= size:
            return raw + bytes(size - len(raw))
    raise ValueError(f"Key text is {len(raw) * 8} bits, longer than 256 bits")
