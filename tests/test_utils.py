"""Tests for state/bytes/hex conversion helpers."""

import pytest

from rijndael.utils import (
    bytes_to_state,
    copy_state,
    format_state_grid,
    format_words,
    hex_to_bytes,
    hex_to_state,
    key_from_text,
    state_to_bytes,
    state_to_hex,
)


class TestStateConversion:
    """Column-major block <-> state mapping."""

    def test_column_major(self):
        state = bytes_to_state(bytes(range(16)))
        assert state[0] == [0, 4, 8, 12]
        assert state[3] == [3, 7, 11, 15]
        assert state[1][2] == 4 * 2 + 1

    def test_roundtrip(self):
        data = bytes.fromhex("3243f6a8885a308d313198a2e0370734")
        assert state_to_bytes(bytes_to_state(data)) == data
        assert state_to_hex(hex_to_state(data.hex())) == data.hex()

    @pytest.mark.parametrize("length", [0, 15, 17])
    def test_wrong_length(self, length):
        with pytest.raises(ValueError, match="Block must be 16 bytes"):
            bytes_to_state(bytes(length))

    def test_copy_is_deep(self):
        state = bytes_to_state(bytes(16))
        dup = copy_state(state)
        dup[0][0] = 0xff
        assert state[0][0] == 0


class TestHexAndFormatting:
    """Hex parsing and display helpers."""

    def test_hex_to_bytes_tolerant(self):
        assert hex_to_bytes("0x00 11\n22FF") == bytes([0x00, 0x11, 0x22, 0xff])

    def test_hex_to_bytes_rejects_garbage(self):
        with pytest.raises(ValueError):
            hex_to_bytes("zz")

    def test_format_state_grid(self):
        grid = format_state_grid(hex_to_state("193de3bea0f4e22b9ac68d2ae9f84808"))
        assert grid.splitlines() == [
            "  19 a0 9a e9",
            "  3d f4 c6 f8",
            "  e3 e2 8d 48",
            "  be 2b 2a 08",
        ]

    def test_format_words(self):
        assert format_words([0xa0fafe17, 0x1]) == "a0fafe17 00000001"


class TestKeyFromText:
    """Text keys are zero-padded to the next key size."""

    @pytest.mark.parametrize("text,size", [
        ("", 16),
        ("hello", 16),
        ("x" * 16, 16),
        ("x" * 17, 24),
        ("x" * 24, 24),
        ("x" * 25, 32),
        ("x" * 32, 32),
    ])
    def test_padding(self, text, size):
        key = key_from_text(text)
        assert len(key) == size
        assert key.startswith(text.encode())
        assert key[len(text):] == bytes(size - len(text))

    def test_too_long(self):
        with pytest.raises(ValueError, match="longer than 256 bits"):
            key_from_text("x" * 33)
