"""
Tests for the round transform pipeline.

Verifies:
- ShiftRows / InvShiftRows
- AddRoundKey byte placement
- FIPS-197 Appendix B round-1 intermediates
- FIPS-197 Appendix C vectors for all key sizes, both directions
- Round trip and block-length validation
"""

import random
from concurrent.futures import ThreadPoolExecutor

import pytest

from rijndael import DEFAULT_KEY_HEX, DEFAULT_PT_HEX, DEFAULT_CT_HEX
from rijndael.cipher import (
    BlockCipher,
    add_round_key,
    decrypt,
    decrypt_block,
    encrypt,
    encrypt_block,
    inverse_shift_rows,
    shift_rows,
)
from rijndael.gf import mix_columns
from rijndael.key_schedule import InvalidKeyLength, KeyVariant, expand_key
from rijndael.sbox import sub_bytes
from rijndael.utils import bytes_to_state, hex_to_state, state_to_hex
from rijndael.vectors import FIPS_197_TEST_VECTORS


APPENDIX_B_KEY = "2b7e151628aed2a6abf7158809cf4f3c"


def numbered_state() -> list[list[int]]:
    return bytes_to_state(bytes(range(16)))


class TestShiftRows:
    """Test row permutation."""

    def test_shift_rows_layout(self):
        state = numbered_state()
        # rows before: [0 4 8 12] [1 5 9 13] [2 6 10 14] [3 7 11 15]
        assert shift_rows(state) == [
            [0, 4, 8, 12],
            [5, 9, 13, 1],
            [10, 14, 2, 6],
            [15, 3, 7, 11],
        ]

    def test_inverse_shift_rows_layout(self):
        assert inverse_shift_rows(numbered_state()) == [
            [0, 4, 8, 12],
            [13, 1, 5, 9],
            [10, 14, 2, 6],
            [7, 11, 15, 3],
        ]

    @pytest.mark.parametrize("seed", range(5))
    def test_roundtrip(self, seed):
        rng = random.Random(seed)
        state = bytes_to_state(rng.randbytes(16))
        assert inverse_shift_rows(shift_rows(state)) == state
        assert shift_rows(inverse_shift_rows(state)) == state

    def test_does_not_modify_input(self):
        state = numbered_state()
        shift_rows(state)
        assert state == numbered_state()


class TestAddRoundKey:
    """Test round key mixing."""

    def test_round_zero_xors_key_bytes(self):
        key = bytes(range(16))
        schedule = expand_key(key)
        state = bytes_to_state(bytes(16))

        assert add_round_key(schedule, 0, state) == bytes_to_state(key)

    def test_appendix_b_round_zero(self):
        schedule = expand_key(bytes.fromhex(APPENDIX_B_KEY))
        state = bytes_to_state(bytes.fromhex("3243f6a8885a308d313198a2e0370734"))

        out = add_round_key(schedule, 0, state)

        assert state_to_hex(out) == "193de3bea0f4e22b9ac68d2ae9f84808"

    def test_self_inverse(self):
        schedule = expand_key(bytes(range(32)))
        state = numbered_state()
        assert add_round_key(schedule, 7, add_round_key(schedule, 7, state)) == state


class TestAppendixBRoundOne:
    """Step through round 1 of the FIPS-197 Appendix B example."""

    def test_round_one_steps(self):
        schedule = expand_key(bytes.fromhex(APPENDIX_B_KEY))
        state = hex_to_state("193de3bea0f4e22b9ac68d2ae9f84808")

        state = sub_bytes(state)
        assert state_to_hex(state) == "d42711aee0bf98f1b8b45de51e415230"
        state = shift_rows(state)
        assert state_to_hex(state) == "d4bf5d30e0b452aeb84111f11e2798e5"
        state = mix_columns(state)
        assert state_to_hex(state) == "046681e5e0cb199a48f8d37a2806264c"
        state = add_round_key(schedule, 1, state)
        assert state_to_hex(state) == "a49c7ff2689f352b6b5bea43026a5049"


class TestKnownVectors:
    """FIPS-197 and NIST known-answer tests."""

    @pytest.mark.parametrize(
        "vec", FIPS_197_TEST_VECTORS, ids=[v["name"] for v in FIPS_197_TEST_VECTORS]
    )
    def test_encrypt(self, vec):
        variant = KeyVariant.from_key_length(len(vec["key"]))
        schedule = expand_key(vec["key"], variant)
        assert encrypt_block(vec["plaintext"], variant, schedule) == vec["ciphertext"]

    @pytest.mark.parametrize(
        "vec", FIPS_197_TEST_VECTORS, ids=[v["name"] for v in FIPS_197_TEST_VECTORS]
    )
    def test_decrypt(self, vec):
        variant = KeyVariant.from_key_length(len(vec["key"]))
        schedule = expand_key(vec["key"], variant)
        assert decrypt_block(vec["ciphertext"], variant, schedule) == vec["plaintext"]

    def test_default_constants(self):
        key = bytes.fromhex(DEFAULT_KEY_HEX)
        assert encrypt(key, bytes.fromhex(DEFAULT_PT_HEX)).hex() == DEFAULT_CT_HEX
        assert decrypt(key, bytes.fromhex(DEFAULT_CT_HEX)).hex() == DEFAULT_PT_HEX


class TestBlockCipher:
    """Test the key-bound cipher object."""

    @pytest.mark.parametrize("length,variant", [
        (16, KeyVariant.AES128),
        (24, KeyVariant.AES192),
        (32, KeyVariant.AES256),
    ])
    def test_variant_selection(self, length, variant):
        cipher = BlockCipher(bytes(length))
        assert cipher.variant is variant
        assert cipher.rounds == variant.rounds
        assert len(cipher.schedule) == variant.schedule_words

    @pytest.mark.parametrize("key_size", [16, 24, 32])
    @pytest.mark.parametrize("seed", range(5))
    def test_roundtrip(self, key_size, seed):
        rng = random.Random(seed * 100 + key_size)
        cipher = BlockCipher(rng.randbytes(key_size))
        for _ in range(10):
            block = rng.randbytes(16)
            ct = cipher.encrypt(block)
            assert ct != block
            assert cipher.decrypt(ct) == block

    @pytest.mark.parametrize("length", [0, 15, 17, 33])
    def test_invalid_key(self, length):
        with pytest.raises(InvalidKeyLength):
            BlockCipher(bytes(length))

    @pytest.mark.parametrize("length", [0, 15, 17, 32])
    def test_invalid_block(self, length):
        cipher = BlockCipher(bytes(16))
        with pytest.raises(ValueError, match="Block must be 16 bytes"):
            cipher.encrypt(bytes(length))
        with pytest.raises(ValueError, match="Block must be 16 bytes"):
            cipher.decrypt(bytes(length))

    def test_schedule_variant_mismatch(self):
        schedule = expand_key(bytes(16))
        with pytest.raises(ValueError, match="schedule must have 60 words"):
            encrypt_block(bytes(16), KeyVariant.AES256, schedule)

    def test_shared_across_threads(self):
        """One schedule, many blocks in parallel, same answers as serial."""
        cipher = BlockCipher(bytes(range(32)))
        rng = random.Random(7)
        blocks = [rng.randbytes(16) for _ in range(32)]
        serial = [cipher.encrypt(b) for b in blocks]

        with ThreadPoolExecutor(max_workers=4) as pool:
            parallel = list(pool.map(cipher.encrypt, blocks))

        assert parallel == serial

    def test_repr(self):
        assert repr(BlockCipher(bytes(24))) == "BlockCipher(variant=AES-192)"
