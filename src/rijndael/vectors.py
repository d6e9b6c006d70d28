"""FIPS-197 known-answer data."""

# Appendix C: example vectors, one per key size
FIPS_197_TEST_VECTORS = [
    {
        "name": "FIPS-197 C.1 AES-128",
        "key": bytes.fromhex("000102030405060708090a0b0c0d0e0f"),
        "plaintext": bytes.fromhex("00112233445566778899aabbccddeeff"),
        "ciphertext": bytes.fromhex("69c4e0d86a7b0430d8cdb78070b4c55a"),
    },
    {
        "name": "FIPS-197 C.2 AES-192",
        "key": bytes.fromhex("000102030405060708090a0b0c0d0e0f1011121314151617"),
        "plaintext": bytes.fromhex("00112233445566778899aabbccddeeff"),
        "ciphertext": bytes.fromhex("dda97ca4864cdfe06eaf70a0ec0d7191"),
    },
    {
        "name": "FIPS-197 C.3 AES-256",
        "key": bytes.fromhex(
            "000102030405060708090a0b0c0d0e0f101112131415161718191a1b1c1d1e1f"
        ),
        "plaintext": bytes.fromhex("00112233445566778899aabbccddeeff"),
        "ciphertext": bytes.fromhex("8ea2b7ca516745bfeafc49904b496089"),
    },
    # Appendix B cipher example
    {
        "name": "FIPS-197 Appendix B",
        "key": bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c"),
        "plaintext": bytes.fromhex("3243f6a8885a308d313198a2e0370734"),
        "ciphertext": bytes.fromhex("3925841d02dc09fbdc118597196a0b32"),
    },
    {
        "name": "All zeros",
        "key": bytes.fromhex("00000000000000000000000000000000"),
        "plaintext": bytes.fromhex("00000000000000000000000000000000"),
        "ciphertext": bytes.fromhex("66e94bd4ef8a2c3b884cfa59ca342b2e"),
    },
    {
        "name": "All ones",
        "key": bytes.fromhex("ffffffffffffffffffffffffffffffff"),
        "plaintext": bytes.fromhex("ffffffffffffffffffffffffffffffff"),
        "ciphertext": bytes.fromhex("bcbf217cb280cf30b2517052193ab979"),
    },
]

# Appendix A: key expansion examples, checked at selected word indices
FIPS_197_KEY_EXPANSIONS = [
    {
        "name": "FIPS-197 A.1 AES-128",
        "key": bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c"),
        "words": {4: 0xa0fafe17, 5: 0x88542cb1, 40: 0xd014f9a8, 43: 0xb6630ca6},
    },
    {
        "name": "FIPS-197 A.2 AES-192",
        "key": bytes.fromhex("8e73b0f7da0e6452c810f32b809079e562f8ead2522c6b7b"),
        "words": {6: 0xfe0c91f7, 7: 0x2402f5a5, 51: 0x01002202},
    },
    {
        "name": "FIPS-197 A.3 AES-256",
        "key": bytes.fromhex(
            "603deb1015ca71be2b73aef0857d77811f352c073b6108d72d9810a30914dff4"
        ),
        "words": {8: 0x9ba35411, 9: 0x8e6925af, 12: 0xa8b09c1a, 59: 0x706c631e},
    },
]
