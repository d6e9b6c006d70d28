"""Command-line interface for the Rijndael block cipher."""

from __future__ import annotations

import random
import sys

import click

from . import DEFAULT_KEY_HEX, DEFAULT_PT_HEX, DEFAULT_CT_HEX, __version__
from .cipher import BlockCipher
from .key_schedule import round_key
from .reference import reference_decrypt, reference_encrypt, validate_against_reference
from .trace import TraceRecorder, print_header, print_result
from .utils import bytes_to_state, format_state_grid, format_words, hex_to_bytes, key_from_text
from .vectors import FIPS_197_TEST_VECTORS


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _resolve_key(key_hex: str | None, key_text: str | None) -> tuple[bytes, str]:
    """Return (key bytes, description of where the key came from)."""
    if key_hex and key_text:
        _fail("Use either --key or --key-text, not both")
    try:
        if key_text is not None:
            return key_from_text(key_text), "text, zero-padded"
        if key_hex:
            return hex_to_bytes(key_hex), "provided"
    except ValueError as e:
        _fail(f"Invalid key: {e}")
    return hex_to_bytes(DEFAULT_KEY_HEX), "default (FIPS-197)"


def _resolve_block(block_hex: str | None, default_hex: str) -> tuple[bytes, str]:
    if not block_hex:
        return hex_to_bytes(default_hex), "default (FIPS-197)"
    try:
        return hex_to_bytes(block_hex), "provided"
    except ValueError as e:
        _fail(f"Invalid block hex: {e}")


def _run_block(
    direction: str,
    key_hex: str | None,
    key_text: str | None,
    block_hex: str | None,
    verbose: bool,
    trace: str | None,
) -> None:
    """Shared body of the 'encrypt' and 'decrypt' commands."""
    key, key_source = _resolve_key(key_hex, key_text)
    default_block = DEFAULT_PT_HEX if direction == "encrypt" else DEFAULT_CT_HEX
    block, block_source = _resolve_block(block_hex, default_block)

    trace_file = None
    if trace:
        try:
            trace_file = open(trace, "w")
        except OSError as e:
            _fail(f"Cannot open trace file: {e}")

    try:
        tracer = TraceRecorder(verbose=verbose, trace_file=trace_file)
        try:
            cipher = BlockCipher(key, tracer=tracer)
        except ValueError as e:
            _fail(str(e))

        if verbose:
            print_header(f"{cipher.variant} {direction}")
        click.echo(f"Key:   {key.hex()} ({key_source}, {cipher.variant})")
        click.echo(f"Block: {block.hex()} ({block_source})")
        if verbose and len(block) == 16:
            click.echo(format_state_grid(bytes_to_state(block)))

        try:
            if direction == "encrypt":
                output = cipher.encrypt(block)
                expected = reference_encrypt(key, block)
            else:
                output = cipher.decrypt(block)
                expected = reference_decrypt(key, block)
        except ValueError as e:
            _fail(str(e))

        label = "Ciphertext" if direction == "encrypt" else "Plaintext"
        passed = output == expected
        if verbose:
            print_result(label, output.hex(), passed)
        else:
            click.echo(f"{label}: {output.hex()}")

        if not passed:
            click.echo(f"Expected: {expected.hex()}", err=True)
            sys.exit(1)
    finally:
        if trace_file:
            trace_file.close()


_key_option = click.option("--key", "key_hex", help="Cipher key as 32, 48 or 64 hex chars")
_key_text_option = click.option(
    "--key-text",
    help="Cipher key as text, zero-padded to 128/192/256 bits",
)
_block_option = click.option("--block", "block_hex", help="16-byte block as 32 hex chars")
_verbose_option = click.option(
    "--verbose", "-v", is_flag=True, help="Print the state after every step"
)
_trace_option = click.option(
    "--trace", metavar="FILE", help="Write a JSON Lines trace of every step to FILE"
)


@click.group()
@click.version_option(version=__version__, prog_name="rijndael")
def main() -> None:
    """Rijndael (AES) single-block cipher engine.

    Encrypt or decrypt one 16-byte block under a 128, 192 or 256-bit key,
    inspect the key schedule, or run the built-in known-answer tests.
    """
    pass


@main.command()
@_key_option
@_key_text_option
@_block_option
@_verbose_option
@_trace_option
def encrypt(key_hex, key_text, block_hex, verbose, trace) -> None:
    """Encrypt one block."""
    _run_block("encrypt", key_hex, key_text, block_hex, verbose, trace)


@main.command()
@_key_option
@_key_text_option
@_block_option
@_verbose_option
@_trace_option
def decrypt(key_hex, key_text, block_hex, verbose, trace) -> None:
    """Decrypt one block."""
    _run_block("decrypt", key_hex, key_text, block_hex, verbose, trace)


@main.command()
@_key_option
@_key_text_option
def expand(key_hex: str | None, key_text: str | None) -> None:
    """Print the expanded key schedule, one round key per line."""
    key, _ = _resolve_key(key_hex, key_text)
    try:
        cipher = BlockCipher(key)
    except ValueError as e:
        _fail(str(e))

    click.echo(f"{cipher.variant}: {cipher.rounds} rounds, {len(cipher.schedule)} words")
    for r in range(cipher.rounds + 1):
        click.echo(f"  round {r:2d}: {format_words(round_key(cipher.schedule, r))}")


@main.command()
@click.option(
    "--n",
    "num_tests",
    type=int,
    default=100,
    help="Number of random round-trip tests per key size (default: 100)",
)
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Random seed for reproducibility",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Show detailed output",
)
def selftest(num_tests: int, seed: int | None, verbose: bool) -> None:
    """Check FIPS-197 vectors and random blocks against PyCryptodome."""
    click.echo("Running FIPS-197 KAT tests...")
    kat_failed = 0
    for vec in FIPS_197_TEST_VECTORS:
        cipher = BlockCipher(vec["key"])
        ct = cipher.encrypt(vec["plaintext"])
        pt = cipher.decrypt(vec["ciphertext"])
        ok = ct == vec["ciphertext"] and pt == vec["plaintext"]
        if not ok:
            kat_failed += 1
            click.echo(f"  [FAIL] {vec['name']}: got {ct.hex()}")
        elif verbose:
            click.echo(f"  [PASS] {vec['name']}")
    click.echo(f"  FIPS-197: {len(FIPS_197_TEST_VECTORS) - kat_failed}/"
               f"{len(FIPS_197_TEST_VECTORS)} passed")

    click.echo("")
    click.echo(f"Running {num_tests} random tests per key size...")
    rng = random.Random(seed)
    random_failed = 0
    for key_size in (16, 24, 32):
        for _ in range(num_tests):
            key = rng.randbytes(key_size)
            plaintext = rng.randbytes(16)
            cipher = BlockCipher(key)
            ct = cipher.encrypt(plaintext)
            correct, detail = validate_against_reference(key, plaintext, ct)
            if correct and cipher.decrypt(ct) != plaintext:
                correct, detail = False, "Round trip did not restore the plaintext"
            if not correct:
                random_failed += 1
                if verbose:
                    click.echo(f"  [FAIL] key={key.hex()} pt={plaintext.hex()}: {detail}")
    total = 3 * num_tests
    click.echo(f"  Random: {total - random_failed}/{total} passed")

    if kat_failed or random_failed:
        click.echo("")
        click.echo("SELFTEST FAILED", err=True)
        sys.exit(1)
    click.echo("")
    click.echo("All tests passed.")


if __name__ == "__main__":
    main()
