"""
Rijndael round transform pipeline.

Encryption (Nr = 10/12/14):
- Round 0:        AddRoundKey(0)
- Rounds 1..Nr-1: SubBytes, ShiftRows, MixColumns, AddRoundKey(r)
- Round Nr:       SubBytes, ShiftRows, AddRoundKey(Nr)   (no MixColumns)

Decryption runs the inverse steps in reverse order:
- Round Nr:       AddRoundKey(Nr), InvShiftRows, InvSubBytes
- Rounds Nr-1..1: AddRoundKey(r), InvMixColumns, InvShiftRows, InvSubBytes
- Round 0:        AddRoundKey(0)

Every transform returns a new state; inputs are never modified.
"""

from __future__ import annotations

from .gf import mix_columns, inverse_mix_columns
from .key_schedule import KeyVariant, expand_key, round_key
from .sbox import sub_bytes, inverse_sub_bytes, word_byte
from .trace import TraceRecorder
from .utils import bytes_to_state, state_to_bytes, copy_state


def shift_rows(state: list[list[int]]) -> list[list[int]]:
    """ShiftRows: rotate row r left by r bytes."""
    return [state[row][row:] + state[row][:row] for row in range(4)]


def inverse_shift_rows(state: list[list[int]]) -> list[list[int]]:
    """InvShiftRows: rotate row r right by r bytes."""
    return [state[row][4 - row:] + state[row][:4 - row] for row in range(4)]


def add_round_key(
    schedule: tuple[int, ...],
    round_index: int,
    state: list[list[int]],
) -> list[list[int]]:
    """
    AddRoundKey: XOR the state with round key ``round_index``.

    Column c is combined with schedule word 4 * round_index + c; row r
    takes byte r of that word.
    """
    result = copy_state(state)
    for col in range(4):
        key_word = schedule[4 * round_index + col]
        for row in range(4):
            result[row][col] ^= word_byte(key_word, row)
    return result


def _check_schedule(variant: KeyVariant, schedule: tuple[int, ...]) -> None:
    if len(schedule) != variant.schedule_words:
        raise ValueError(
            f"{variant} schedule must have {variant.schedule_words} words, "
            f"got {len(schedule)}"
        )


class _Stepper:
    """Runs pipeline steps on a state and reports each one to a tracer."""

    def __init__(self, direction: str, schedule: tuple[int, ...],
                 state: list[list[int]], tracer: TraceRecorder | None):
        self.direction = direction
        self.schedule = schedule
        self.state = state
        self.tracer = tracer

    def apply(self, round_num: int, operation: str, fn) -> None:
        self.state = fn(self.state)
        if self.tracer:
            self.tracer.record(
                direction=self.direction,
                round=round_num,
                operation=operation,
                state=copy_state(self.state),
            )

    def add_key(self, round_num: int) -> None:
        self.state = add_round_key(self.schedule, round_num, self.state)
        if self.tracer:
            self.tracer.record(
                direction=self.direction,
                round=round_num,
                operation="AddRoundKey",
                state=copy_state(self.state),
                round_key=list(round_key(self.schedule, round_num)),
            )


def encrypt_block(
    block: bytes,
    variant: KeyVariant,
    schedule: tuple[int, ...],
    tracer: TraceRecorder | None = None,
) -> bytes:
    """
    Encrypt a single 16-byte block with a pre-expanded key schedule.

    Args:
        block: 16-byte plaintext
        variant: Key variant the schedule was expanded for
        schedule: Round key words from expand_key()
        tracer: Optional trace recorder, fed one entry per step

    Returns:
        16-byte ciphertext
    """
    _check_schedule(variant, schedule)
    nr = variant.rounds
    steps = _Stepper("encrypt", schedule, bytes_to_state(block), tracer)

    if tracer:
        tracer.record(direction="encrypt", round=0, operation="Input",
                      state=copy_state(steps.state))

    steps.add_key(0)

    for round_num in range(1, nr):
        steps.apply(round_num, "SubBytes", sub_bytes)
        steps.apply(round_num, "ShiftRows", shift_rows)
        steps.apply(round_num, "MixColumns", mix_columns)
        steps.add_key(round_num)

    # Final round: no MixColumns
    steps.apply(nr, "SubBytes", sub_bytes)
    steps.apply(nr, "ShiftRows", shift_rows)
    steps.add_key(nr)

    return state_to_bytes(steps.state)


def decrypt_block(
    block: bytes,
    variant: KeyVariant,
    schedule: tuple[int, ...],
    tracer: TraceRecorder | None = None,
) -> bytes:
    """
    Decrypt a single 16-byte block with a pre-expanded key schedule.

    Args:
        block: 16-byte ciphertext
        variant: Key variant the schedule was expanded for
        schedule: Round key words from expand_key()
        tracer: Optional trace recorder, fed one entry per step

    Returns:
        16-byte plaintext
    """
    _check_schedule(variant, schedule)
    nr = variant.rounds
    steps = _Stepper("decrypt", schedule, bytes_to_state(block), tracer)

    if tracer:
        tracer.record(direction="decrypt", round=nr, operation="Input",
                      state=copy_state(steps.state))

    steps.add_key(nr)
    steps.apply(nr, "InvShiftRows", inverse_shift_rows)
    steps.apply(nr, "InvSubBytes", inverse_sub_bytes)

    for round_num in range(nr - 1, 0, -1):
        steps.add_key(round_num)
        steps.apply(round_num, "InvMixColumns", inverse_mix_columns)
        steps.apply(round_num, "InvShiftRows", inverse_shift_rows)
        steps.apply(round_num, "InvSubBytes", inverse_sub_bytes)

    steps.add_key(0)

    return state_to_bytes(steps.state)


class BlockCipher:
    """
    Rijndael block cipher bound to one key.

    The key schedule is expanded once at construction and never written
    again, so one instance can serve many blocks (and threads).
    """

    def __init__(self, key: bytes, tracer: TraceRecorder | None = None):
        """
        Args:
            key: 16, 24 or 32 byte cipher key
            tracer: Optional trace recorder used by every call

        Raises:
            InvalidKeyLength: If the key size is not supported
        """
        self.variant = KeyVariant.from_key_length(len(key))
        self.schedule = expand_key(key, self.variant)
        self.tracer = tracer

    @property
    def rounds(self) -> int:
        return self.variant.rounds

    def encrypt(self, block: bytes) -> bytes:
        return encrypt_block(block, self.variant, self.schedule, self.tracer)

    def decrypt(self, block: bytes) -> bytes:
        return decrypt_block(block, self.variant, self.schedule, self.tracer)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(variant={self.variant})"


def encrypt(key: bytes, block: bytes, tracer: TraceRecorder | None = None) -> bytes:
    """Convenience function: expand ``key`` and encrypt one block."""
    return BlockCipher(key, tracer=tracer).encrypt(block)


def decrypt(key: bytes, block: bytes, tracer: TraceRecorder | None = None) -> bytes:
    """Convenience function: expand ``key`` and decrypt one block."""
    return BlockCipher(key, tracer=tracer).decrypt(block)
