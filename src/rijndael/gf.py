"""
Galois field arithmetic over GF(2^8) for the Rijndael MixColumns step.

Every byte is a polynomial of degree <= 7 with binary coefficients.
Addition is XOR; multiplication is polynomial multiplication reduced
modulo the Rijndael polynomial:

  x^8 + x^4 + x^3 + x + 1  (0x11b)

Column mixing treats a state column as a polynomial over GF(2^8) and
multiplies it by a fixed MDS matrix:

  forward          inverse
  [2 3 1 1]        [14 11 13  9]
  [1 2 3 1]        [ 9 14 11 13]
  [1 1 2 3]        [13  9 14 11]
  [3 1 1 2]        [11 13  9 14]
"""

# Low byte of the reduction polynomial (x^8 term dropped)
REDUCTION = 0x1b


def add(a: int, b: int) -> int:
    """Add two field elements (XOR)."""
    return a ^ b


def double(a: int) -> int:
    """Multiply by x (0x02), folding the x^8 term back into range."""
    carry = a & 0x80
    a = (a << 1) & 0xff
    if carry:
        a ^= REDUCTION
    return a


def triple(a: int) -> int:
    """Multiply by x + 1 (0x03)."""
    return add(double(a), a)


def multiply(a: int, b: int) -> int:
    """
    General multiplication in GF(2^8).

    Peasant's algorithm: for each bit of b (lowest first) accumulate the
    current multiple of a, then double a and halve b.

    Args:
        a: Field element (0-255)
        b: Field element (0-255)

    Returns:
        Product a * b reduced mod 0x11b
    """
    p = 0
    for _ in range(8):
        if a == 0 or b == 0:
            break
        if b & 1:
            p ^= a
        b >>= 1
        a = double(a)
    return p


def mix_column(col: list[int]) -> list[int]:
    """Mix one 4-byte column with the forward MDS matrix."""
    c0, c1, c2, c3 = col
    return [
        double(c0) ^ triple(c1) ^ c2 ^ c3,
        c0 ^ double(c1) ^ triple(c2) ^ c3,
        c0 ^ c1 ^ double(c2) ^ triple(c3),
        triple(c0) ^ c1 ^ c2 ^ double(c3),
    ]


def inverse_mix_column(col: list[int]) -> list[int]:
    """Mix one 4-byte column with the inverse MDS matrix."""
    c0, c1, c2, c3 = col
    return [
        multiply(c0, 14) ^ multiply(c1, 11) ^ multiply(c2, 13) ^ multiply(c3, 9),
        multiply(c0, 9) ^ multiply(c1, 14) ^ multiply(c2, 11) ^ multiply(c3, 13),
        multiply(c0, 13) ^ multiply(c1, 9) ^ multiply(c2, 14) ^ multiply(c3, 11),
        multiply(c0, 11) ^ multiply(c1, 13) ^ multiply(c2, 9) ^ multiply(c3, 14),
    ]


def _map_columns(state: list[list[int]], fn) -> list[list[int]]:
    result = [[0 for _ in range(4)] for _ in range(4)]
    for col in range(4):
        mixed = fn([state[row][col] for row in range(4)])
        for row in range(4):
            result[row][col] = mixed[row]
    return result


def mix_columns(state: list[list[int]]) -> list[list[int]]:
    """
    Apply MixColumns to all four columns of the state.

    Args:
        state: 4x4 state (state[row][col])

    Returns:
        New 4x4 state
    """
    return _map_columns(state, mix_column)


def inverse_mix_columns(state: list[list[int]]) -> list[list[int]]:
    """Apply InvMixColumns to all four columns of the state."""
    return _map_columns(state, inverse_mix_column)
