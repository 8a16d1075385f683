"""
Regenerates the Poseidon round constants and MDS matrices shipped in
`poseidon_constants.py`.

The constants are produced by the Grain LFSR in self-shrinking mode as
described in section F of the Poseidon paper (https://eprint.iacr.org/2019/458.pdf),
with the parameter encoding used by the circom reference implementation.
"""

import logging

from poseidon.round_constants import calc_next_bits
from py_ecc.utils import prime_field_inv

from .field import FIELD_MODULUS, NUM_BITS
from .errors import MalformedConstant

logger = logging.getLogger(__name__)

# Field flag: 1 for a prime field. S-box flag: 0 for x^alpha.
FIELD_FLAG = 1
SBOX_FLAG = 0


def _bits(value: int, width: int) -> list[int]:
    return [int(b) for b in bin(value)[2:].zfill(width)]


def init_state(t: int, n_rounds_f: int, n_rounds_p: int) -> list[int]:
    state = (
        _bits(FIELD_FLAG, 2)
        + _bits(SBOX_FLAG, 4)
        + _bits(NUM_BITS, 12)
        + _bits(t, 12)
        + _bits(n_rounds_f, 10)
        + _bits(n_rounds_p, 10)
        + [1] * 30
    )
    assert len(state) == 80

    # Discard the first 160 output bits
    for _ in range(160):
        new_bit = state[62] ^ state[51] ^ state[38] ^ state[23] ^ state[13] ^ state[0]
        state.pop(0)
        state.append(new_bit)
    return state


def _sample(state: list[int]) -> tuple[list[int], int]:
    state, bits = calc_next_bits(state, NUM_BITS)
    return state, int("".join(str(b) for b in bits), 2)


def generate(t: int, n_rounds_f: int, n_rounds_p: int) -> tuple[list[int], list[list[int]]]:
    """
    Returns the flat round constant vector of length (n_rounds_f + n_rounds_p) * t
    and the t x t Cauchy MDS matrix for a state of width t.
    """
    state = init_state(t, n_rounds_f, n_rounds_p)

    constants = []
    while len(constants) < (n_rounds_f + n_rounds_p) * t:
        state, v = _sample(state)
        if v < FIELD_MODULUS:
            constants.append(v)

    # The MDS matrix continues on the same stream
    samples = []
    for _ in range(2 * t):
        state, v = _sample(state)
        samples.append(v % FIELD_MODULUS)
    if len(set(samples)) != 2 * t:
        raise MalformedConstant(t, "MDS sample points are not distinct")

    xs, ys = samples[:t], samples[t:]
    mds = [[prime_field_inv((x + y) % FIELD_MODULUS, FIELD_MODULUS) for y in ys] for x in xs]

    logger.debug(f"generated {len(constants)} round constants for width {t}")
    return constants, mds


def generate_table(widths: dict[int, int], n_rounds_f: int = 8) -> dict:
    """
    Builds a table with the same layout as POSEIDON_CONSTANTS for the given
    {width: n_rounds_p} schedule.
    """
    table = {}
    for t, n_rounds_p in widths.items():
        constants, mds = generate(t, n_rounds_f, n_rounds_p)
        table[t] = {
            "n_rounds_f": n_rounds_f,
            "n_rounds_p": n_rounds_p,
            "C": [str(c) for c in constants],
            "M": [[str(m) for m in row] for row in mds],
        }
    return table
