"""
Poseidon over the BN254 scalar field, in the two flavours the protocol has to
agree with:

* the sponge strategy: zero state, absorb the inputs into the rate part of the
  state, permute, squeeze element 1. This is what the off-chain reference
  implementation computes.
* the optimized strategy: circomlib's round-optimized Poseidon, state
  initialised to [0, inputs...], output element 0. This is what the on-chain
  verifier computes.

Both are driven by the same constant table and are exposed through the same
hash1/hash2/hash3 interface, so callers pick a strategy by value.
"""

import functools
import logging
import threading
from dataclasses import dataclass, field
from typing import Sequence

import galois
import numpy as np
import poseidon
from poseidon import round_constants

from .errors import ConfigMismatch, MalformedConstant
from .field import FIELD_MODULUS, NUM_BITS, Fr
from .poseidon_constants import POSEIDON_CONSTANTS

logger = logging.getLogger(__name__)

P = FIELD_MODULUS
ALPHA = 5
SECURITY_LEVEL = 128

SPONGE = "sponge"
OPTIMIZED = "optimized"
STRATEGIES = (SPONGE, OPTIMIZED)


def pow5(x: int) -> int:
    return pow(x, ALPHA, P)


@functools.cache
def galois_field():
    return galois.GF(P)


def _parse(width: int, value) -> int:
    if not isinstance(value, str) or not (value.isascii() and value.isdigit()):
        raise MalformedConstant(width, f"{value!r} is not a decimal string")
    v = int(value)
    if v >= P:
        raise MalformedConstant(width, f"{value} is not a field element")
    return v


def _vecmat(v, m) -> list[int]:
    """v . m for a row vector v"""
    return [sum(x * m[k][j] for k, x in enumerate(v)) % P for j in range(len(m[0]))]


def _to_ints(m) -> tuple[tuple[int, ...], ...]:
    return tuple(tuple(int(x) for x in row) for row in m)


def _load_standard(width: int, table: dict):
    if width not in table:
        raise MalformedConstant(width, "no constants for this width")
    entry = table[width]
    try:
        n_rounds_f = entry["n_rounds_f"]
        n_rounds_p = entry["n_rounds_p"]
        raw_constants = entry["C"]
        raw_mds = entry["M"]
    except KeyError as e:
        raise MalformedConstant(width, f"missing field {e}")
    if n_rounds_f % 2 != 0:
        raise MalformedConstant(width, "the number of full rounds must be even")

    constants = [_parse(width, c) for c in raw_constants]
    if len(constants) != (n_rounds_f + n_rounds_p) * width:
        raise MalformedConstant(
            width,
            f"expected {(n_rounds_f + n_rounds_p) * width} round constants, got {len(constants)}",
        )
    mds = [[_parse(width, m) for m in row] for row in raw_mds]
    if len(mds) != width or any(len(row) != width for row in mds):
        raise MalformedConstant(width, f"MDS matrix must be {width}x{width}")

    round_keys = [constants[r * width : (r + 1) * width] for r in range(n_rounds_f + n_rounds_p)]
    return n_rounds_f, n_rounds_p, round_keys, mds


@dataclass(frozen=True)
class SpongeConfig:
    width: int
    n_rounds_f: int
    n_rounds_p: int
    # One vector of `width` constants per round
    round_keys: tuple[tuple[int, ...], ...]
    # Applied as new_state[i] = sum_j mds[i][j] * state[j]
    mds: tuple[tuple[int, ...], ...]

    _permutation: poseidon.Poseidon = field(init=False, repr=False, compare=False)
    _lock: threading.Lock = field(init=False, repr=False, compare=False, default_factory=threading.Lock)

    def __post_init__(self):
        permutation = poseidon.Poseidon(
            p=P,
            security_level=SECURITY_LEVEL,
            alpha=ALPHA,
            input_rate=self.rate,
            t=self.width,
            full_round=self.n_rounds_f,
            partial_round=self.n_rounds_p,
            mds_matrix=[[hex(m) for m in row] for row in self.mds],
            rc_list=[hex(k) for keys in self.round_keys for k in keys],
            prime_bit_len=NUM_BITS,
        )
        object.__setattr__(self, "_permutation", permutation)

    @property
    def rate(self) -> int:
        return self.width - 1

    @classmethod
    def load(cls, width: int, table: dict = POSEIDON_CONSTANTS) -> "SpongeConfig":
        n_rounds_f, n_rounds_p, round_keys, mds = _load_standard(width, table)
        logger.debug(f"loaded sponge Poseidon config for width {width}")
        return cls(
            width=width,
            n_rounds_f=n_rounds_f,
            n_rounds_p=n_rounds_p,
            round_keys=tuple(tuple(k) for k in round_keys),
            mds=tuple(tuple(row) for row in mds),
        )

    def is_full_round(self, r: int) -> bool:
        half = self.n_rounds_f // 2
        return r < half or r >= half + self.n_rounds_p

    def permute(self, state: list[int]) -> list[int]:
        # run_hash keeps the permuted state on the instance
        with self._lock:
            self._permutation.run_hash(list(state))
            return [int(s) for s in self._permutation.state]

    def hash(self, inputs: Sequence[int]) -> int:
        # Element 0 is the capacity, the remaining `rate` elements absorb
        state = [0] * self.width
        for i in range(0, len(inputs), self.rate):
            for j, x in enumerate(inputs[i : i + self.rate]):
                state[1 + j] = (state[1 + j] + x) % P
            state = self.permute(state)
        return state[1]


@dataclass(frozen=True)
class OptimizedConfig:
    width: int
    n_rounds_f: int
    n_rounds_p: int
    # Compressed round constants, n_rounds_f * width + n_rounds_p of them
    constants: tuple[int, ...]
    # One sparse matrix of 2 * width - 1 entries per partial round
    sparse: tuple[tuple[int, ...], ...]
    # Row vector convention: new_state = state . mds
    mds: tuple[tuple[int, ...], ...]
    pre_sparse: tuple[tuple[int, ...], ...]

    @classmethod
    def load(cls, width: int, table: dict = POSEIDON_CONSTANTS) -> "OptimizedConfig":
        n_rounds_f, n_rounds_p, round_keys, mds = _load_standard(width, table)
        config = cls.from_standard(width, n_rounds_f, n_rounds_p, round_keys, mds)
        logger.debug(f"loaded optimized Poseidon config for width {width}")
        return config

    @classmethod
    def from_standard(
        cls,
        width: int,
        n_rounds_f: int,
        n_rounds_p: int,
        round_keys: list[list[int]],
        mds: list[list[int]],
    ) -> "OptimizedConfig":
        """
        Derives circomlib's optimized constants from the plain round constants
        and MDS matrix: round constants are pushed backwards through the linear
        layer so partial rounds only need one constant, and the dense MDS of the
        partial rounds is factored into a pre-sparse matrix and one sparse matrix
        per partial round.

        Each sparse matrix S keeps its first column and its first row, stored
        as (S[0][0], S[1:][0], S[0][1:]).
        """
        GF = galois_field()
        m = GF(mds).T
        try:
            constants = round_constants.optimized_rc(
                [GF(list(keys)) for keys in round_keys], n_rounds_f // 2, n_rounds_p, m
            )
            pre_sparse, sparse_matrices = round_constants.optimized_matrix(m, n_rounds_p, GF)
        except np.linalg.LinAlgError:
            raise MalformedConstant(width, "MDS matrix is singular")

        sparse = [
            (*(int(x) for x in s[:, 0]), *(int(x) for x in s[0, 1:])) for s in sparse_matrices
        ]

        assert len(constants) == n_rounds_f * width + n_rounds_p
        return cls(
            width=width,
            n_rounds_f=n_rounds_f,
            n_rounds_p=n_rounds_p,
            constants=tuple(int(c) for c in constants),
            sparse=tuple(sparse),
            mds=_to_ints(m),
            pre_sparse=_to_ints(pre_sparse),
        )

    def hash(self, inputs: Sequence[int]) -> int:
        t = self.width
        if len(inputs) != t - 1:
            raise ConfigMismatch(len(inputs) + 1, t)
        half = self.n_rounds_f // 2
        c = self.constants

        state = [(x + c[i]) % P for i, x in enumerate([0, *inputs])]

        for r in range(half - 1):
            state = [(pow5(s) + c[(r + 1) * t + i]) % P for i, s in enumerate(state)]
            state = _vecmat(state, self.mds)

        state = [(pow5(s) + c[half * t + i]) % P for i, s in enumerate(state)]
        state = _vecmat(state, self.pre_sparse)

        for r in range(self.n_rounds_p):
            state[0] = (pow5(state[0]) + c[(half + 1) * t + r]) % P
            row = self.sparse[r]
            s0 = sum(a * s for a, s in zip(row[:t], state)) % P
            for k in range(1, t):
                state[k] = (state[k] + state[0] * row[t + k - 1]) % P
            state[0] = s0

        offset = (half + 1) * t + self.n_rounds_p
        for r in range(half - 1):
            state = [(pow5(s) + c[offset + r * t + i]) % P for i, s in enumerate(state)]
            state = _vecmat(state, self.mds)

        state = [pow5(s) for s in state]
        return _vecmat(state, self.mds)[0]


HashConfig = SpongeConfig | OptimizedConfig


def load_config(strategy: str, width: int, table: dict = POSEIDON_CONSTANTS) -> HashConfig:
    if strategy == SPONGE:
        return SpongeConfig.load(width, table)
    if strategy == OPTIMIZED:
        return OptimizedConfig.load(width, table)
    raise ValueError(f"unknown Poseidon strategy: {strategy}")


class PoseidonHash:
    """
    Poseidon bound to a single configuration. The configuration's width fixes
    the arity: width 2 for hash1, width 3 for hash2, width 4 for hash3.
    """

    def __init__(self, config: HashConfig):
        self.config = config

    @property
    def width(self) -> int:
        return self.config.width

    def hash(self, *inputs) -> Fr:
        if len(inputs) + 1 != self.config.width:
            raise ConfigMismatch(len(inputs) + 1, self.config.width)
        return Fr(self.config.hash([int(x) for x in inputs]))

    def hash1(self, x) -> Fr:
        return self.hash(x)

    def hash2(self, a, b) -> Fr:
        return self.hash(a, b)

    def hash3(self, a, b, c) -> Fr:
        return self.hash(a, b, c)


@dataclass(frozen=True)
class Hasher:
    """
    One Poseidon configuration per arity, all of the same strategy.
    """

    strategy: str
    t2: PoseidonHash
    t3: PoseidonHash
    t4: PoseidonHash

    def __post_init__(self):
        assert self.strategy in STRATEGIES, f"strategy is {self.strategy}"
        assert self.t2.width == 2, f"t2 has width {self.t2.width}"
        assert self.t3.width == 3, f"t3 has width {self.t3.width}"
        assert self.t4.width == 4, f"t4 has width {self.t4.width}"

    @classmethod
    def from_table(cls, strategy: str, table: dict = POSEIDON_CONSTANTS) -> "Hasher":
        return cls(
            strategy=strategy,
            t2=PoseidonHash(load_config(strategy, 2, table)),
            t3=PoseidonHash(load_config(strategy, 3, table)),
            t4=PoseidonHash(load_config(strategy, 4, table)),
        )

    @staticmethod
    def optimized() -> "Hasher":
        return default_hasher(OPTIMIZED)

    @staticmethod
    def sponge() -> "Hasher":
        return default_hasher(SPONGE)

    def hash1(self, x) -> Fr:
        return self.t2.hash1(x)

    def hash2(self, a, b) -> Fr:
        return self.t3.hash2(a, b)

    def hash3(self, a, b, c) -> Fr:
        return self.t4.hash3(a, b, c)


@functools.cache
def default_hasher(strategy: str) -> Hasher:
    """The hasher over the shipped constant table, built once per strategy."""
    return Hasher.from_table(strategy)
