"""
In-circuit Poseidon. Each gadget follows the round structure of its native
counterpart in `hashing.py` step for step, so both compute the same value for
the same inputs.
"""

from .errors import ConfigMismatch
from .hashing import Hasher, HashConfig, OptimizedConfig, PoseidonHash, SpongeConfig
from .r1cs import FieldVar, as_field_var


def _matvec(m, v: list[FieldVar]) -> list[FieldVar]:
    out = []
    for row in m:
        acc = FieldVar.zero()
        for a, x in zip(row, v):
            acc = acc + x * a
        out.append(acc)
    return out


def _vecmat(v: list[FieldVar], m) -> list[FieldVar]:
    out = []
    for j in range(len(m[0])):
        acc = FieldVar.zero()
        for k, x in enumerate(v):
            acc = acc + x * m[k][j]
        out.append(acc)
    return out


def sponge_gadget(config: SpongeConfig, inputs: list[FieldVar]) -> FieldVar:
    state = [FieldVar.zero() for _ in range(config.width)]
    for i in range(0, len(inputs), config.rate):
        for j, x in enumerate(inputs[i : i + config.rate]):
            state[1 + j] = state[1 + j] + x
        for r, keys in enumerate(config.round_keys):
            state = [s + k for s, k in zip(state, keys)]
            if config.is_full_round(r):
                state = [s.pow5() for s in state]
            else:
                state[0] = state[0].pow5()
            state = _matvec(config.mds, state)
    return state[1]


def optimized_gadget(config: OptimizedConfig, inputs: list[FieldVar]) -> FieldVar:
    t = config.width
    if len(inputs) != t - 1:
        raise ConfigMismatch(len(inputs) + 1, t)
    half = config.n_rounds_f // 2
    c = config.constants

    state = [x + c[i] for i, x in enumerate([FieldVar.zero(), *inputs])]

    for r in range(half - 1):
        state = [s.pow5() + c[(r + 1) * t + i] for i, s in enumerate(state)]
        state = _vecmat(state, config.mds)

    state = [s.pow5() + c[half * t + i] for i, s in enumerate(state)]
    state = _vecmat(state, config.pre_sparse)

    for r in range(config.n_rounds_p):
        state[0] = state[0].pow5() + c[(half + 1) * t + r]
        row = config.sparse[r]
        s0 = FieldVar.zero()
        for a, s in zip(row[:t], state):
            s0 = s0 + s * a
        for k in range(1, t):
            state[k] = state[k] + state[0] * row[t + k - 1]
        state[0] = s0

    offset = (half + 1) * t + config.n_rounds_p
    for r in range(half - 1):
        state = [s.pow5() + c[offset + r * t + i] for i, s in enumerate(state)]
        state = _vecmat(state, config.mds)

    state = [s.pow5() for s in state]
    return _vecmat(state, config.mds)[0]


class PoseidonHashVar:
    """
    Gadget counterpart of `PoseidonHash`. When no input is a live variable
    the hash is computed natively and returned as a constant, adding no
    constraints.
    """

    def __init__(self, native: PoseidonHash):
        self.native = native

    @property
    def config(self) -> HashConfig:
        return self.native.config

    def hash(self, *inputs) -> FieldVar:
        if len(inputs) + 1 != self.config.width:
            raise ConfigMismatch(len(inputs) + 1, self.config.width)
        inputs = [as_field_var(x) for x in inputs]

        if all(x.is_constant for x in inputs):
            return FieldVar.constant(self.native.hash(*(x.value() for x in inputs)))

        if isinstance(self.config, OptimizedConfig):
            return optimized_gadget(self.config, inputs)
        return sponge_gadget(self.config, inputs)

    def hash1(self, x) -> FieldVar:
        return self.hash(x)

    def hash2(self, a, b) -> FieldVar:
        return self.hash(a, b)

    def hash3(self, a, b, c) -> FieldVar:
        return self.hash(a, b, c)


class HasherVar:
    def __init__(self, hasher: Hasher):
        self.hasher = hasher
        self.t2 = PoseidonHashVar(hasher.t2)
        self.t3 = PoseidonHashVar(hasher.t3)
        self.t4 = PoseidonHashVar(hasher.t4)

    def hash1(self, x) -> FieldVar:
        return self.t2.hash1(x)

    def hash2(self, a, b) -> FieldVar:
        return self.t3.hash2(a, b)

    def hash3(self, a, b, c) -> FieldVar:
        return self.t4.hash3(a, b, c)
