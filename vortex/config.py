from __future__ import annotations

from dataclasses import asdict, dataclass, replace

import dacite
import yaml

from .constants import LEVELS, MAX_AMOUNT_BITS, ZERO_VALUE
from .field import NUM_BITS, Fr
from .hashing import STRATEGIES, OPTIMIZED, Hasher, default_hasher
from .merkle import SparseMerkleTree


@dataclass
class Config:
    # Height of the commitment tree, the tree holds 2^levels leaves
    levels: int
    # Poseidon flavour used by the circuit and the tree: "optimized" or "sponge"
    strategy: str
    # Empty leaf of the commitment tree, as a decimal string
    zero_value: str
    # Amounts must stay below 2^max_amount_bits
    max_amount_bits: int

    @staticmethod
    def vortex_v1() -> Config:
        return Config(
            levels=LEVELS,
            strategy=OPTIMIZED,
            zero_value=ZERO_VALUE.to_decimal(),
            max_amount_bits=MAX_AMOUNT_BITS,
        )

    @classmethod
    def load(cls, yaml_path: str) -> Config:
        with open(yaml_path, "r") as f:
            data = yaml.safe_load(f)
        # Keys missing from the file keep their vortex_v1 value
        data = {**asdict(cls.vortex_v1()), **(data or {})}
        config = dacite.from_dict(data_class=Config, data=data, config=dacite.Config(strict=True))
        config.validate()
        return config

    def validate(self):
        assert 2 <= self.levels <= 32, f"levels is {self.levels}"
        assert self.strategy in STRATEGIES, f"strategy is {self.strategy}"
        assert 0 < self.max_amount_bits < NUM_BITS, f"max_amount_bits is {self.max_amount_bits}"
        self.empty_leaf()

    def replace(self, **kwarg) -> Config:
        return replace(self, **kwarg)

    def hasher(self) -> Hasher:
        return default_hasher(self.strategy)

    def empty_leaf(self) -> Fr:
        return Fr.from_decimal(self.zero_value)

    def tree(self) -> SparseMerkleTree:
        return SparseMerkleTree(self.levels, self.hasher(), self.empty_leaf())
