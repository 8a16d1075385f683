import logging
from dataclasses import dataclass
from itertools import combinations
from typing import Sequence

from .constants import LEVELS, MAX_AMOUNT_BITS, N_INS, N_OUTS
from .errors import IndexOutOfBounds, PathLengthMismatch
from .field import NUM_BITS, Fr
from .hashing import Hasher
from .hashing_gadget import HasherVar
from .merkle import Path, PathVar, SparseMerkleTree
from .note import Utxo
from .r1cs import Boolean, ConstraintSystem, FieldVar

logger = logging.getLogger(__name__)


def enforce_amount_range(amount: FieldVar, amount_is_zero: Boolean, max_bits: int):
    """
    Enforces amount < 2^max_bits unless the amount is zero: the bits above
    max_bits of its decomposition must be zero.
    """
    bits = amount.to_bits_le()
    is_non_zero = amount_is_zero.not_()
    for bit in bits[max_bits:]:
        bit.conditional_enforce_equal(Boolean.constant(False), is_non_zero, "amount_range")


@dataclass(frozen=True)
class TransactionCircuit:
    """
    The validity predicate of one shielded transaction spending N_INS notes
    and creating N_OUTS notes.

    Public inputs, in the order the verifier expects them:
        root, public_amount, ext_data_hash, input_nullifiers, output_commitments
    """

    hasher: Hasher
    levels: int

    # Public inputs
    root: Fr
    public_amount: Fr
    ext_data_hash: Fr
    input_nullifiers: tuple[Fr, ...]
    output_commitments: tuple[Fr, ...]

    # Private inputs
    in_private_keys: tuple[Fr, ...]
    in_amounts: tuple[Fr, ...]
    in_blindings: tuple[Fr, ...]
    in_path_indices: tuple[Fr, ...]
    merkle_paths: tuple[Path, ...]

    out_public_keys: tuple[Fr, ...]
    out_amounts: tuple[Fr, ...]
    out_blindings: tuple[Fr, ...]

    max_amount_bits: int = MAX_AMOUNT_BITS

    def __post_init__(self):
        assert isinstance(self.hasher, Hasher), f"hasher is {type(self.hasher)}"
        assert 0 < self.max_amount_bits < NUM_BITS, f"max_amount_bits is {self.max_amount_bits}"
        for name in ("root", "public_amount", "ext_data_hash"):
            assert isinstance(getattr(self, name), Fr), f"{name} is {type(getattr(self, name))}"

        for name, size in (
            ("input_nullifiers", N_INS),
            ("in_private_keys", N_INS),
            ("in_amounts", N_INS),
            ("in_blindings", N_INS),
            ("in_path_indices", N_INS),
            ("merkle_paths", N_INS),
            ("output_commitments", N_OUTS),
            ("out_public_keys", N_OUTS),
            ("out_amounts", N_OUTS),
            ("out_blindings", N_OUTS),
        ):
            values = getattr(self, name)
            if len(values) != size:
                raise ValueError(f"{name} must hold exactly {size} values, got {len(values)}")
            if name != "merkle_paths":
                assert all(isinstance(v, Fr) for v in values), f"{name}: {[type(v) for v in values]}"

        for path in self.merkle_paths:
            if path.levels != self.levels:
                raise PathLengthMismatch(self.levels, path.levels)
        for index in self.in_path_indices:
            if int(index) >= 2**self.levels:
                raise IndexOutOfBounds(int(index), 2**self.levels)

    @classmethod
    def empty(cls, hasher: Hasher, levels: int = LEVELS) -> "TransactionCircuit":
        """An all-zero instance, enough to fix the circuit's shape for key setup."""
        zero = Fr.zero()
        return cls(
            hasher=hasher,
            levels=levels,
            root=zero,
            public_amount=zero,
            ext_data_hash=zero,
            input_nullifiers=(zero,) * N_INS,
            output_commitments=(zero,) * N_OUTS,
            in_private_keys=(zero,) * N_INS,
            in_amounts=(zero,) * N_INS,
            in_blindings=(zero,) * N_INS,
            in_path_indices=(zero,) * N_INS,
            merkle_paths=(Path.empty(levels),) * N_INS,
            out_public_keys=(zero,) * N_OUTS,
            out_amounts=(zero,) * N_OUTS,
            out_blindings=(zero,) * N_OUTS,
        )

    @classmethod
    def build(
        cls,
        hasher: Hasher,
        tree: SparseMerkleTree,
        inputs: Sequence[Utxo],
        outputs: Sequence[Utxo],
        public_amount: Fr,
        ext_data_hash: Fr,
    ) -> "TransactionCircuit":
        """
        Derives nullifiers, output commitments and membership paths for a
        transaction from its notes and the current commitment tree.
        """
        paths = []
        for utxo in inputs:
            if utxo.amount == 0 and utxo.index >= len(tree):
                # Empty slot: membership is not checked for zero amounts
                paths.append(Path.empty(tree.levels))
            else:
                paths.append(tree.generate_membership_proof(utxo.index))

        return cls(
            hasher=hasher,
            levels=tree.levels,
            root=tree.root(),
            public_amount=Fr(public_amount),
            ext_data_hash=Fr(ext_data_hash),
            input_nullifiers=tuple(utxo.nullifier(hasher) for utxo in inputs),
            output_commitments=tuple(utxo.commitment(hasher) for utxo in outputs),
            in_private_keys=tuple(utxo.private_key for utxo in inputs),
            in_amounts=tuple(utxo.amount for utxo in inputs),
            in_blindings=tuple(utxo.blinding for utxo in inputs),
            in_path_indices=tuple(Fr(utxo.index) for utxo in inputs),
            merkle_paths=tuple(paths),
            out_public_keys=tuple(utxo.public_key for utxo in outputs),
            out_amounts=tuple(utxo.amount for utxo in outputs),
            out_blindings=tuple(utxo.blinding for utxo in outputs),
        )

    def public_inputs(self) -> list[Fr]:
        return [
            self.root,
            self.public_amount,
            self.ext_data_hash,
            *self.input_nullifiers,
            *self.output_commitments,
        ]

    def generate_constraints(self, cs: ConstraintSystem):
        hasher = HasherVar(self.hasher)

        root = cs.alloc_input(self.root)
        public_amount = cs.alloc_input(self.public_amount)
        ext_data_hash = cs.alloc_input(self.ext_data_hash)
        input_nullifiers = [cs.alloc_input(nf) for nf in self.input_nullifiers]
        output_commitments = [cs.alloc_input(cm) for cm in self.output_commitments]

        in_private_keys = [cs.alloc_witness(sk) for sk in self.in_private_keys]
        in_amounts = [cs.alloc_witness(amount) for amount in self.in_amounts]
        in_blindings = [cs.alloc_witness(blinding) for blinding in self.in_blindings]
        in_path_indices = [cs.alloc_witness(index) for index in self.in_path_indices]
        merkle_paths = [PathVar.new_witness(cs, path) for path in self.merkle_paths]

        out_public_keys = [cs.alloc_witness(pk) for pk in self.out_public_keys]
        out_amounts = [cs.alloc_witness(amount) for amount in self.out_amounts]
        out_blindings = [cs.alloc_witness(blinding) for blinding in self.out_blindings]

        sum_ins = FieldVar.zero()
        for i in range(N_INS):
            with cs.namespace(f"input_{i}"):
                public_key = hasher.hash1(in_private_keys[i])
                commitment = hasher.hash3(in_amounts[i], public_key, in_blindings[i])
                signature = hasher.hash3(in_private_keys[i], commitment, in_path_indices[i])
                nullifier = hasher.hash3(commitment, in_path_indices[i], signature)
                nullifier.enforce_equal(input_nullifiers[i], "nullifier")

                amount_is_zero = in_amounts[i].is_zero()
                enforce_amount_range(in_amounts[i], amount_is_zero, self.max_amount_bits)

                # Membership is only required for non-empty slots
                membership = merkle_paths[i].check_membership(root, commitment, hasher)
                (amount_is_zero | membership).enforce_equal(Boolean.constant(True), "membership")

                sum_ins = sum_ins + in_amounts[i]

        sum_outs = FieldVar.zero()
        for i in range(N_OUTS):
            with cs.namespace(f"output_{i}"):
                commitment = hasher.hash3(out_amounts[i], out_public_keys[i], out_blindings[i])
                commitment.enforce_equal(output_commitments[i], "commitment")

                amount_is_zero = out_amounts[i].is_zero()
                enforce_amount_range(out_amounts[i], amount_is_zero, self.max_amount_bits)

                sum_outs = sum_outs + out_amounts[i]

        for i, j in combinations(range(N_INS), 2):
            are_distinct = input_nullifiers[i].is_neq(input_nullifiers[j])
            are_distinct.enforce_equal(Boolean.constant(True), f"distinct_nullifiers_{i}_{j}")

        (sum_ins + public_amount).enforce_equal(sum_outs, "value_conservation")

        # Ties ext_data_hash into the constraint system
        ext_data_hash.square()

        logger.debug(
            f"synthesized {cs.num_constraints} constraints, "
            f"{cs.num_inputs} public inputs, {cs.num_witnesses} witnesses"
        )
