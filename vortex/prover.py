"""
The seam between the constraint system and an external zk-SNARK backend.

The backend (Groth16 over BN254 in production) is opaque to this package: keys
and proofs are byte blobs it owns. What this module guarantees is that a
witness that does not satisfy the circuit never reaches the backend.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Protocol

from .circuit import TransactionCircuit
from .constants import LEVELS, N_INS, N_OUTS
from .errors import ConstraintUnsatisfied, SerializationError
from .field import Fr
from .hashing import Hasher
from .merkle import Path
from .r1cs import ConstraintSystem

logger = logging.getLogger(__name__)


class SnarkBackend(Protocol):
    def setup(self, circuit: TransactionCircuit) -> tuple[bytes, bytes]:
        """Returns (proving_key, verifying_key)."""
        ...

    def prove(self, proving_key: bytes, circuit: TransactionCircuit, rng: Any) -> bytes:
        ...

    def verify(self, verifying_key: bytes, public_inputs: list[Fr], proof: bytes) -> bool:
        ...


def synthesize(circuit: TransactionCircuit) -> ConstraintSystem:
    cs = ConstraintSystem()
    circuit.generate_constraints(cs)
    return cs


def check_satisfied(circuit: TransactionCircuit) -> ConstraintSystem:
    cs = synthesize(circuit)
    failing = cs.which_is_unsatisfied()
    if failing is not None:
        logger.warning(f"witness does not satisfy the circuit, first failure: {failing}")
        raise ConstraintUnsatisfied(failing)
    return cs


def setup(backend: SnarkBackend, hasher: Hasher, levels: int = LEVELS) -> tuple[bytes, bytes]:
    return backend.setup(TransactionCircuit.empty(hasher, levels))


def prove(backend: SnarkBackend, proving_key: bytes, circuit: TransactionCircuit, rng: Any) -> "ProofOutput":
    cs = check_satisfied(circuit)
    proof = backend.prove(proving_key, circuit, rng)
    return ProofOutput(proof=proof, public_inputs=cs.public_inputs())


def verify(backend: SnarkBackend, verifying_key: bytes, output: "ProofOutput") -> bool:
    return backend.verify(verifying_key, output.public_inputs, output.proof)


# (field name, JSON key) for every value of a proof request
_SCALARS = [
    ("root", "root"),
    ("public_amount", "publicAmount"),
    ("ext_data_hash", "extDataHash"),
]
_PER_INPUT = [
    ("input_nullifiers", "inputNullifier"),
    ("in_private_keys", "inPrivateKey"),
    ("in_amounts", "inAmount"),
    ("in_blindings", "inBlinding"),
    ("in_path_indices", "inPathIndex"),
]
_PER_OUTPUT = [
    ("output_commitments", "outputCommitment"),
    ("out_public_keys", "outPublicKey"),
    ("out_amounts", "outAmount"),
    ("out_blindings", "outBlinding"),
]


@dataclass
class ProofInput:
    """
    A proof request as sent by wallets: every field element is a decimal
    string, per-note values are numbered from 1 and Merkle paths are lists of
    [left, right] pairs.
    """

    root: Fr
    public_amount: Fr
    ext_data_hash: Fr
    input_nullifiers: tuple[Fr, ...]
    output_commitments: tuple[Fr, ...]
    in_private_keys: tuple[Fr, ...]
    in_amounts: tuple[Fr, ...]
    in_blindings: tuple[Fr, ...]
    in_path_indices: tuple[Fr, ...]
    merkle_paths: tuple[Path, ...]
    out_public_keys: tuple[Fr, ...]
    out_amounts: tuple[Fr, ...]
    out_blindings: tuple[Fr, ...]

    @classmethod
    def from_dict(cls, data: dict, levels: int = LEVELS) -> "ProofInput":
        def field(key: str) -> Fr:
            if key not in data:
                raise SerializationError(f"missing field {key}")
            return Fr.from_decimal(data[key])

        values = {name: field(key) for name, key in _SCALARS}
        for name, key in _PER_INPUT:
            values[name] = tuple(field(f"{key}{i + 1}") for i in range(N_INS))
        for name, key in _PER_OUTPUT:
            values[name] = tuple(field(f"{key}{i + 1}") for i in range(N_OUTS))

        paths = []
        for i in range(N_INS):
            key = f"merklePath{i + 1}"
            if key not in data:
                raise SerializationError(f"missing field {key}")
            paths.append(Path.from_json(data[key], levels))
        values["merkle_paths"] = tuple(paths)
        return cls(**values)

    @classmethod
    def from_json(cls, text: str, levels: int = LEVELS) -> "ProofInput":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise SerializationError(f"invalid JSON: {e}")
        if not isinstance(data, dict):
            raise SerializationError("proof input must be a JSON object")
        return cls.from_dict(data, levels)

    @classmethod
    def from_circuit(cls, circuit: TransactionCircuit) -> "ProofInput":
        return cls(
            **{name: getattr(circuit, name) for name, _ in _SCALARS + _PER_INPUT + _PER_OUTPUT},
            merkle_paths=circuit.merkle_paths,
        )

    def to_dict(self) -> dict:
        data = {key: getattr(self, name).to_decimal() for name, key in _SCALARS}
        for name, key in _PER_INPUT + _PER_OUTPUT:
            for i, value in enumerate(getattr(self, name)):
                data[f"{key}{i + 1}"] = value.to_decimal()
        for i, path in enumerate(self.merkle_paths):
            data[f"merklePath{i + 1}"] = path.to_json()
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    def to_circuit(self, hasher: Hasher) -> TransactionCircuit:
        return TransactionCircuit(
            hasher=hasher,
            levels=self.merkle_paths[0].levels,
            root=self.root,
            public_amount=self.public_amount,
            ext_data_hash=self.ext_data_hash,
            input_nullifiers=self.input_nullifiers,
            output_commitments=self.output_commitments,
            in_private_keys=self.in_private_keys,
            in_amounts=self.in_amounts,
            in_blindings=self.in_blindings,
            in_path_indices=self.in_path_indices,
            merkle_paths=self.merkle_paths,
            out_public_keys=self.out_public_keys,
            out_amounts=self.out_amounts,
            out_blindings=self.out_blindings,
        )


@dataclass
class ProofOutput:
    proof: bytes
    public_inputs: list[Fr]

    def to_json(self) -> str:
        return json.dumps(
            {
                "proof": "0x" + self.proof.hex(),
                "publicInputs": [x.to_decimal() for x in self.public_inputs],
            }
        )

    @classmethod
    def from_json(cls, text: str) -> "ProofOutput":
        try:
            data = json.loads(text)
            proof = data["proof"]
            public_inputs = data["publicInputs"]
        except (json.JSONDecodeError, KeyError, TypeError) as e:
            raise SerializationError(f"invalid proof output: {e}")
        if not isinstance(proof, str) or not isinstance(public_inputs, list):
            raise SerializationError("invalid proof output fields")
        try:
            proof_bytes = bytes.fromhex(proof[2:] if proof.startswith("0x") else proof)
        except ValueError:
            raise SerializationError("proof is not hex encoded")
        return cls(proof=proof_bytes, public_inputs=[Fr.from_decimal(x) for x in public_inputs])
