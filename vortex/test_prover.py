import json
from dataclasses import replace
from unittest import TestCase

from . import prover
from .circuit import TransactionCircuit
from .errors import ConstraintUnsatisfied, PathLengthMismatch, SerializationError
from .field import Fr
from .hashing import Hasher
from .prover import ProofInput, ProofOutput, check_satisfied, prove, synthesize, verify
from .test_circuit import TEST_LEVELS, mk_transaction


class MockBackend:
    """Records calls and accepts a proof iff it was produced for the same public inputs."""

    def __init__(self):
        self.setup_calls = []
        self.prove_calls = []

    def setup(self, circuit):
        self.setup_calls.append(circuit)
        return b"pk", b"vk"

    def prove(self, proving_key, circuit, rng):
        self.prove_calls.append(circuit)
        return b"proof:" + b",".join(x.to_bytes() for x in circuit.public_inputs())

    def verify(self, verifying_key, public_inputs, proof):
        return proof == b"proof:" + b",".join(x.to_bytes() for x in public_inputs)


class TestProver(TestCase):
    def test_setup_uses_empty_circuit(self):
        backend = MockBackend()
        pk, vk = prover.setup(backend, Hasher.optimized(), TEST_LEVELS)
        self.assertEqual((pk, vk), (b"pk", b"vk"))
        circuit = backend.setup_calls[0]
        self.assertEqual(circuit.levels, TEST_LEVELS)
        self.assertEqual(circuit.public_inputs(), [Fr.zero()] * 7)

    def test_prove_and_verify(self):
        backend = MockBackend()
        circuit, _ = mk_transaction()
        output = prove(backend, b"pk", circuit, rng=None)
        self.assertEqual(output.public_inputs, circuit.public_inputs())
        assert verify(backend, b"vk", output)

        tampered = ProofOutput(output.proof, [Fr(1), *output.public_inputs[1:]])
        assert not verify(backend, b"vk", tampered)

    def test_unsatisfied_witness_never_reaches_backend(self):
        backend = MockBackend()
        circuit, _ = mk_transaction(out_amounts=(61, 50))
        with self.assertRaises(ConstraintUnsatisfied) as ctx:
            prove(backend, b"pk", circuit, rng=None)
        self.assertEqual(ctx.exception.constraint, "value_conservation")
        self.assertEqual(backend.prove_calls, [])

    def test_check_satisfied(self):
        circuit, _ = mk_transaction()
        cs = check_satisfied(circuit)
        self.assertEqual(cs.num_constraints, synthesize(circuit).num_constraints)


class TestProofInput(TestCase):
    def test_json_roundtrip_gives_same_circuit(self):
        h = Hasher.optimized()
        circuit, _ = mk_transaction()
        text = ProofInput.from_circuit(circuit).to_json()
        restored = ProofInput.from_json(text, TEST_LEVELS).to_circuit(h)
        self.assertEqual(restored, circuit)
        assert synthesize(restored).is_satisfied()

    def test_keys_are_numbered_from_one(self):
        circuit, _ = mk_transaction()
        data = ProofInput.from_circuit(circuit).to_dict()
        for key in ("root", "publicAmount", "extDataHash", "inputNullifier1", "inputNullifier2",
                    "outputCommitment1", "outputCommitment2", "inPathIndex2", "merklePath1"):
            self.assertIn(key, data)
        self.assertNotIn("inputNullifier0", data)
        self.assertEqual(data["publicAmount"], "10")
        self.assertEqual(data["inPathIndex1"], "2")
        self.assertEqual(len(data["merklePath2"]), TEST_LEVELS)

    def test_negative_public_amount_is_reduced(self):
        circuit, _ = mk_transaction(out_amounts=(40, 0), public_amount=-60)
        data = ProofInput.from_circuit(circuit).to_dict()
        self.assertEqual(Fr.from_decimal(data["publicAmount"]), Fr(-60))

    def test_missing_field(self):
        circuit, _ = mk_transaction()
        data = ProofInput.from_circuit(circuit).to_dict()
        del data["outBlinding2"]
        with self.assertRaises(SerializationError):
            ProofInput.from_dict(data, TEST_LEVELS)

        data = ProofInput.from_circuit(circuit).to_dict()
        del data["merklePath1"]
        with self.assertRaises(SerializationError):
            ProofInput.from_dict(data, TEST_LEVELS)

    def test_malformed_values(self):
        circuit, _ = mk_transaction()
        data = ProofInput.from_circuit(circuit).to_dict()
        data["inAmount1"] = "-5"
        with self.assertRaises(SerializationError):
            ProofInput.from_dict(data, TEST_LEVELS)

        with self.assertRaises(SerializationError):
            ProofInput.from_json("{not json", TEST_LEVELS)
        with self.assertRaises(SerializationError):
            ProofInput.from_json("[1, 2]", TEST_LEVELS)

    def test_malformed_paths(self):
        circuit, _ = mk_transaction()
        for path in (
            5,
            None,
            "0,1",
            [5] * TEST_LEVELS,
            [["1", "2", "3"]] * TEST_LEVELS,
            [[1, 2]] * TEST_LEVELS,
        ):
            data = ProofInput.from_circuit(circuit).to_dict()
            data["merklePath1"] = path
            with self.assertRaises(SerializationError):
                ProofInput.from_dict(data, TEST_LEVELS)

    def test_wrong_path_length(self):
        circuit, _ = mk_transaction()
        text = ProofInput.from_circuit(circuit).to_json()
        with self.assertRaises(PathLengthMismatch):
            ProofInput.from_json(text, TEST_LEVELS + 1)

    def test_empty_circuit_roundtrip(self):
        h = Hasher.sponge()
        circuit = TransactionCircuit.empty(h, TEST_LEVELS)
        restored = ProofInput.from_json(ProofInput.from_circuit(circuit).to_json(), TEST_LEVELS)
        self.assertEqual(restored.to_circuit(h), circuit)

    def test_tampered_input_is_rejected_by_circuit(self):
        h = Hasher.optimized()
        circuit, _ = mk_transaction()
        data = ProofInput.from_circuit(circuit).to_dict()
        data["extDataHash"] = "43"
        restored = ProofInput.from_dict(data, TEST_LEVELS).to_circuit(h)
        # ext_data_hash is only bound, not checked, so the witness still satisfies
        self.assertEqual(restored, replace(circuit, ext_data_hash=Fr(43)))
        assert synthesize(restored).is_satisfied()


class TestProofOutput(TestCase):
    def test_json_roundtrip(self):
        output = ProofOutput(proof=b"\x01\x02\xff", public_inputs=[Fr(1), Fr(-1)])
        data = json.loads(output.to_json())
        self.assertEqual(data["proof"], "0x0102ff")
        self.assertEqual(data["publicInputs"][0], "1")
        self.assertEqual(ProofOutput.from_json(output.to_json()), output)

    def test_malformed(self):
        for text in (
            "nope",
            "{}",
            json.dumps({"proof": "0x00"}),
            json.dumps({"proof": 5, "publicInputs": []}),
            json.dumps({"proof": "0xzz", "publicInputs": []}),
            json.dumps({"proof": "0x00", "publicInputs": ["x"]}),
        ):
            with self.assertRaises(SerializationError):
                ProofOutput.from_json(text)
