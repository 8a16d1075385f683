from dataclasses import replace
from unittest import TestCase

from .circuit import TransactionCircuit
from .constants import LEVELS, MAX_AMOUNT_BITS
from .errors import IndexOutOfBounds, PathLengthMismatch
from .field import Fr
from .hashing import Hasher
from .merkle import Path, SparseMerkleTree
from .note import Keypair, Utxo
from .prover import synthesize

TEST_LEVELS = 8

ALICE = Keypair(1111)
BOB = Keypair(2222)


def mk_transaction(
    in_amounts=(30, 70),
    out_amounts=(60, 50),
    public_amount=10,
    levels=TEST_LEVELS,
    hasher=None,
    duplicate_input=False,
):
    """
    Alice spends two notes sitting at leaves 2 and 3 of the tree and pays
    two fresh notes to Bob.
    """
    h = hasher or Hasher.optimized()
    tree = SparseMerkleTree(levels, h)
    tree.bulk_insert([Fr(5), Fr(6)])

    inputs = [
        Utxo.owned(ALICE, amount, h, blinding=Fr(100 + i), index=2 + i)
        for i, amount in enumerate(in_amounts)
    ]
    if duplicate_input:
        inputs[1] = inputs[0]
    tree.insert_pair(inputs[0].commitment(h), inputs[1].commitment(h))

    outputs = [
        Utxo(amount=amount, public_key=BOB.public_key(h), blinding=Fr(200 + i))
        for i, amount in enumerate(out_amounts)
    ]
    return TransactionCircuit.build(h, tree, inputs, outputs, Fr(public_amount), Fr(42)), tree


class TestTransactionCircuit(TestCase):
    def test_valid_transaction(self):
        circuit, tree = mk_transaction(levels=LEVELS)
        cs = synthesize(circuit)
        assert cs.is_satisfied(), cs.which_is_unsatisfied()

    def test_valid_transaction_with_sponge_hasher(self):
        circuit, _ = mk_transaction(hasher=Hasher.sponge())
        assert synthesize(circuit).is_satisfied()

    def test_public_input_order(self):
        circuit, tree = mk_transaction()
        cs = synthesize(circuit)
        expected = [
            tree.root(),
            Fr(10),
            Fr(42),
            *circuit.input_nullifiers,
            *circuit.output_commitments,
        ]
        self.assertEqual(cs.public_inputs(), expected)
        self.assertEqual(circuit.public_inputs(), expected)
        self.assertEqual(cs.num_inputs, 7)

    def test_withdrawal(self):
        # A negative public amount leaves the pool
        circuit, _ = mk_transaction(in_amounts=(30, 70), out_amounts=(40, 0), public_amount=-60)
        assert synthesize(circuit).is_satisfied()

    def test_broken_conservation(self):
        circuit, _ = mk_transaction(out_amounts=(61, 50))
        cs = synthesize(circuit)
        self.assertEqual(cs.which_is_unsatisfied(), "value_conservation")

    def test_output_commitment_must_match(self):
        circuit, _ = mk_transaction()
        circuit = replace(circuit, out_amounts=(Fr(61), Fr(50)))
        cs = synthesize(circuit)
        self.assertEqual(cs.which_is_unsatisfied(), "output_0/commitment")

    def test_duplicate_nullifiers(self):
        circuit, _ = mk_transaction(in_amounts=(30, 30), out_amounts=(40, 30), duplicate_input=True)
        self.assertEqual(circuit.input_nullifiers[0], circuit.input_nullifiers[1])
        cs = synthesize(circuit)
        self.assertEqual(cs.which_is_unsatisfied(), "distinct_nullifiers_0_1")

    def test_amount_out_of_range(self):
        big = 2**MAX_AMOUNT_BITS
        circuit, _ = mk_transaction(in_amounts=(big, 5), out_amounts=(3, 2), public_amount=-big)
        cs = synthesize(circuit)
        self.assertEqual(cs.which_is_unsatisfied(), "input_0/amount_range")

    def test_largest_amount_in_range(self):
        big = 2**MAX_AMOUNT_BITS - 1
        circuit, _ = mk_transaction(in_amounts=(big, 5), out_amounts=(big, 5), public_amount=0)
        assert synthesize(circuit).is_satisfied()

    def test_output_amount_out_of_range(self):
        # -1 in the field is a huge amount that would fund the other output
        circuit, _ = mk_transaction(in_amounts=(30, 70), out_amounts=(-1, 111), public_amount=10)
        cs = synthesize(circuit)
        self.assertEqual(cs.which_is_unsatisfied(), "output_0/amount_range")

    def test_membership_of_wrong_commitment(self):
        circuit, tree = mk_transaction()
        # Path of the filler leaf at index 0 instead of the spent note
        paths = (tree.generate_membership_proof(0), circuit.merkle_paths[1])
        cs = synthesize(replace(circuit, merkle_paths=paths))
        self.assertEqual(cs.which_is_unsatisfied(), "input_0/membership")

    def test_wrong_nullifier(self):
        circuit, _ = mk_transaction()
        nullifiers = (Fr(circuit.input_nullifiers[0].n + 1), circuit.input_nullifiers[1])
        cs = synthesize(replace(circuit, input_nullifiers=nullifiers))
        self.assertEqual(cs.which_is_unsatisfied(), "input_0/nullifier")

    def test_zero_amount_input_with_garbage_path(self):
        h = Hasher.optimized()
        tree = SparseMerkleTree(TEST_LEVELS, h)
        real = Utxo.owned(ALICE, 40, h, blinding=Fr(7), index=0)
        tree.insert(real.commitment(h))
        # Never inserted into the tree
        empty = Utxo.owned(ALICE, 0, h, blinding=Fr(8), index=77)

        outputs = [
            Utxo(amount=25, public_key=BOB.public_key(h), blinding=Fr(1)),
            Utxo(amount=15, public_key=BOB.public_key(h), blinding=Fr(2)),
        ]
        circuit = TransactionCircuit.build(h, tree, [empty, real], outputs, Fr(0), Fr(0))
        garbage = Path(tuple((Fr(3 * i + 1), Fr(3 * i + 2)) for i in range(TEST_LEVELS)))
        circuit = replace(circuit, merkle_paths=(garbage, circuit.merkle_paths[1]))

        cs = synthesize(circuit)
        assert cs.is_satisfied(), cs.which_is_unsatisfied()

    def test_deposit_with_two_empty_inputs(self):
        h = Hasher.optimized()
        tree = SparseMerkleTree(TEST_LEVELS, h)
        inputs = [Utxo.owned(ALICE, 0, h, blinding=Fr(i), index=i) for i in range(2)]
        outputs = [
            Utxo(amount=60, public_key=ALICE.public_key(h), blinding=Fr(3)),
            Utxo(amount=40, public_key=ALICE.public_key(h), blinding=Fr(4)),
        ]
        circuit = TransactionCircuit.build(h, tree, inputs, outputs, Fr(100), Fr(0))
        assert synthesize(circuit).is_satisfied()

    def test_empty_circuit_has_the_same_shape(self):
        circuit, _ = mk_transaction()
        empty = TransactionCircuit.empty(Hasher.optimized(), TEST_LEVELS)
        self.assertEqual(
            synthesize(empty).num_constraints, synthesize(circuit).num_constraints
        )


class TestCircuitConstruction(TestCase):
    def test_path_length_mismatch(self):
        circuit, _ = mk_transaction()
        with self.assertRaises(PathLengthMismatch):
            replace(circuit, merkle_paths=(Path.empty(TEST_LEVELS - 1), circuit.merkle_paths[1]))

    def test_path_index_beyond_capacity(self):
        circuit, _ = mk_transaction()
        with self.assertRaises(IndexOutOfBounds):
            replace(circuit, in_path_indices=(Fr(2**TEST_LEVELS), Fr(0)))

    def test_wrong_number_of_notes(self):
        circuit, _ = mk_transaction()
        with self.assertRaises(ValueError):
            replace(circuit, input_nullifiers=circuit.input_nullifiers + (Fr(1),))
