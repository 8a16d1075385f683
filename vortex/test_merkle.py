from unittest import TestCase

from hypothesis import given, settings, strategies as st

from .constants import LEVELS, ZERO_VALUE
from .errors import CapacityExceeded, IndexOutOfBounds, PathLengthMismatch, SerializationError
from .field import Fr
from .hashing import Hasher
from .hashing_gadget import HasherVar
from .merkle import Path, PathVar, SparseMerkleTree
from .r1cs import ConstraintSystem


def reference_root(levels: int, leaf_pairs, hasher: Hasher, empty_leaf: Fr) -> Fr:
    """
    Straight simulation of the contract's append_pair: frontier per level,
    initial root is the root of the all-empty tree.
    """
    empty = [empty_leaf]
    for _ in range(levels):
        empty.append(hasher.hash2(empty[-1], empty[-1]))
    subtrees = empty[:levels]
    next_index = 0
    root = empty[levels]

    for left, right in leaf_pairs:
        assert 2**levels > next_index, "tree overflow"
        current_index = next_index // 2
        current = hasher.hash2(left, right)
        for i in range(1, levels):
            if current_index % 2 == 0:
                subtrees[i] = current
                current = hasher.hash2(current, empty[i])
            else:
                current = hasher.hash2(subtrees[i], current)
            current_index //= 2
        next_index += 2
        root = current
    return root


def mk_tree(levels: int, num_leaves: int, hasher: Hasher | None = None) -> SparseMerkleTree:
    tree = SparseMerkleTree(levels, hasher or Hasher.optimized(), empty_leaf=Fr(0))
    tree.bulk_insert([Fr(i + 1) for i in range(num_leaves)])
    return tree


class TestSparseMerkleTree(TestCase):
    def test_empty_root(self):
        tree = SparseMerkleTree(LEVELS, Hasher.optimized())
        assert tree.is_empty()
        self.assertEqual(
            tree.root(),
            4023688209857926016730691838838984168964497755397275208674494663143007853450,
        )

    def test_known_roots(self):
        tree = SparseMerkleTree(LEVELS, Hasher.optimized())
        tree.insert_pair(Fr(1), Fr(2))
        self.assertEqual(
            tree.root(),
            15476818325922297667928314295250995702645826258250901833766517334827116041401,
        )

        h = Hasher.optimized()
        small = SparseMerkleTree(4, h, Fr(0), [(Fr(1), Fr(2)), (Fr(3), Fr(4)), (Fr(5), Fr(6))])
        self.assertEqual(
            small.root(),
            11838392591942247189836630453831709241304848840261409987806777866862756791985,
        )

    def test_matches_reference(self):
        h = Hasher.optimized()
        pairs = [(Fr(2 * i + 1), Fr(2 * i + 2)) for i in range(7)]
        tree = SparseMerkleTree(4, h, Fr(0))
        for i, (left, right) in enumerate(pairs):
            tree.insert_pair(left, right)
            self.assertEqual(tree.root(), reference_root(4, pairs[: i + 1], h, Fr(0)))

    def test_matches_reference_with_sponge(self):
        h = Hasher.sponge()
        pairs = [(Fr(10 + i), Fr(20 + i)) for i in range(5)]
        tree = SparseMerkleTree(5, h, ZERO_VALUE, pairs)
        self.assertEqual(tree.root(), reference_root(5, pairs, h, ZERO_VALUE))

    def test_root_is_a_function_of_the_leaves(self):
        h = Hasher.optimized()
        a = SparseMerkleTree(6, h)
        a.bulk_insert([Fr(i) for i in range(10)])
        b = SparseMerkleTree(6, h)
        b.insert_batch([(Fr(2 * i), Fr(2 * i + 1)) for i in range(5)])
        self.assertEqual(a.root(), b.root())
        self.assertEqual(a.leaves(), b.leaves())

    def test_single_insert_pairs_with_empty_leaf(self):
        h = Hasher.optimized()
        a = SparseMerkleTree(4, h, Fr(7))
        a.insert(Fr(1))
        b = SparseMerkleTree(4, h, Fr(7))
        b.insert_pair(Fr(1), Fr(7))
        self.assertEqual(a.root(), b.root())
        self.assertEqual(len(a), 2)

    def test_bulk_insert_needs_even_count(self):
        tree = mk_tree(4, 0)
        with self.assertRaises(ValueError):
            tree.bulk_insert([Fr(1), Fr(2), Fr(3)])
        self.assertEqual(len(tree), 0)

    def test_capacity(self):
        tree = mk_tree(3, 6)
        assert not tree.is_full()
        self.assertEqual(len(tree), 6)
        tree.insert_pair(Fr(7), Fr(8))
        assert tree.is_full()
        self.assertEqual(len(tree), 8)

        root = tree.root()
        with self.assertRaises(CapacityExceeded):
            tree.insert_pair(Fr(9), Fr(10))
        with self.assertRaises(CapacityExceeded):
            tree.insert(Fr(9))
        self.assertEqual(len(tree), 8)
        self.assertEqual(tree.root(), root)

    def test_bulk_insert_beyond_capacity_inserts_nothing(self):
        tree = mk_tree(3, 4)
        with self.assertRaises(CapacityExceeded):
            tree.bulk_insert([Fr(i) for i in range(6)])
        self.assertEqual(len(tree), 4)


class TestMembershipProofs(TestCase):
    def test_roundtrip_all_leaves(self):
        h = Hasher.optimized()
        tree = mk_tree(5, 14)
        for index, leaf in enumerate(tree.leaves()):
            path = tree.generate_membership_proof(index)
            self.assertEqual(path.levels, 5)
            self.assertEqual(path.calculate_root(leaf, h), tree.root())
            assert path.check_membership(tree.root(), leaf, h)
            assert tree.verify_path(index, path)
            self.assertEqual(path.get_index(tree.root(), leaf, h), index)

    @given(num_pairs=st.integers(min_value=1, max_value=16), data=st.data())
    @settings(max_examples=5, deadline=None)
    def test_roundtrip_random_sizes(self, num_pairs, data):
        h = Hasher.optimized()
        tree = mk_tree(5, 2 * num_pairs)
        index = data.draw(st.integers(min_value=0, max_value=2 * num_pairs - 1))
        path = tree.generate_membership_proof(index)
        assert path.check_membership(tree.root(), tree.leaves()[index], h)

    def test_proof_stays_valid_only_for_its_root(self):
        h = Hasher.optimized()
        tree = mk_tree(4, 4)
        path = tree.generate_membership_proof(1)
        old_root = tree.root()
        tree.insert_pair(Fr(100), Fr(101))
        assert path.check_membership(old_root, Fr(2), h)
        assert not path.check_membership(tree.root(), Fr(2), h)
        assert tree.generate_membership_proof(1).check_membership(tree.root(), Fr(2), h)

    def test_wrong_leaf_is_rejected(self):
        h = Hasher.optimized()
        tree = mk_tree(4, 6)
        path = tree.generate_membership_proof(3)
        assert not path.check_membership(tree.root(), Fr(999), h)
        with self.assertRaises(ValueError):
            path.get_index(tree.root(), Fr(999), h)

    def test_unknown_index(self):
        tree = mk_tree(4, 4)
        with self.assertRaises(IndexOutOfBounds):
            tree.generate_membership_proof(4)
        with self.assertRaises(IndexOutOfBounds):
            tree.generate_membership_proof(-1)
        with self.assertRaises(IndexOutOfBounds):
            tree.verify_path(4, Path.empty(4))

    def test_verify_path_checks_length(self):
        tree = mk_tree(4, 4)
        with self.assertRaises(PathLengthMismatch):
            tree.verify_path(0, Path.empty(3))

    def test_json(self):
        tree = mk_tree(4, 4)
        path = tree.generate_membership_proof(2)
        data = path.to_json()
        self.assertEqual(len(data), 4)
        assert all(isinstance(x, str) for pair in data for x in pair)
        self.assertEqual(Path.from_json(data, 4), path)
        with self.assertRaises(PathLengthMismatch):
            Path.from_json(data, 5)
        with self.assertRaises(SerializationError):
            Path.from_json([["1"]] * 4, 4)
        for data in (5, None, [5] * 4):
            with self.assertRaises(SerializationError):
                Path.from_json(data, 4)


class TestPathVar(TestCase):
    def test_gadget_matches_native(self):
        h = Hasher.optimized()
        tree = mk_tree(4, 6)
        for index in (0, 3, 5):
            leaf = tree.leaves()[index]
            path = tree.generate_membership_proof(index)

            cs = ConstraintSystem()
            path_var = PathVar.new_witness(cs, path)
            root = cs.alloc_input(tree.root())
            leaf_var = cs.alloc_witness(leaf)
            hasher = HasherVar(h)

            self.assertEqual(path_var.root_hash(leaf_var, hasher).value(), tree.root())
            assert path_var.check_membership(root, leaf_var, hasher).value()
            assert cs.is_satisfied()

    def test_gadget_reports_non_membership(self):
        h = Hasher.optimized()
        tree = mk_tree(4, 6)
        path = tree.generate_membership_proof(2)

        cs = ConstraintSystem()
        path_var = PathVar.new_witness(cs, path)
        membership = path_var.check_membership(
            cs.alloc_input(tree.root()), cs.alloc_witness(Fr(12345)), HasherVar(h)
        )
        assert not membership.value()
        # Non-membership is a value, not a failed constraint
        assert cs.is_satisfied()
