import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from .constants import ZERO_VALUE
from .errors import CapacityExceeded, IndexOutOfBounds, PathLengthMismatch, SerializationError
from .field import Fr
from .hashing import Hasher
from .hashing_gadget import HasherVar
from .r1cs import AllocationMode, Boolean, ConstraintSystem, FieldVar

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Path:
    """
    Membership proof for one leaf.

    Level 0 holds the pair of leaves that contains the target leaf. Levels
    1..H-1 hold the (left, right) pair of nodes met while walking from that
    pair up to the root.
    """

    path: tuple[tuple[Fr, Fr], ...]

    def __post_init__(self):
        assert all(len(pair) == 2 for pair in self.path), f"{self.path}"
        assert all(
            isinstance(x, Fr) for pair in self.path for x in pair
        ), f"{[type(x) for pair in self.path for x in pair]}"

    @property
    def levels(self) -> int:
        return len(self.path)

    @classmethod
    def empty(cls, levels: int) -> "Path":
        return cls(tuple((Fr.zero(), Fr.zero()) for _ in range(levels)))

    def calculate_root(self, leaf: Fr, hasher: Hasher) -> Fr:
        previous = Fr(leaf)
        for left, right in self.path:
            # The running hash is the left operand iff it equals the stored left
            if previous == left:
                previous = hasher.hash2(previous, right)
            else:
                previous = hasher.hash2(left, previous)
        return previous

    def check_membership(self, root: Fr, leaf: Fr, hasher: Hasher) -> bool:
        return self.calculate_root(leaf, hasher) == root

    def get_index(self, root: Fr, leaf: Fr, hasher: Hasher) -> int:
        """
        Recovers the position of `leaf` in the tree with the given root.
        """
        if not self.check_membership(root, leaf, hasher):
            raise ValueError("leaf is not a member of the tree with the given root")

        index = 0 if leaf == self.path[0][0] else 1
        previous = hasher.hash2(*self.path[0])
        for level, (left, right) in enumerate(self.path[1:], start=1):
            if previous != left:
                index |= 1 << level
            previous = hasher.hash2(left, right)
        return index

    def to_json(self) -> list[list[str]]:
        return [[left.to_decimal(), right.to_decimal()] for left, right in self.path]

    @classmethod
    def from_json(cls, data: Sequence[Sequence[str]], levels: int | None = None) -> "Path":
        if not isinstance(data, (list, tuple)):
            raise SerializationError(f"path must be a list of [left, right] pairs, got {data!r}")
        if levels is not None and len(data) != levels:
            raise PathLengthMismatch(levels, len(data))
        pairs = []
        for pair in data:
            if not isinstance(pair, (list, tuple)) or len(pair) != 2:
                raise SerializationError(f"path level must be a [left, right] pair, got {pair!r}")
            pairs.append((Fr.from_decimal(pair[0]), Fr.from_decimal(pair[1])))
        return cls(tuple(pairs))


class SparseMerkleTree:
    """
    Fixed height append-only commitment tree.

    Leaves are appended two at a time and the root is maintained with a
    frontier of cached left subtrees, one per level, exactly like the on-chain
    contract does it. A tree of height H holds 2^H leaves.

    Not safe for concurrent mutation: inserts must come from a single writer.
    """

    def __init__(
        self,
        levels: int,
        hasher: Hasher,
        empty_leaf: Fr = ZERO_VALUE,
        leaf_pairs: Iterable[tuple[Fr, Fr]] = (),
    ):
        assert levels >= 2, f"levels is {levels}"
        self.levels = levels
        self.hasher = hasher

        empty_hashes = [Fr(empty_leaf)]
        for _ in range(1, levels):
            empty_hashes.append(hasher.hash2(empty_hashes[-1], empty_hashes[-1]))
        self.empty_hashes = tuple(empty_hashes)

        # filled_subtrees[0] is never read, the pair itself plays that role
        self.filled_subtrees = list(self.empty_hashes)
        self._leaves: list[Fr] = []
        self._root = hasher.hash2(self.empty_hashes[-1], self.empty_hashes[-1])

        for left, right in leaf_pairs:
            self.insert_pair(left, right)

    @property
    def capacity(self) -> int:
        return 2**self.levels

    def __len__(self) -> int:
        return len(self._leaves)

    def is_empty(self) -> bool:
        return len(self._leaves) == 0

    def is_full(self) -> bool:
        return len(self._leaves) >= self.capacity

    def leaves(self) -> list[Fr]:
        return list(self._leaves)

    def root(self) -> Fr:
        return self._root

    def insert_pair(self, left: Fr, right: Fr):
        if len(self._leaves) + 2 > self.capacity:
            raise CapacityExceeded(self.capacity)
        left, right = Fr(left), Fr(right)

        index = len(self._leaves) // 2
        current = self.hasher.hash2(left, right)
        for level in range(1, self.levels):
            if index % 2 == 0:
                self.filled_subtrees[level] = current
                current = self.hasher.hash2(current, self.empty_hashes[level])
            else:
                current = self.hasher.hash2(self.filled_subtrees[level], current)
            index //= 2

        self._leaves += [left, right]
        self._root = current
        logger.debug(f"inserted leaf pair, tree now holds {len(self._leaves)} leaves")

    def insert(self, leaf: Fr):
        self.insert_pair(leaf, self.empty_hashes[0])

    def insert_batch(self, pairs: Iterable[tuple[Fr, Fr]]):
        for left, right in pairs:
            self.insert_pair(left, right)

    def bulk_insert(self, leaves: Sequence[Fr]):
        if len(leaves) % 2 != 0:
            raise ValueError(f"bulk_insert needs an even number of leaves, got {len(leaves)}")
        if len(self._leaves) + len(leaves) > self.capacity:
            raise CapacityExceeded(self.capacity)
        for i in range(0, len(leaves), 2):
            self.insert_pair(leaves[i], leaves[i + 1])

    def generate_membership_proof(self, index: int) -> Path:
        """
        Builds the path of the leaf at `index` from the leaf log alone. The
        frontier is neither read nor written, so proofs can be generated while
        no insert is in flight without touching shared state.
        """
        leaves = list(self._leaves)
        if not 0 <= index < len(leaves):
            raise IndexOutOfBounds(index, len(leaves))

        pos = index // 2
        path = [(leaves[2 * pos], leaves[2 * pos + 1])]

        nodes = [self.hasher.hash2(leaves[i], leaves[i + 1]) for i in range(0, len(leaves), 2)]
        for level in range(1, self.levels):
            sibling_pos = pos ^ 1
            sibling = nodes[sibling_pos] if sibling_pos < len(nodes) else self.empty_hashes[level]
            if pos % 2 == 0:
                path.append((nodes[pos], sibling))
            else:
                path.append((sibling, nodes[pos]))

            nodes = [
                self.hasher.hash2(
                    nodes[i], nodes[i + 1] if i + 1 < len(nodes) else self.empty_hashes[level]
                )
                for i in range(0, len(nodes), 2)
            ]
            pos //= 2

        return Path(tuple(path))

    def verify_path(self, index: int, path: Path) -> bool:
        if not 0 <= index < len(self._leaves):
            raise IndexOutOfBounds(index, len(self._leaves))
        if path.levels != self.levels:
            raise PathLengthMismatch(self.levels, path.levels)
        return path.check_membership(self._root, self._leaves[index], self.hasher)


class PathVar:
    """Gadget for one Merkle tree path."""

    def __init__(self, path: list[tuple[FieldVar, FieldVar]]):
        self.path = path

    @classmethod
    def new_variable(
        cls, cs: ConstraintSystem, path: Path, mode: AllocationMode = AllocationMode.WITNESS
    ) -> "PathVar":
        return cls([(cs.alloc(left, mode), cs.alloc(right, mode)) for left, right in path.path])

    @classmethod
    def new_witness(cls, cs: ConstraintSystem, path: Path) -> "PathVar":
        return cls.new_variable(cs, path, AllocationMode.WITNESS)

    @property
    def levels(self) -> int:
        return len(self.path)

    def root_hash(self, leaf: FieldVar, hasher: HasherVar) -> FieldVar:
        previous = leaf
        for left, right in self.path:
            previous_is_left = previous.is_eq(left)
            left_hash = FieldVar.conditionally_select(previous_is_left, previous, left)
            right_hash = FieldVar.conditionally_select(previous_is_left, right, previous)
            previous = hasher.hash2(left_hash, right_hash)
        return previous

    def check_membership(self, root: FieldVar, leaf: FieldVar, hasher: HasherVar) -> Boolean:
        """
        Whether the path leads from leaf to root. Does not check that the
        path matches any particular leaf index.
        """
        return root.is_eq(self.root_hash(leaf, hasher))
