"""
Merkle Prover - Merkle Tree Implementation

Provides deterministic Merkle tree construction with SHA-256 hashing
and inclusion proof generation.

Hashing conventions:
- A leaf hash is the hex SHA-256 digest of the record bytes
  (text records are UTF-8 encoded first)
- An internal node hash is the hex SHA-256 digest of the two child
  hex digests concatenated as text (left first), hashed once

The tree is built top-down by splitting the record sequence at
len // 2, so for odd counts the right half holds the extra record.
"""

import hashlib
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

Record = bytes | str


class ProofDirection(str, Enum):
    """Side occupied by a sibling relative to the proven path."""

    LEFT = "L"
    RIGHT = "R"


@dataclass(frozen=True)
class MerkleNode:
    """
    Represents a node in the Merkle tree.

    Attributes:
        hash: Hex digest identifying the subtree content
        left: Left child node (None for leaves)
        right: Right child node (None for leaves)
    """

    hash: str
    left: "MerkleNode | None" = None
    right: "MerkleNode | None" = None

    def __post_init__(self) -> None:
        if (self.left is None) != (self.right is None):
            raise ValueError("MerkleNode must have zero or two children")

    @property
    def is_leaf(self) -> bool:
        """Check if this node is a leaf."""
        return self.left is None and self.right is None


@dataclass(frozen=True)
class ProofElement:
    """
    Single element in a Merkle proof path.

    Attributes:
        hash: The sibling hash at this level
        direction: Whether sibling is LEFT or RIGHT of the path
    """

    hash: str
    direction: ProofDirection

    def to_dict(self) -> dict[str, str]:
        """Serialize to dictionary."""
        return {"hash": self.hash, "direction": self.direction.value}


@dataclass(frozen=True)
class MerkleProof:
    """
    Merkle inclusion proof for a record.

    Attributes:
        leaf_hash: Hash of the leaf being proven
        proof_path: Sibling hashes, nearest to the leaf first
        root_hash: Root hash of the tree the proof was taken from
    """

    leaf_hash: str
    proof_path: tuple[ProofElement, ...]
    root_hash: str

    @property
    def hashes(self) -> list[str]:
        """Sibling hashes in proof order, without directions."""
        return [e.hash for e in self.proof_path]

    def __len__(self) -> int:
        return len(self.proof_path)

    def to_dict(self) -> dict[str, Any]:
        """Serialize proof to dictionary."""
        return {
            "leaf_hash": self.leaf_hash,
            "proof_path": [e.to_dict() for e in self.proof_path],
            "root_hash": self.root_hash,
        }

    def to_compact(self) -> list[str]:
        """
        Serialize to compact format (just the hashes with direction encoding).

        Format: ["L:hash1", "R:hash2", ...]
        """
        return [f"{e.direction.value}:{e.hash}" for e in self.proof_path]


def compute_digest(data: Record) -> str:
    """
    Compute the hex SHA-256 digest of a record.

    Args:
        data: Record content (text is UTF-8 encoded)

    Returns:
        Lowercase hex-encoded SHA-256 hash
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.sha256(data).hexdigest()


def compute_parent_hash(left_hash: str, right_hash: str) -> str:
    """
    Compute the hash of an internal node.

    The child hex digests are concatenated as text and hashed once;
    they are not decoded back to raw bytes first.

    Args:
        left_hash: Hash of left child (hex string)
        right_hash: Hash of right child (hex string)

    Returns:
        Hex-encoded SHA-256 hash
    """
    return compute_digest(left_hash + right_hash)


def _build_node(records: Sequence[Record]) -> MerkleNode | None:
    if not records:
        return None

    if len(records) == 1:
        return MerkleNode(hash=compute_digest(records[0]))

    mid = len(records) // 2
    left = _build_node(records[:mid])
    right = _build_node(records[mid:])
    return MerkleNode(
        hash=compute_parent_hash(left.hash, right.hash),
        left=left,
        right=right,
    )


class MerkleTree:
    """
    Merkle tree over an ordered sequence of records.

    Features:
    - Deterministic construction from ordered records
    - Midpoint split, right half takes the extra record
    - Empty input yields an empty tree rather than an error
    - Immutable after construction

    Example:
        >>> tree = MerkleTree.from_records(["item1", "item2", "item3"])
        >>> proof = tree.get_proof("item2")
        >>> len(proof)
        2
    """

    def __init__(self, root: MerkleNode | None, leaf_count: int) -> None:
        """
        Initialize Merkle tree (internal use).

        Use from_records() to construct trees.
        """
        self._root = root
        self._leaf_count = leaf_count

    @classmethod
    def from_records(cls, records: Sequence[Record]) -> "MerkleTree":
        """
        Construct a Merkle tree from record data.

        Args:
            records: Ordered records (bytes or text)

        Returns:
            Constructed MerkleTree, empty if records is empty
        """
        records = list(records)
        return cls(_build_node(records), len(records))

    @property
    def root(self) -> MerkleNode | None:
        """Get the root node."""
        return self._root

    @property
    def root_hash(self) -> str | None:
        """Get the root hash (Merkle root), None for an empty tree."""
        return self._root.hash if self._root is not None else None

    @property
    def is_empty(self) -> bool:
        return self._root is None

    @property
    def leaf_count(self) -> int:
        """Get the number of leaves."""
        return self._leaf_count

    @property
    def depth(self) -> int:
        """Number of edges on the longest root-to-leaf path."""

        def _depth(node: MerkleNode | None) -> int:
            if node is None or node.is_leaf:
                return 0
            return 1 + max(_depth(node.left), _depth(node.right))

        return _depth(self._root)

    def get_proof(self, target: Record) -> MerkleProof | None:
        """
        Generate an inclusion proof for a record.

        Only leaves are matched against the target hash. If the record
        occurs more than once, the leftmost occurrence is proven.

        Args:
            target: Record to prove

        Returns:
            MerkleProof for the record, or None if it is not in the tree
        """
        if self._root is None:
            return None

        target_hash = compute_digest(target)
        path: list[ProofElement] = []
        if not _collect_path(self._root, target_hash, path):
            return None

        return MerkleProof(
            leaf_hash=target_hash,
            proof_path=tuple(path),
            root_hash=self._root.hash,
        )


def _collect_path(node: MerkleNode, target_hash: str, path: list[ProofElement]) -> bool:
    # Siblings are appended while unwinding, so the leaf's sibling lands first.
    if node.is_leaf:
        return node.hash == target_hash

    if _collect_path(node.left, target_hash, path):
        path.append(ProofElement(hash=node.right.hash, direction=ProofDirection.RIGHT))
        return True

    if _collect_path(node.right, target_hash, path):
        path.append(ProofElement(hash=node.left.hash, direction=ProofDirection.LEFT))
        return True

    return False


def build_tree(records: Sequence[Record]) -> MerkleTree:
    """Build a Merkle tree from ordered records."""
    return MerkleTree.from_records(records)


def generate_proof(tree: MerkleTree, target: Record) -> MerkleProof | None:
    """Generate an inclusion proof for target, or None if it is absent."""
    return tree.get_proof(target)
