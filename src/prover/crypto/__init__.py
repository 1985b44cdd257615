"""
Merkle Prover - Cryptographic Utilities

Provides Merkle tree construction and inclusion proof generation.
"""

from prover.crypto.merkle import (
    MerkleNode,
    MerkleProof,
    MerkleTree,
    ProofDirection,
    ProofElement,
    build_tree,
    compute_digest,
    compute_parent_hash,
    generate_proof,
)

__all__ = [
    "MerkleNode",
    "MerkleProof",
    "MerkleTree",
    "ProofDirection",
    "ProofElement",
    "build_tree",
    "compute_digest",
    "compute_parent_hash",
    "generate_proof",
]
