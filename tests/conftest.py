"""
Pytest configuration and shared fixtures for Merkle prover tests.
"""

from collections.abc import Callable
from unittest.mock import MagicMock

import pytest

from prover.crypto.merkle import (
    MerkleProof,
    MerkleTree,
    ProofDirection,
    compute_parent_hash,
)
from prover.metrics import ProofMetrics
from prover.services.proof_service import ProofService


def _fold_proof(proof: MerkleProof) -> str:
    current_hash = proof.leaf_hash
    for element in proof.proof_path:
        if element.direction == ProofDirection.LEFT:
            current_hash = compute_parent_hash(element.hash, current_hash)
        else:
            current_hash = compute_parent_hash(current_hash, element.hash)
    return current_hash


@pytest.fixture
def recompute_root() -> Callable[[MerkleProof], str]:
    """Fold a directional proof back up to a root hash."""
    return _fold_proof


@pytest.fixture
def sample_records() -> list[str]:
    """The default three sample records."""
    return ["item1", "item2", "item3"]


@pytest.fixture
def sample_tree(sample_records: list[str]) -> MerkleTree:
    """Tree built over the sample records."""
    return MerkleTree.from_records(sample_records)


@pytest.fixture
def mock_metrics() -> MagicMock:
    """Create a mock metrics sink."""
    return MagicMock(spec=ProofMetrics)


@pytest.fixture
def proof_service(mock_metrics: MagicMock) -> ProofService:
    """Create a proof service with mocked metrics."""
    return ProofService(metrics=mock_metrics)
