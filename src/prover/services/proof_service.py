"""
Merkle Prover - Proof Service

Orchestrates the proving workflow:
1. Build Merkle tree from ordered records
2. Generate inclusion proof for a target record
3. Optionally write the proof hashes to a file
"""

import time
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import structlog

from prover.core.config import settings
from prover.crypto.merkle import MerkleProof, MerkleTree, Record, compute_digest
from prover.metrics import ProofMetrics, get_proof_metrics
from prover.services.proof_writer import write_proof

logger = structlog.get_logger(__name__)


@dataclass
class ProofResult:
    """Result of a proving run."""

    found: bool
    target_hash: str
    root_hash: str | None
    record_count: int
    proof: MerkleProof | None
    duration_seconds: float
    output_path: Path | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "found": self.found,
            "target_hash": self.target_hash,
            "root_hash": self.root_hash,
            "record_count": self.record_count,
            "proof": self.proof.to_dict() if self.proof is not None else None,
            "duration_seconds": round(self.duration_seconds, 6),
            "output_path": str(self.output_path) if self.output_path else None,
        }


class ProofService:
    """
    Builds Merkle trees and generates inclusion proofs.

    Every build is a full rebuild; trees are not cached between calls.
    """

    def __init__(self, metrics: ProofMetrics | None = None) -> None:
        """
        Initialize proof service.

        Args:
            metrics: Metrics sink (defaults to the global instance when enabled)
        """
        if metrics is None and settings.METRICS_ENABLED:
            metrics = get_proof_metrics()
        self._metrics = metrics

    def build_tree(self, records: Sequence[Record]) -> MerkleTree:
        """Build a Merkle tree and record build metrics."""
        start = time.perf_counter()
        tree = MerkleTree.from_records(records)
        duration = time.perf_counter() - start

        if self._metrics:
            self._metrics.record_tree_build(duration, tree.leaf_count)

        if tree.is_empty:
            logger.info("Built empty Merkle tree")
        else:
            logger.info(
                "Built Merkle tree",
                record_count=tree.leaf_count,
                depth=tree.depth,
                root_hash=tree.root_hash[:16] + "...",
            )
        return tree

    def prove(self, tree: MerkleTree, target: Record) -> MerkleProof | None:
        """Generate a proof for target and record lookup metrics."""
        start = time.perf_counter()
        proof = tree.get_proof(target)
        duration = time.perf_counter() - start

        if self._metrics:
            self._metrics.record_proof_lookup(
                found=proof is not None,
                duration=duration,
                proof_length=len(proof) if proof is not None else None,
            )

        if proof is None:
            logger.info(
                "Target not found in tree",
                target_hash=compute_digest(target)[:16] + "...",
            )
        else:
            logger.debug(
                "Generated proof",
                leaf_hash=proof.leaf_hash[:16] + "...",
                proof_length=len(proof),
            )
        return proof

    def run(self, records: Sequence[Record], target: Record) -> ProofResult:
        """
        Build a tree over records and prove target.

        Args:
            records: Ordered records
            target: Record to prove

        Returns:
            ProofResult; found is False when target is absent
        """
        job_start = time.perf_counter()
        tree = self.build_tree(records)
        proof = self.prove(tree, target)

        return ProofResult(
            found=proof is not None,
            target_hash=compute_digest(target),
            root_hash=tree.root_hash,
            record_count=tree.leaf_count,
            proof=proof,
            duration_seconds=time.perf_counter() - job_start,
        )

    def prove_and_write(
        self,
        records: Sequence[Record],
        target: Record,
        output_path: str | Path,
    ) -> ProofResult:
        """
        Build, prove and write the proof hashes to output_path.

        Nothing is written when the target is absent.

        Raises:
            ProofWriterError: If the proof file cannot be written
        """
        result = self.run(records, target)
        if result.proof is None:
            return result

        result.output_path = write_proof(result.proof, output_path)
        if self._metrics:
            self._metrics.record_proof_written()
        return result
