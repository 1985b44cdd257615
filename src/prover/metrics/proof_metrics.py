"""
Merkle Prover - Proof Metrics

Prometheus metrics for tree construction and proof generation.

Metrics Categories:
- Merkle tree building
- Proof lookups and generation
- Proof output
"""

from prometheus_client import Counter, Histogram, Info

import structlog

logger = structlog.get_logger(__name__)


class ProofMetrics:
    """
    Centralized metrics for the Merkle prover.

    Provides visibility into:
    - Tree build times and sizes
    - Proof lookup outcomes and path lengths
    - Proof files written
    """

    def __init__(self) -> None:
        """Initialize all prover metrics."""
        self._init_tree_metrics()
        self._init_proof_metrics()
        self._init_info_metrics()

    def _init_tree_metrics(self) -> None:
        """Initialize Merkle tree metrics."""
        self.tree_build_duration = Histogram(
            "merkle_prover_tree_build_duration_seconds",
            "Merkle tree build time",
            buckets=[0.0001, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0],
        )

        self.tree_size = Histogram(
            "merkle_prover_tree_size",
            "Number of leaves in Merkle tree",
            buckets=[1, 10, 50, 100, 500, 1000, 5000, 10000, 50000],
        )

    def _init_proof_metrics(self) -> None:
        """Initialize proof metrics."""
        self.proof_generation_duration = Histogram(
            "merkle_prover_proof_duration_seconds",
            "Merkle proof generation time",
            buckets=[0.00001, 0.0001, 0.0005, 0.001, 0.005, 0.01, 0.1],
        )

        self.proof_lookups = Counter(
            "merkle_prover_proof_lookups_total",
            "Proof lookups by outcome",
            ["result"],
        )

        self.proof_length = Histogram(
            "merkle_prover_proof_length",
            "Number of sibling hashes in generated proofs",
            buckets=[0, 1, 2, 4, 8, 12, 16, 24, 32],
        )

        self.proofs_written = Counter(
            "merkle_prover_proofs_written_total",
            "Proof files written",
        )

    def _init_info_metrics(self) -> None:
        """Initialize info metrics."""
        self.service_info = Info(
            "merkle_prover_service",
            "Merkle prover service information",
        )

    # Convenience methods

    def record_tree_build(self, duration: float, tree_size: int) -> None:
        """Record Merkle tree build."""
        self.tree_build_duration.observe(duration)
        self.tree_size.observe(tree_size)

    def record_proof_lookup(
        self,
        found: bool,
        duration: float,
        proof_length: int | None = None,
    ) -> None:
        """Record a proof lookup."""
        result = "found" if found else "not_found"
        self.proof_lookups.labels(result=result).inc()
        self.proof_generation_duration.observe(duration)
        if found and proof_length is not None:
            self.proof_length.observe(proof_length)

    def record_proof_written(self) -> None:
        """Record a proof file written."""
        self.proofs_written.inc()

    def set_service_info(self, version: str, environment: str) -> None:
        """Set service info labels."""
        self.service_info.info({
            "version": version,
            "environment": environment,
        })


# Singleton instance
_proof_metrics: ProofMetrics | None = None


def get_proof_metrics() -> ProofMetrics:
    """Get global proof metrics instance."""
    global _proof_metrics
    if _proof_metrics is None:
        _proof_metrics = ProofMetrics()
        logger.debug("Proof metrics initialized")
    return _proof_metrics
