"""
Merkle Prover - Metrics Module

Prometheus metrics for the Merkle prover.

Exports:
- Merkle tree build times and sizes
- Proof lookup outcomes
- Proof output counters
"""

from prover.metrics.proof_metrics import (
    ProofMetrics,
    get_proof_metrics,
)

__all__ = [
    "ProofMetrics",
    "get_proof_metrics",
]
