"""
Merkle Prover - Services Package

Provides the proving workflow and proof file output.
"""

from prover.services.proof_service import ProofResult, ProofService
from prover.services.proof_writer import ProofWriterError, read_proof_lines, write_proof

__all__ = [
    "ProofResult",
    "ProofService",
    "ProofWriterError",
    "read_proof_lines",
    "write_proof",
]
