"""
Merkle Prover - Proof Writer

Writes proof hashes to a text file, one hash per line, nearest
sibling first.
"""

from pathlib import Path

import structlog

from prover.crypto.merkle import MerkleProof

logger = structlog.get_logger(__name__)


class ProofWriterError(Exception):
    """Raised when a proof file cannot be written or read."""

    pass


def write_proof(proof: MerkleProof, path: str | Path) -> Path:
    """
    Write proof hashes to a file.

    Args:
        proof: Proof to write
        path: Destination file; parent directories are created

    Returns:
        Path of the written file

    Raises:
        ProofWriterError: If the file cannot be written
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            for hash_value in proof.hashes:
                f.write(f"{hash_value}\n")
    except OSError as e:
        logger.error("Failed to write proof file", path=str(path), error=str(e))
        raise ProofWriterError(f"Failed to write proof to {path}: {e}") from e

    logger.info("Proof written", path=str(path), proof_length=len(proof))
    return path


def read_proof_lines(path: str | Path) -> list[str]:
    """Read proof hashes back from a file written by write_proof."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ProofWriterError(f"Failed to read proof from {path}: {e}") from e
    return [line for line in text.splitlines() if line]
