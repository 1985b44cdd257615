"""
Merkle Prover - Main Entry Point

Builds a Merkle tree over the configured sample records, generates an
inclusion proof for the configured target and writes it to a file.
"""

import sys

import structlog

from prover.core.config import settings
from prover.core.logging import setup_logging
from prover.metrics import get_proof_metrics
from prover.services.proof_service import ProofService
from prover.services.proof_writer import ProofWriterError

logger = structlog.get_logger(__name__)

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_WRITE_FAILED = 2


def main() -> int:
    """Run a single proving job from settings."""
    setup_logging()

    logger.info(
        "Starting Merkle prover",
        version=settings.VERSION,
        environment=settings.ENV,
        record_count=len(settings.SAMPLE_RECORDS),
    )

    if settings.METRICS_ENABLED:
        get_proof_metrics().set_service_info(
            version=settings.VERSION,
            environment=settings.ENV,
        )

    service = ProofService()
    try:
        result = service.prove_and_write(
            records=settings.SAMPLE_RECORDS,
            target=settings.PROOF_TARGET,
            output_path=settings.PROOF_OUTPUT_PATH,
        )
    except ProofWriterError as e:
        logger.error("Proof job failed", error=str(e))
        print(f"Error writing to file: {e}", file=sys.stderr)
        return EXIT_WRITE_FAILED

    if not result.found:
        print("Item not found in the database.")
        return EXIT_NOT_FOUND

    print(f"Merkle proof has been output to file: {result.output_path}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
