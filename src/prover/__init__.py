"""
Merkle Prover

Builds SHA-256 Merkle trees over ordered records and generates
inclusion proofs for individual records.
"""

__version__ = "1.0.0"
