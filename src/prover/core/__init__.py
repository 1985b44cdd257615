"""
Merkle Prover - Core Package

Configuration and logging setup.
"""

from prover.core.config import Settings, get_settings, settings

__all__ = ["Settings", "get_settings", "settings"]
