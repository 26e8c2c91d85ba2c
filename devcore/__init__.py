"""Hex and big-endian helpers, difficulty targets, fixed-size hashes, logging and worker threads."""

__version__ = "1.2.4"
__all__ = ["common_data", "fixed_hash", "log", "worker"]