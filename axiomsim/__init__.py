"""Deterministic grid-world simulation core with overflow-safe fixed-point arithmetic."""

__version__ = "0.0.1"

__all__ = ["overflow", "division", "safe", "selftest", "world", "api", "headless"]