"""Fixed-length boolean vectors with bitwise logic, shifts, rotations and self-checks."""

__version__ = "0.1.0"
__all__ = ["vector", "selfcheck"]