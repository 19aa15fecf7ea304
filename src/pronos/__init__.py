"""PRONOS

User-context core of the PRONOS prediction-league backend.
It resolves the current user from an explicit parameter or the ambient
authenticated identity, and validates email addresses.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
