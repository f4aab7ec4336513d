"""Arbitrary-precision integers built on a cursor-based list, with an arithmetic report command."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "biginteger", "cursorlist"]