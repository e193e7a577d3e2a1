"""Parsing and formatting of MIME header field parameters."""

__version__ = "0.1.0"
__all__ = ["fieldparam"]