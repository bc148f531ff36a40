"""
Error types raised by the SQL identifier value objects.
"""

from __future__ import annotations


class UnsupportedIdentifierOperation(TypeError):
    """
    Raised when an identifier is asked for something its shape cannot provide,
    such as the reference name of a composite or of the empty identifier.
    """
