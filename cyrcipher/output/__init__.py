"""
CyrCipher Output Module
========================

Console display of engine results.
"""

from cyrcipher.output.console import CipherConsoleOutput

__all__ = [
    "CipherConsoleOutput",
]
