"""
CyrCipher Shared Module
=======================

Configuration, logging and console utilities shared by the CyrCipher
command-line tool.
"""

from shared.config import CyrConfig

__all__ = ["CyrConfig"]
