"""
CyrCipher -- Classical Ciphers over the Cyrillic Alphabet
==========================================================

Educational implementation of two classical ciphers over the 33-letter
Russian alphabet: a Gronsfeld-style shift cipher keyed by letters and a
columnar route (transposition) cipher keyed by a column count.

Neither cipher offers any real security; both exist to demonstrate
key validation, modular arithmetic and grid permutations.

Modules:
    - cyrcipher.core.alphabet: Alphabet table and index lookups
    - cyrcipher.core.normalizer: Key, open-text and cipher-text validation
    - cyrcipher.core.errors: Error taxonomy
    - cyrcipher.core.engine: Facade used by the CLI
    - cyrcipher.core.models: Pydantic result models
    - cyrcipher.ciphers: The cipher engines
    - cyrcipher.output: Console output
    - cyrcipher.cli: Click-based command-line interface
"""

from cyrcipher.ciphers import ShiftCipher, TranspositionCipher
from cyrcipher.core.errors import CipherError

__version__ = "1.0.0"
__tool_name__ = "cyrcipher"

__all__ = [
    "CipherError",
    "ShiftCipher",
    "TranspositionCipher",
]
