"""
CyrCipher Entry Point
======================

Allows running the CLI via: python -m cyrcipher
"""

from cyrcipher.cli import main

if __name__ == "__main__":
    main()
