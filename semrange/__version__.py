"""
semrange version information.

This module provides a single source of truth for the package version.
It is kept free of imports so ``setup`` tooling and ``__main__`` can read
it without loading click or rich.
"""

__version__ = "0.3.0"
