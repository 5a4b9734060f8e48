"""
Executable module for semrange.

Running:
    python -m semrange

is equivalent to:
    semrange
"""

from __future__ import annotations

import sys


def _print_startup_error(exc: ImportError) -> None:
    """Report a CLI import failure on stderr."""
    sys.stderr.write("semrange CLI could not be loaded.\n")
    sys.stderr.write(f"Python version : {sys.version}\n")
    try:
        from semrange.__version__ import __version__

        sys.stderr.write(f"semrange version: {__version__}\n")
    except ImportError:
        sys.stderr.write("semrange version: <unknown>\n")
    sys.stderr.write("\n")
    sys.stderr.write(f"ImportError: {exc}\n")


def main() -> int:
    """Entry point for ``python -m semrange``.

    Returns:
        Exit code returned by the CLI, or 1 if it could not be imported.
    """
    try:
        # Import lazily so click and rich are only loaded for CLI use
        from semrange.cli import main as cli_main
    except ImportError as exc:
        _print_startup_error(exc)
        return 1

    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
