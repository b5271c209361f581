"""CLI entry point for key_overlay package.

Usage:
    python -m key_overlay W A S D
    python -m key_overlay W A S D -o wasd.svg
"""

from .cli import main

if __name__ == "__main__":
    main()
