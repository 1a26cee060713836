"""CLI entry point for promptcontext.

Usage:
    python -m promptcontext --lang en --json "Show three reports"
"""

from promptcontext.cli import main

if __name__ == "__main__":
    main()
