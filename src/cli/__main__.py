# =============================================================================
# src/cli/__main__.py — Package Entry Point
# =============================================================================
#
# Enables running the CLI package itself as a module:
#     python -m src.cli lookup circleci/node
#
# Delegates to the orb lookup CLI (lookup.py).
# =============================================================================

"""Allow ``python -m src.cli`` execution."""

from src.cli.lookup import main

main()
