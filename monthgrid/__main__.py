"""
Package entry point.

Allows running the application via:

    python -m monthgrid

This simply forwards execution to monthgrid.cli.main().
"""

from monthgrid.cli import main

if __name__ == "__main__":
    main()
