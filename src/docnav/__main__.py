"""Module entry point for running with python -m docnav."""

from docnav.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
