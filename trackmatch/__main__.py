"""Allow running as `python -m trackmatch`."""

from trackmatch.cli import main

main()
