"""Allow running cs as ``python -m session_resumer``."""

from .cli.main import main

main()
