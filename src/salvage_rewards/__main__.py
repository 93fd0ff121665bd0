"""Entry point for ``python -m salvage_rewards``."""

from .cli import main

main()
