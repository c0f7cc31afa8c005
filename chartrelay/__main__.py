"""Run the relay with ``python -m chartrelay``."""

from chartrelay.server import main

main()
