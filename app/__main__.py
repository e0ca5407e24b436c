"""Allow running the service with ``python -m app``."""

from app.cli import main

main()
