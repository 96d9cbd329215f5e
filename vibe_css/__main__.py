"""Allow ``python -m vibe_css``."""

from .cli.main import main

main()
