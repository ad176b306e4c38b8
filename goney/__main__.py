"""Allow ``python -m goney``."""

from .cli import main

main()
