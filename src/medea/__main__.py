"""Allow ``python -m medea``."""

from medea.cli import main

main()
