"""Allow ``python -m intervalds``."""

from intervalds.cli import cli

cli()
