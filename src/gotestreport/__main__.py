"""Allow ``python -m gotestreport``."""

from gotestreport.cli.main import cli

cli()
