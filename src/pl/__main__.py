"""Allow running as ``python -m pl``."""

from pl.cli import app

app(prog_name="pl")
