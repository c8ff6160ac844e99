"""Allow running as python -m json_locale."""

from json_locale.cli import app

app()
