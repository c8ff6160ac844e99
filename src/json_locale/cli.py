"""Developer CLI for json_locale using Typer."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from json_locale import __version__
from json_locale.config import Configuration, load_configuration
from json_locale.errors import JsonLocaleError
from json_locale.locales import normalize_locale
from json_locale.translates import register

app = typer.Typer(
    name="json-locale",
    help="Inspect the accessors generated for translatable fields.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"json-locale {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """json-locale: per-locale accessors for translation-map fields."""


@app.command()
def normalize(
    locales: list[str] = typer.Argument(..., help="Locale codes (e.g. en, pt-BR)."),
) -> None:
    """Show the accessor token each locale code turns into."""
    table = Table(title="Locale tokens")
    table.add_column("Locale")
    table.add_column("Token", style="cyan")
    for locale in locales:
        table.add_row(locale, normalize_locale(locale) or "[red](empty)[/red]")
    console.print(table)


@app.command()
def accessors(
    field_name: str = typer.Argument(..., help="Raw field name, e.g. name_translations."),
    locale: list[str] | None = typer.Option(
        None, "--locale", "-l",
        help="Available locale (repeatable). Overrides the config file.",
    ),
    suffix: str | None = typer.Option(
        None, "--suffix", "-s", help="Required field suffix.",
    ),
    config_file: Path | None = typer.Option(
        None, "--config", "-c", help="TOML file with a [json_locale] table.",
    ),
) -> None:
    """List the accessors registering FIELD_NAME would generate."""
    config = Configuration()
    options: dict[str, Any] = {}
    try:
        if config_file is not None:
            load_configuration(config_file, config=config)
        if locale:
            config.available_locales = locale
        if suffix is not None:
            options["suffix"] = suffix

        host = type("Record", (), {})
        registration = register(host, field_name, config=config, **options)
    except JsonLocaleError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    table = Table(title=f"Accessors for {registration.attr_name}")
    table.add_column("Method", style="cyan")
    table.add_column("Kind")
    table.add_column("Locale", style="dim")
    for name, kind, code in registration.accessor_names():
        table.add_row(name, kind, code or "")

    console.print(table)
    if not registration.locales:
        console.print("[yellow]No available locales: only locale-agnostic accessors.[/yellow]")
