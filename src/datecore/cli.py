"""Command-line interface for datecore."""

from datetime import datetime
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from datecore.context import DateContext
from datecore.formatting import (
    format_calendar,
    format_date,
    format_date_localized,
    format_date_smart,
    format_date_time_localized,
    format_long_date,
    format_time_localized,
    get_day_name,
    get_month_name,
    get_relative_time_localized,
)
from datecore.locales import LOCALE_CONFIG, get_locale_metadata
from datecore.numerals import convert_numerals
from datecore.validation import validate_date

app = typer.Typer(
    name="datecore",
    help="Locale-aware date formatting and validation",
    add_completion=False,
)

STYLES = ("date", "localized", "time", "datetime", "long", "smart", "calendar", "relative")


def _make_context(locale: Optional[str]) -> DateContext:
    """Build an isolated context with ``locale`` registered and current.

    Bundled locales that are not built in (fr, es, de) are registered on
    demand. Unknown locales abort the command.
    """
    ctx = DateContext()
    ctx.error_config.configure(log_errors=False)
    if locale is None:
        return ctx
    if not ctx.registry.is_valid_locale(locale):
        if locale not in LOCALE_CONFIG:
            typer.echo(f"Error: Unknown locale: {locale}", err=True)
            raise typer.Exit(1)
        ctx.registry.register_custom(locale, LOCALE_CONFIG[locale])
    ctx.registry.set_current(locale)
    return ctx


def _parse_input(value: str) -> object:
    """Treat "now" and bare integers (POSIX seconds) specially."""
    if value.lower() == "now":
        return datetime.now()
    if value.lstrip("-").isdigit():
        return int(value)
    return value


def _render(style: str, value: object, ctx: DateContext) -> str:
    if style == "date":
        return format_date(value, context=ctx)
    elif style == "localized":
        return format_date_localized(value, context=ctx)
    elif style == "time":
        return format_time_localized(value, context=ctx)
    elif style == "datetime":
        return format_date_time_localized(value, context=ctx)
    elif style == "long":
        return format_long_date(value, format="LLLL", context=ctx)
    elif style == "smart":
        return format_date_smart(value, context=ctx)
    elif style == "calendar":
        return format_calendar(value, context=ctx)
    else:
        return get_relative_time_localized(value, context=ctx)


@app.command(name="format")
def format_cmd(
    date: Annotated[str, typer.Argument(help="ISO 8601 date, POSIX seconds or 'now'")],
    locale: Annotated[
        Optional[str],
        typer.Option("--locale", "-l", help="Locale code (en, ar, fr, es, de)"),
    ] = None,
    style: Annotated[
        str,
        typer.Option("--style", "-s", help=f"Output style ({', '.join(STYLES)})"),
    ] = "localized",
) -> None:
    """Format a date."""
    if style not in STYLES:
        typer.echo(f"Error: Unknown style: {style}. Choose from {', '.join(STYLES)}", err=True)
        raise typer.Exit(1)

    ctx = _make_context(locale)
    value = _parse_input(date)
    result = validate_date(value, "format", context=ctx)
    if not result.is_valid:
        typer.echo(f"Error: {result.message}: {date}", err=True)
        raise typer.Exit(1)

    typer.echo(_render(style, result.date, ctx))


@app.command(name="locales")
def locales_cmd() -> None:
    """List bundled locales."""
    ctx = DateContext()
    console = Console()

    table = Table(show_header=True, header_style="bold")
    table.add_column("Code", style="cyan")
    table.add_column("Name")
    table.add_column("Native")
    table.add_column("Direction", justify="center")
    table.add_column("Numerals", justify="center")
    table.add_column("Built-in", justify="center")

    for code, config in LOCALE_CONFIG.items():
        meta = get_locale_metadata(code)
        table.add_row(
            code,
            meta.name,
            meta.native_name,
            meta.direction.value,
            convert_numerals("0123456789", to_local=True, locale_config=config),
            "yes" if code in ctx.registry.get_builtin_locales() else "no",
        )

    console.print(table)


@app.command(name="validate")
def validate_cmd(
    value: Annotated[str, typer.Argument(help="Date input to check")],
) -> None:
    """Check whether an input is a valid date."""
    ctx = _make_context(None)
    result = validate_date(_parse_input(value), "validate", context=ctx)
    if result.is_valid:
        typer.echo(f"valid: {result.date.isoformat()}")
        return

    typer.echo(f"invalid ({result.error.value}): {result.message}")
    raise typer.Exit(1)


@app.command(name="demo")
def demo_cmd(
    locale: Annotated[
        Optional[str],
        typer.Option("--locale", "-l", help="Locale code (en, ar, fr, es, de)"),
    ] = None,
) -> None:
    """Show every format for the current time."""
    ctx = _make_context(locale)
    value = ctx.now()
    console = Console()

    table = Table(title=f"datecore demo ({ctx.registry.current})", show_header=True, header_style="bold")
    table.add_column("Format", style="cyan")
    table.add_column("Output")

    for style in STYLES:
        table.add_row(style, _render(style, value, ctx))
    table.add_row("day name", get_day_name(value, context=ctx))
    table.add_row("month name", get_month_name(value, context=ctx))

    console.print(table)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
