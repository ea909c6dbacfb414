"""Click-based CLI for price-history.

Thin wrapper around library modules. Zero business logic: every operation
delegates to the session, sources, series or chart modules.
"""

from __future__ import annotations

import asyncio
import json
import logging
from datetime import datetime, timedelta

import click
from rich.console import Console
from rich.table import Table

console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _run_async(coro):
    """Run an async coroutine from synchronous Click code."""
    return asyncio.run(coro)


def _load_config(ctx: click.Context):
    """Load config lazily, caching on first call."""
    if "config" not in ctx.obj:
        from price_history.core import load_config

        ctx.obj["config"] = load_config(config_path=ctx.obj.get("config_path"))
    return ctx.obj["config"]


def _split_values(values: tuple[str, ...]) -> list[str]:
    """Flatten repeated and comma-separated option values, keeping order."""
    result: list[str] = []
    for value in values:
        for part in value.split(","):
            part = part.strip()
            if part and part not in result:
                result.append(part)
    return result


def _resolve_vendors(vendors: tuple[str, ...], config) -> list[str]:
    """Selected vendor ids; defaults to every configured vendor."""
    vendor_ids = _split_values(vendors)
    if vendor_ids:
        return vendor_ids
    if not config.vendors:
        raise click.UsageError(
            "No vendors configured. Pass --vendor or add a 'vendors' mapping to the config."
        )
    return list(config.vendors)


def _create_source(config, input_path: str | None):
    """A file-backed source for --input, otherwise the HTTP API."""
    from price_history.sources import FilePriceSource, HttpPriceSource

    if input_path:
        return FilePriceSource.from_file(input_path, config.source.max_suggestions)
    return HttpPriceSource(config.source)


async def _close_source(source) -> None:
    close = getattr(source, "close", None)
    if close is not None:
        await close()


def _to_range(calendar, start: datetime | None, end: datetime | None):
    """Convert picked dates to epoch seconds; the end day is inclusive."""
    start_ts = calendar.day_start(start.date()) if start else None
    end_ts = (
        calendar.day_start(end.date() + timedelta(days=1)) - 1 if end else None
    )
    return start_ts, end_ts


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True),
    envvar="PRICE_HISTORY_CONFIG",
    default=None,
    help="Path to price-history.yml config file.",
)
@click.option(
    "--verbose",
    is_flag=True,
    default=False,
    help="Enable verbose output.",
)
@click.version_option(package_name="price-history")
@click.pass_context
def cli(ctx: click.Context, config: str | None, verbose: bool) -> None:
    """Price history: merged per-day price series for products across vendors."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config
    ctx.obj["verbose"] = verbose
    ctx.obj["console"] = console


# ---------------------------------------------------------------------------
# chart
# ---------------------------------------------------------------------------


@cli.command()
@click.option(
    "--sku",
    "-s",
    "skus",
    multiple=True,
    required=True,
    help="Product code. Repeat or comma-separate for several.",
)
@click.option(
    "--vendor",
    "-v",
    "vendors",
    multiple=True,
    help="Vendor id. Default: every configured vendor.",
)
@click.option("--start", type=click.DateTime(formats=["%Y-%m-%d"]), default=None, help="First day (YYYY-MM-DD).")
@click.option("--end", type=click.DateTime(formats=["%Y-%m-%d"]), default=None, help="Last day (YYYY-MM-DD).")
@click.option(
    "--input",
    "-i",
    "input_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Read a saved prices response instead of calling the API.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"], case_sensitive=False),
    default="table",
    help="Output format.",
)
@click.pass_context
def chart(
    ctx: click.Context,
    skus: tuple[str, ...],
    vendors: tuple[str, ...],
    start: datetime | None,
    end: datetime | None,
    input_path: str | None,
    output_format: str,
) -> None:
    """Build the merged price series for the selected products."""
    from price_history.core import ChartSelection, PriceHistoryError
    from price_history.session import ChartSession
    from price_history.sources import StaticVendorDirectory

    config = _load_config(ctx)
    vendor_ids = _resolve_vendors(vendors, config)

    async def _run():
        source = _create_source(config, input_path)
        try:
            session = ChartSession(
                source, StaticVendorDirectory.from_config(config), config.chart
            )
            start_ts, end_ts = _to_range(session.builder.calendar, start, end)
            selection = ChartSelection(
                product_codes=_split_values(skus),
                vendor_ids=vendor_ids,
                start=start_ts,
                end=end_ts,
            )
            return await session.update(selection), session
        finally:
            await _close_source(source)

    try:
        data, session = _run_async(_run())
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc
    except PriceHistoryError as exc:
        console.print(f"[red]Error: {exc}[/red]")
        if ctx.obj["verbose"] and exc.context:
            console.print(f"[dim]{exc.context}[/dim]")
        raise SystemExit(1)

    if output_format == "json":
        click.echo(json.dumps(data.model_dump(mode="json"), indent=2))
        return

    if data.is_empty:
        console.print("[yellow]No prices found for the selection.[/yellow]")
        return

    _output_chart_table(data, session.builder.calendar, config.chart)


def _output_chart_table(data, calendar, chart_config) -> None:
    """Print the merged series, ticks and legend."""
    from price_history.chart import format_day_label, format_price, format_price_label

    table = Table(title="Price History")
    table.add_column("Date", style="bold")
    for line in data.lines:
        table.add_column(line.key, justify="right", style=line.color)

    for snapshot in data.snapshots:
        table.add_row(
            format_day_label(snapshot.timestamp, calendar),
            *(
                format_price_label(
                    snapshot.get(line.key),
                    chart_config.thousands_separator,
                    chart_config.currency_suffix,
                )
                for line in data.lines
            ),
        )
    console.print(table)

    console.print(f"Ticks: {', '.join(data.tick_labels)}")
    low, high = data.y_domain
    sep = chart_config.thousands_separator
    console.print(f"Price axis: {format_price(low, sep)} → {format_price(high, sep)}")

    legend = Table(title="Legend")
    legend.add_column("Series", style="bold")
    legend.add_column("Color")
    legend.add_column("Stroke")
    for line in data.lines:
        legend.add_row(
            line.key,
            f"[{line.color}]{line.color}[/]",
            "solid" if line.dash == "0" else f"dashed ({line.dash})",
        )
    console.print(legend)


# ---------------------------------------------------------------------------
# suggest
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("term")
@click.option(
    "--vendor",
    "-v",
    "vendors",
    multiple=True,
    help="Vendor id. Default: every configured vendor.",
)
@click.option(
    "--input",
    "-i",
    "input_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Search a saved prices response instead of calling the API.",
)
@click.pass_context
def suggest(
    ctx: click.Context,
    term: str,
    vendors: tuple[str, ...],
    input_path: str | None,
) -> None:
    """List product codes containing TERM."""
    from price_history.core import PriceHistoryError

    config = _load_config(ctx)
    vendor_ids = _resolve_vendors(vendors, config)

    async def _run():
        source = _create_source(config, input_path)
        try:
            return await source.get_suggestions(term, vendor_ids)
        finally:
            await _close_source(source)

    try:
        terms = _run_async(_run())
    except PriceHistoryError as exc:
        console.print(f"[red]Error: {exc}[/red]")
        raise SystemExit(1)

    if not terms:
        console.print(f"[yellow]No product codes contain '{term}'.[/yellow]")
        return
    for code in terms:
        click.echo(code)


# ---------------------------------------------------------------------------
# vendors
# ---------------------------------------------------------------------------


@cli.command(name="vendors")
@click.pass_context
def list_vendors(ctx: click.Context) -> None:
    """Show the configured vendor directory."""
    from price_history.sources import StaticVendorDirectory

    config = _load_config(ctx)
    directory = StaticVendorDirectory.from_config(config)
    if not len(directory):
        console.print("[yellow]No vendors configured.[/yellow]")
        return

    table = Table(title="Vendors")
    table.add_column("Id", style="bold")
    table.add_column("Name")
    for record in directory.records():
        table.add_row(record.id, record.name)
    console.print(table)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
