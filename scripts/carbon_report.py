#!/usr/bin/env python3
"""
CLI script to print an emissions report for an activity CSV file.

Usage:
    # Report on the bundled sample data
    python scripts/carbon_report.py

    # Report on your own dataset
    python scripts/carbon_report.py path/to/activities.csv

    # Dates written as DD/MM/YYYY
    python scripts/carbon_report.py path/to/activities.csv --dayfirst
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Add parent directory to path so we can import carbon_cue modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from carbon_cue.pydantic_models.dashboard import BarPydModel, DashboardPydModel
from carbon_cue.pydantic_models.dataset import DatasetReportPydModel
from carbon_cue.services.parsers.csv_parser import ActivityCSVParser
from carbon_cue.services.pipeline import build_dataset_report
from carbon_cue.services.presentation.dashboard import build_dashboard
from carbon_cue.services.sample_data import SampleDataLoader
from carbon_cue.utils.exceptions import InvalidDatasetError, SampleDataUnavailableError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

console = Console()

BAR_WIDTH = 30


def print_header(text: str, style: str = "bold cyan"):
    """Print a formatted header using Rich Panel."""
    console.print(
        Panel(
            Text(text, justify="center", style=style),
            border_style="cyan",
            padding=(1, 2),
        )
    )


def print_cards(dashboard: DashboardPydModel):
    cards = Table(show_header=False, box=None, padding=(0, 2))
    cards.add_column("Card", style="bold yellow")
    cards.add_column("Value", style="bold green")
    for card in dashboard.cards:
        cards.add_row(card.title, card.value)
    cards.add_row("Trees / year", f"{dashboard.equivalences.trees_per_year:.1f}")
    cards.add_row(
        "Smartphone charges", f"{dashboard.equivalences.smartphone_charges:,.0f}"
    )
    console.print(cards)
    console.print()


def print_bars(title: str, bars: list[BarPydModel]):
    """Print a horizontal text bar chart."""
    table = Table(title=title, show_header=False, box=None, padding=(0, 2))
    table.add_column("Label", style="bold cyan")
    table.add_column("Bar", style="green")
    table.add_column("Value", justify="right", style="bold")
    for bar in bars:
        filled = round(float(bar.height_percent) / 100 * BAR_WIDTH)
        table.add_row(bar.label, "█" * filled, bar.value_label)
    console.print(table)
    console.print()


def print_trend(dashboard: DashboardPydModel):
    table = Table(title="Monthly Trend", show_header=True, box=None, padding=(0, 2))
    table.add_column("Month", style="bold cyan")
    table.add_column("kg CO2e", justify="right", style="bold green")
    for label, value_label in zip(dashboard.trend.labels, dashboard.trend.value_labels):
        table.add_row(label, value_label)
    console.print(table)
    console.print()


def print_analysis(dashboard: DashboardPydModel):
    for item in dashboard.analysis:
        console.print(f"[bold magenta]{item.title}[/bold magenta]")
        console.print(f"  [dim]{item.description}[/dim]")
    console.print()


def print_problems(report: DatasetReportPydModel):
    """Print dropped rows and unrecognized categories, if any."""
    if report.malformed_rows:
        console.print(
            Panel(
                f"[yellow]{len(report.malformed_rows)} rows were skipped[/yellow]",
                border_style="yellow",
            )
        )
        for row in report.malformed_rows[:5]:
            console.print(f"  line {row.line_number}: [dim]{row.reason.value}[/dim] {row.raw}")
        if len(report.malformed_rows) > 5:
            console.print(f"  [dim]... and {len(report.malformed_rows) - 5} more[/dim]")
        console.print()

    for unknown in report.unknown_categories:
        hint = f" (did you mean {unknown.suggestion.value}?)" if unknown.suggestion else ""
        console.print(
            f"[yellow]Unknown category[/yellow] '{unknown.category}' "
            f"in {unknown.record_count} rows counted as 0 kg{hint}"
        )
    if report.unknown_categories:
        console.print()


async def read_dataset(args) -> tuple[str, str]:
    if args.csv_file:
        path = Path(args.csv_file)
        return await asyncio.to_thread(path.read_text, encoding="utf-8-sig"), str(path)

    loader = SampleDataLoader(args.sample_source)
    return await loader.load(), f"sample:{loader.source}"


async def main():
    """Main entry point for the report script."""
    parser = argparse.ArgumentParser(
        description="Print an emissions report for an activity CSV file"
    )
    parser.add_argument(
        "csv_file",
        nargs="?",
        help="CSV file with date,department,category,unit,amount columns "
        "(default: bundled sample data)",
    )
    parser.add_argument(
        "--dayfirst",
        action="store_true",
        help="Read ambiguous dates as DD/MM/YYYY instead of MM/DD/YYYY",
    )
    parser.add_argument(
        "--sample-source",
        type=str,
        default="data/sample_data.csv",
        help="Sample data path or URL used when no CSV file is given",
    )

    args = parser.parse_args()

    try:
        text, source = await read_dataset(args)
        report = build_dataset_report(
            text, ActivityCSVParser(dayfirst=args.dayfirst), generation=1, source=source
        )
    except (OSError, InvalidDatasetError, SampleDataUnavailableError) as e:
        logger.error(f"Report failed: {e}")
        console.print(
            Panel(
                f"[bold red]REPORT FAILED[/bold red]\n\n[red]{e!s}[/red]",
                border_style="bold red",
            )
        )
        sys.exit(1)

    dashboard = build_dashboard(report)

    print_header(f"CARBON REPORT: {source}", "bold cyan")
    print_cards(dashboard)
    print_bars("Emissions by Department", dashboard.department_bars)
    print_bars("Emissions by Category", dashboard.category_bars)
    print_trend(dashboard)
    print_analysis(dashboard)
    print_problems(report)


if __name__ == "__main__":
    asyncio.run(main())
