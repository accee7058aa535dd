"""Command-line interface for the calendar and aggregation tooling.

Provides subcommands: `sample`, `aggregate`, and `calendar`. Each command
is implemented as a `cmd_*` function that accepts an argparse namespace.
"""
from __future__ import annotations

import argparse
import logging
from datetime import date
from pathlib import Path
from typing import Sequence

import pandas as pd

from retail_calendar.config import get_settings
from retail_calendar.logging_config import configure_logging

# GRID / OVERLAY
from retail_calendar.grid.fiscal import build_fiscal_year_sequence, calendar_year_sequence
from retail_calendar.grid.month_grid import DAY_NAMES, MONTH_NAMES, grid_rows
from retail_calendar.models import DateInterval, Granularity, MonthRef
from retail_calendar.overlay.load_events import load_intervals
from retail_calendar.overlay.resolve import resolve_month_overlays

# AGGREGATE
from retail_calendar.aggregate.frame import buckets_to_frame
from retail_calendar.aggregate.rollup import aggregate
from retail_calendar.clean.transform import clean_daily_ddf
from retail_calendar.clean.validate import validate_partition
from retail_calendar.ingest.read_daily import read_daily_csv
from retail_calendar.ingest.synthetic import generate_daily_sales

log = logging.getLogger(__name__)


# --------------------------------------------------
# Helpers
# --------------------------------------------------
def _write_table(pdf: pd.DataFrame, path: Path) -> None:
    """Write `pdf` as CSV or JSON records depending on the file suffix."""
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() == ".json":
        pdf.to_json(path, orient="records", indent=2)
    else:
        pdf.to_csv(path, index=False)
    log.info("Wrote %d rows to %s", len(pdf), path)


def format_month(ref: MonthRef, intervals: Sequence[DateInterval]) -> str:
    """Render one month grid as text.

    Current-month days covered by at least one interval are bracketed;
    days of adjacent months are left blank.
    """
    overlays = resolve_month_overlays(ref.month, ref.year, intervals)
    lines = [f"{MONTH_NAMES[ref.month]} {ref.year}", " ".join(f"{d:>4}" for d in DAY_NAMES)]

    for row in grid_rows(overlays):
        cells = []
        for overlay in row:
            cell = overlay.cell
            if not cell.is_current_month:
                cells.append(" " * 4)
            elif overlay.intervals:
                cells.append(f"[{cell.day:>2}]")
            else:
                cells.append(f" {cell.day:>2} ")
        lines.append(" ".join(cells).rstrip())
    return "\n".join(lines)


# --------------------------------------------------
# SAMPLE
# --------------------------------------------------
def cmd_sample(args: argparse.Namespace) -> None:
    """Write a synthetic daily sales CSV.

    Args:
        args: argparse namespace with `start`, `end`, `seed`, `output`.
    """
    pdf = generate_daily_sales(args.start, args.end, seed=args.seed)
    pdf["date"] = pdf["date"].dt.strftime("%Y-%m-%d")
    _write_table(pdf, args.output)


# --------------------------------------------------
# AGGREGATE
# --------------------------------------------------
def cmd_aggregate(args: argparse.Namespace) -> None:
    """Clean, validate and aggregate a daily CSV into chart-shaped rows.

    Args:
        args: argparse namespace with `input`, `granularity`, `output`,
            `date_column`.
    """
    ddf = read_daily_csv(args.input, args.date_column)
    pdf = clean_daily_ddf(ddf, args.date_column).compute()

    if pdf.empty:
        raise RuntimeError(f"{args.input} has no rows with a valid date.")

    records, bad = validate_partition(pdf, args.date_column)
    buckets = aggregate(records, args.granularity)
    log.info(
        "Aggregated %d daily records into %d %s buckets (bad=%d)",
        len(records), len(buckets), args.granularity, bad,
    )

    out = buckets_to_frame(buckets)
    out["date"] = out["date"].map(lambda d: d.isoformat())
    _write_table(out, args.output)


# --------------------------------------------------
# CALENDAR
# --------------------------------------------------
def cmd_calendar(args: argparse.Namespace) -> None:
    """Print the twelve month grids of a year, highlighting event days.

    Args:
        args: argparse namespace with `year`, `fiscal`, `events`.
    """
    if args.fiscal:
        config = get_settings().fiscal_config
        months = build_fiscal_year_sequence(config, args.year)
    else:
        months = calendar_year_sequence(args.year)

    intervals = load_intervals(args.events) if args.events else []
    print("\n\n".join(format_month(ref, intervals) for ref in months))


# --------------------------------------------------
# CLI
# --------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level argument parser for the CLI.

    Returns:
        Configured argparse.ArgumentParser instance.
    """
    p = argparse.ArgumentParser(prog="retail-calendar")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_sample = sub.add_parser("sample", help="write a synthetic daily sales CSV")
    p_sample.add_argument("--start", type=date.fromisoformat, default=date(2023, 1, 1))
    p_sample.add_argument("--end", type=date.fromisoformat, default=date(2025, 12, 31))
    p_sample.add_argument("--seed", type=int, default=42)
    p_sample.add_argument("--output", type=Path, default=Path("data/daily_sales.csv"))

    p_agg = sub.add_parser("aggregate", help="aggregate a daily CSV to a zoom level")
    p_agg.add_argument("--input", type=Path, required=True)
    p_agg.add_argument(
        "--granularity",
        choices=[g.value for g in Granularity],
        default=Granularity.WEEK.value,
    )
    p_agg.add_argument("--output", type=Path, required=True)
    p_agg.add_argument("--date-column", default="date")

    p_cal = sub.add_parser("calendar", help="print month grids with event overlays")
    p_cal.add_argument("--year", type=int, default=date.today().year)
    p_cal.add_argument("--fiscal", action="store_true")
    p_cal.add_argument("--events", type=Path, default=None)

    return p


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point: parse args, configure logging and dispatch commands."""
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_path, settings.log_level)

    if args.cmd == "sample":
        cmd_sample(args)
    elif args.cmd == "aggregate":
        cmd_aggregate(args)
    elif args.cmd == "calendar":
        cmd_calendar(args)
    else:
        raise SystemExit(2)


if __name__ == "__main__":
    main()
