from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv

from .config import get_settings_module, load_settings
from .container import build_container
from .core.exceptions import ReadError
from .reporting.console import render_sample, render_statistics
from .reporting.excel_export import export_report

BANNER = "=== Employee CSV Processor ==="


def build_parser(settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="employee-csv", description="Read employees from a ';'-separated file and print statistics.")
    parser.add_argument("source", nargs="?", default=settings.CSV_FILE, help="file name, relative to the data directory")
    parser.add_argument("--data-dir", default=settings.DATA_DIR, help="directory to resolve SOURCE against (default: bundled samples)")
    parser.add_argument("--sample-size", type=int, default=settings.SAMPLE_SIZE, help="how many employees to list")
    parser.add_argument("--export", metavar="XLSX", help="also write an Excel report to this path")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv(override=False)
    settings = load_settings()
    args = build_parser(settings).parse_args(argv)

    if getattr(settings, "DEBUG", False):
        print("[employee-csv] settings=", get_settings_module(), " data_dir=", args.data_dir or "<bundled>")

    container = build_container(data_dir=args.data_dir)

    print(BANNER)
    print(f"Reading data from: {args.source}")
    print("=" * 50)

    try:
        outcome = container.reader.read(args.source)
    except ReadError as e:
        print(f"Application error: {e}", file=sys.stderr)
        return 1

    print(f"Total employees processed: {outcome.succeeded}")
    print("=" * 50)

    stats = container.statistics_service.summarize(outcome.people)
    for line in render_sample(outcome.people, args.sample_size):
        print(line)
    for line in render_statistics(stats):
        print(line)

    if args.export:
        out = export_report(args.export, outcome, stats)
        print(f"OK: Report written: {out}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
