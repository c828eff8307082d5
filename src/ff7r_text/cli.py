"""Dump FF7R dialogue lines to one CSV file per region.

Usage:
    ff7r-text [--data DIR] [--out DIR] [--region NAME ...] [--keep-going]
    python -m ff7r_text ...
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from ff7r_text.discovery import find_packages, find_regions
from ff7r_text.errors import PackageError
from ff7r_text.export.csv_sink import CsvSink
from ff7r_text.parser.options import ParseOptions
from ff7r_text.parser.package import PackagePair


logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = Path("data")
DEFAULT_OUT_DIR = Path("out")


def dump_region(
    region_dir: Path,
    out_path: Path,
    options: ParseOptions,
    *,
    keep_going: bool = False,
) -> tuple[int, int]:
    """Write one region's CSV. Returns (lines written, packages skipped).

    A failing package aborts the region unless keep_going is set, in which
    case it is logged and skipped.
    """
    skipped = 0
    with CsvSink(out_path) as sink:
        for header_path in find_packages(region_dir):
            pair = PackagePair.from_filename(header_path)
            try:
                package = pair.read(options=options)
            except (PackageError, OSError) as exc:
                if not keep_going:
                    raise
                logger.warning("Skipping %s: %s", pair.header_path, exc)
                skipped += 1
                continue
            written = sink.write_records(package.records)
            logger.debug("%s: %d of %d lines written",
                         pair.name, written, len(package.records))
        return sink.rows_written, skipped


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ff7r-text",
        description="Extract FF7R dialogue from .uasset/.uexp pairs to CSV",
    )
    parser.add_argument("--data", type=Path, default=DEFAULT_DATA_DIR,
                        help="Directory with one sub-directory per region")
    parser.add_argument("--out", type=Path, default=DEFAULT_OUT_DIR,
                        help="Directory for the <region>.csv files")
    parser.add_argument("--region", action="append", default=None,
                        help="Only process this region (repeatable)")
    parser.add_argument("--keep-going", action="store_true",
                        help="Skip packages that fail to parse instead of stopping")
    parser.add_argument("--loose-exports", action="store_true",
                        help="Accept headers with any number of exports")
    parser.add_argument("--no-instance-suffix", action="store_true",
                        help="Ignore FName instance numbers")
    parser.add_argument("--verbose", action="store_true",
                        help="Log every package")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    options = ParseOptions(
        strict_exports=not args.loose_exports,
        instance_suffix=not args.no_instance_suffix,
    )

    if not args.data.is_dir():
        logger.error("Data directory %s does not exist", args.data)
        return 1

    regions = find_regions(args.data)
    if args.region:
        wanted = set(args.region)
        regions = [r for r in regions if r.name in wanted]

    if not regions:
        logger.error(
            "No region folders found. Make sure at least one region folder "
            "is in %s.", args.data,
        )
        return 1

    for region_dir in regions:
        logger.info("Processing region %s...", region_dir.name)
        out_path = args.out / f"{region_dir.name}.csv"
        try:
            written, skipped = dump_region(
                region_dir, out_path, options, keep_going=args.keep_going,
            )
        except (PackageError, OSError) as exc:
            logger.error("Region %s failed: %s", region_dir.name, exc)
            return 1
        logger.info("Wrote %d lines to %s (%d packages skipped)",
                    written, out_path, skipped)
    return 0
