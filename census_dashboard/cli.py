#!/usr/bin/env python3
"""
Census Tract Dashboard CLI — list datasets, inspect a table, export a workbook, run the API.

USAGE:
  python -m census_dashboard.cli datasets                          # All catalogued datasets
  python -m census_dashboard.cli datasets --group "4. Transit Users"

  python -m census_dashboard.cli show B01001                       # Summary + table
  python -m census_dashboard.cli show --group "4. Transit Users"   # First dataset of the group
  python -m census_dashboard.cli show B01001 --tracts tract190200 tract190300

  python -m census_dashboard.cli export B01001                     # Excel to reports folder
  python -m census_dashboard.cli export B01001 --output ./B01001.xlsx

  python -m census_dashboard.cli serve                             # Start API server
  python -m census_dashboard.cli serve --port 8000
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from census_dashboard.config import DATA_FOLDER, REPORTS_FOLDER
from census_dashboard.data.errors import DashboardDataError
from census_dashboard.data.store import DatasetStore
from census_dashboard.data.schemas import find_group


def _open_store(args) -> DatasetStore:
    data_dir = Path(args.data_dir) if getattr(args, "data_dir", None) else DATA_FOLDER
    return DatasetStore(data_dir).load()


def _group(args):
    group = find_group(getattr(args, "group", None))
    if group is None:
        raise SystemExit(f"  Unknown user group: '{args.group}'")
    return group


def cmd_datasets(args):
    """List dataset codes and names, optionally for one user group."""
    store = _open_store(args)
    if args.group:
        group = _group(args)
        codes = list(group.datasets)
        print(f"\n{group.name} — {group.description}\n")
    else:
        codes = store.codes()
        print(f"\nDATASETS ({len(codes)}):\n")
    for code in codes:
        print(f"  {store.catalog.label(code)}")
    print()


def cmd_show(args):
    """Print the data summary and table for one dataset."""
    from census_dashboard.analytics.dashboard import data_summary, table_rows

    store = _open_store(args)
    group = _group(args)
    dataset = args.dataset or group.default_dataset
    s = data_summary(store, dataset, group, args.tracts)
    top = s["highest_category"]

    print("\n" + "=" * 70)
    print(f"  {s['dataset_name']} ({s['dataset']})")
    print("=" * 70)
    print(f"  User Group:        {s['group']}")
    print(f"  Total Count:       {s['total_count']:,}")
    print(f"  Categories:        {s['category_count']}")
    print(f"  Census Tracts:     {s['unit_count']}")
    print(f"  Highest Category:  {top['name']} ({top['total']:,} persons - {top['pct']:.2f}%)")
    print()

    table = table_rows(store, dataset, args.tracts)
    cols = table["columns"]
    header = f"  {cols[0]['label'][:40]:<42}" + "".join(f"{c['label']:>16}" for c in cols[1:])
    print(header)
    print("  " + "-" * (len(header) - 2))
    for row in table["rows"]:
        cells = "".join(
            f"{row[c['key']]:>16,}" if row[c["key"]] is not None else f"{'':>16}"
            for c in cols[1:]
        )
        print(f"  {row['name'][:40]:<42}{cells}")
    print()


def cmd_export(args):
    """Write the dataset report workbook."""
    from census_dashboard.reports.dataset_report import generate_excel

    store = _open_store(args)
    group = _group(args)
    out = Path(args.output) if args.output else REPORTS_FOLDER / f"Census_{args.dataset}.xlsx"
    path = generate_excel(store, args.dataset, out, group, args.tracts)
    print(f"\n  Report saved to: {path}\n")


def cmd_serve(args):
    """Start the API server."""
    import uvicorn
    print(f"\nStarting Census Tract Dashboard API on port {args.port}...")
    uvicorn.run("census_dashboard.main:app", host="0.0.0.0", port=args.port, reload=args.reload,
                timeout_keep_alive=65)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Census Tract Dashboard — ACS tables for Baltimore City census tracts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--data-dir", help=f"Folder with the CSV extracts (default: {DATA_FOLDER})")
    subparsers = parser.add_subparsers(dest="command", help="Command")

    datasets_parser = subparsers.add_parser("datasets", help="List datasets")
    datasets_parser.add_argument("--group", help="Only datasets for this user group")
    datasets_parser.set_defaults(func=cmd_datasets)

    show_parser = subparsers.add_parser("show", help="Print a dataset summary and table")
    show_parser.add_argument("dataset", nargs="?", help="Dataset code, e.g. B01001 (default: the group's first dataset)")
    show_parser.add_argument("--tracts", nargs="*", help="Tract keys (default: all)")
    show_parser.add_argument("--group", help="User group (default: All Users)")
    show_parser.set_defaults(func=cmd_show)

    export_parser = subparsers.add_parser("export", help="Export a dataset report to Excel")
    export_parser.add_argument("dataset", help="Dataset code, e.g. B01001")
    export_parser.add_argument("--tracts", nargs="*", help="Tract keys (default: all)")
    export_parser.add_argument("--group", help="User group (default: All Users)")
    export_parser.add_argument("--output", help="Output .xlsx path")
    export_parser.set_defaults(func=cmd_export)

    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--port", type=int, default=8000)
    serve_parser.add_argument("--reload", action="store_true", help="Auto-reload on code changes")
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not getattr(args, "func", None):
        parser.print_help()
        return 1
    try:
        args.func(args)
    except DashboardDataError as exc:
        print(f"  Error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
