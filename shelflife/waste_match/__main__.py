"""
CLI entry point for Waste Match.

Usage:
    python -m shelflife.waste_match list
    python -m shelflife.waste_match match --name "amul milk"
    python -m shelflife.waste_match match --brand amul --output-csv
    python -m shelflife.waste_match loss MLK-500 50
    python -m shelflife.waste_match timeline --within-days 7 --output-xlsx expiring.xlsx
"""

import argparse
import json
import sys
from pathlib import Path

from .config import load_config
from .catalog_loader import load_catalog
from .matcher import match_items
from .models import MatchQuery
from .loss import estimate_loss
from .expiry import expiring_items, build_expiry_timeline
from .resolver import resolve_item
from .flash_sale import build_flash_sale
from .report import (
    format_matches, format_loss, format_timeline, format_currency,
    export_matches_csv, export_timeline_csv, generate_report_filename,
)
from .sheet_writer import write_timeline_xlsx


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="waste_match",
        description="Waste Match - Look up inventory and estimate spoilage loss",
    )

    parser.add_argument(
        "--config",
        default=None,
        metavar="FILE",
        help="Config file (default: module's waste_match_config.json)",
    )

    parser.add_argument(
        "--catalog",
        default=None,
        metavar="FILE",
        help="Inventory catalog JSON (default: catalog_path from config)",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print raw JSON instead of formatted text",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List every catalog item")

    match = sub.add_parser("match", help="Find items by SKU, name, brand or category")
    match.add_argument("--sku")
    match.add_argument("--name")
    match.add_argument("--brand")
    match.add_argument("--category")
    match.add_argument(
        "--output-csv", nargs="?", const="", metavar="FILE",
        help="Export matches to CSV (default name: waste_match_matches_<date>.csv)",
    )

    loss = sub.add_parser("loss", help="Estimate loss for a quantity of an item")
    loss.add_argument("name_or_sku")
    loss.add_argument("quantity", type=float)

    expiring = sub.add_parser("expiring", help="Items expiring within N days")
    expiring.add_argument("--within-days", type=int, default=None)

    resolve = sub.add_parser("resolve", help="Resolve a name or SKU to one item")
    resolve.add_argument("query")

    timeline = sub.add_parser("timeline", help="Expiry timeline with loss per item")
    timeline.add_argument("--within-days", type=int, default=None)
    timeline.add_argument(
        "--output-csv", nargs="?", const="", metavar="FILE",
        help="Export to CSV (default name: waste_match_timeline_<date>.csv)",
    )
    timeline.add_argument(
        "--output-xlsx", nargs="?", const="", metavar="FILE",
        help="Export to XLSX (default name: waste_match_timeline_<date>.xlsx)",
    )

    sale = sub.add_parser("flash-sale", help="Quote a flash sale")
    sale.add_argument("product_name")
    sale.add_argument("price", type=float)
    sale.add_argument("stock", type=int)
    sale.add_argument("--discount", type=float, default=None)

    return parser


def _print_json(payload) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def run(args) -> int:
    config = load_config(args.config)
    catalog = load_catalog(Path(args.catalog) if args.catalog else config.catalog_path)
    symbol = config.currency_symbol

    if args.command == "list":
        items = catalog.list_items()
        if args.json:
            _print_json([item.to_dict() for item in items])
        else:
            for item in items:
                print(f"{item.sku:<12} {item.name[:36]:<36} {format_currency(item.unit_price, symbol):>10}/{item.unit}")
        return 0

    if args.command == "match":
        query = MatchQuery(sku=args.sku, name=args.name, brand=args.brand, category=args.category)
        results = match_items(catalog, query)
        if args.json:
            _print_json([r.to_dict() for r in results])
        else:
            print(format_matches(results))
        if args.output_csv is not None:
            output_path = Path(args.output_csv or generate_report_filename("matches", "csv"))
            with open(output_path, "w", newline="", encoding="utf-8") as f:
                export_matches_csv(results, output=f)
            print(f"\nCSV exported to: {output_path}")
        return 0

    if args.command == "loss":
        estimate = estimate_loss(catalog, args.name_or_sku, args.quantity)
        if args.json:
            _print_json(estimate.to_dict() if estimate else None)
        else:
            print(format_loss(estimate, symbol))
        return 0 if estimate else 1

    if args.command == "expiring":
        within = args.within_days if args.within_days is not None else config.default_within_days
        items = expiring_items(catalog, within)
        if args.json:
            _print_json([item.to_dict() for item in items])
        else:
            for item in items:
                print(f"{item.days_until_expiry:>4}d  {item.sku:<12} {item.name}")
        return 0

    if args.command == "resolve":
        item = resolve_item(catalog, args.query)
        if args.json:
            _print_json(item.to_dict() if item else None)
        elif item:
            print(f"{item.sku}  {item.name}  ({item.location})")
        else:
            print(f"No item found for: {args.query}")
        return 0 if item else 1

    if args.command == "timeline":
        within = args.within_days if args.within_days is not None else config.default_within_days
        timeline = build_expiry_timeline(catalog, within)
        if args.json:
            _print_json(timeline.to_dict())
        else:
            print(format_timeline(timeline, symbol))
        if args.output_csv is not None:
            output_path = Path(args.output_csv or generate_report_filename("timeline", "csv"))
            with open(output_path, "w", newline="", encoding="utf-8") as f:
                export_timeline_csv(timeline, output=f)
            print(f"\nCSV exported to: {output_path}")
        if args.output_xlsx is not None:
            output_path = Path(args.output_xlsx or generate_report_filename("timeline", "xlsx"))
            write_timeline_xlsx(timeline, output_path)
            print(f"\nXLSX exported to: {output_path}")
        return 0

    if args.command == "flash-sale":
        quote = build_flash_sale(
            args.product_name, args.price, args.stock,
            discount_percent=args.discount,
            settings=config.flash_sale,
            currency_symbol=symbol,
        )
        if args.json:
            _print_json(quote.to_dict())
        else:
            print(f"{quote.product_name}: {quote.discount_percent}% off")
            print(f"  New price:          {format_currency(quote.new_price, symbol)}")
            print(f"  Recovered revenue:  {format_currency(quote.recovered_revenue, symbol)}")
            print(f"  Share:              {quote.share_url}")
        return 0

    return 2


def main():
    parser = build_parser()
    args = parser.parse_args()

    try:
        sys.exit(run(args))
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
