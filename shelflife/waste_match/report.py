"""
Report Generator - Format results for human consumption.

Produces console output and CSV export for matches and expiry timelines.
Amounts use Indian digit grouping (1,00,000).
"""

import csv
import io
from datetime import datetime
from typing import Any, TextIO

from .catalog_loader import parse_number
from .models import ExpiryTimeline, LossEstimate, MatchResult


def _group_indian(digits: str) -> str:
    """Group an integer digit string as 12,34,567."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_currency(value: Any, symbol: str = "₹") -> str:
    """
    Format an amount for display.

    Whole amounts show no decimals, others up to two. Unknown or
    non-numeric values render as "--".
    """
    prefix = symbol or ""
    number = parse_number(value)
    if number is None:
        return f"{prefix}--"

    sign = "-" if number < 0 else ""
    number = abs(number)
    if number.is_integer():
        integer_part, fraction = str(int(number)), ""
    else:
        integer_part, fraction = f"{number:.2f}".split(".")
        fraction = fraction.rstrip("0")

    text = _group_indian(integer_part)
    if fraction:
        text = f"{text}.{fraction}"
    return f"{prefix}{sign}{text}"


def format_matches(results: list[MatchResult]) -> str:
    """Console table of ranked matches."""
    if not results:
        return "No matching inventory items.\n"

    lines = []
    lines.append(f"{'SKU':<12} {'NAME':<32} {'MATCHED BY':<10} {'CONFIDENCE':>10}")
    lines.append("-" * 70)
    for r in results:
        lines.append(
            f"{r.item.sku:<12} {r.item.name[:32]:<32} {r.matched_by.value:<10} "
            f"{r.match_confidence:>10.2f}"
        )
    return "\n".join(lines)


def format_loss(estimate: LossEstimate | None, symbol: str = "₹") -> str:
    """One-line loss summary."""
    if estimate is None:
        return "No matching inventory item.\n"
    return (
        f"{estimate.item.name} ({estimate.item.sku}): "
        f"{estimate.quantity:g} x {format_currency(estimate.per_unit_value, symbol)} "
        f"= {format_currency(estimate.total_value, symbol)}"
    )


def format_timeline(timeline: ExpiryTimeline, symbol: str = "₹") -> str:
    """
    Format an expiry timeline for console display.

    Soonest first, with the urgency label and the loss if wasted.
    """
    if not timeline.entries:
        return "No items expiring soon. All inventory looks good!\n"

    lines = []
    lines.append(f"\nEXPIRY TIMELINE (next {timeline.within_days} days)")
    lines.append("=" * 70)
    lines.append(f"{'SKU':<12} {'NAME':<28} {'EXPIRES':<16} {'LOSS':>10}")
    lines.append("-" * 70)
    for entry in timeline.entries:
        lines.append(
            f"{entry.item.sku:<12} {entry.item.name[:28]:<28} {entry.label:<16} "
            f"{format_currency(entry.loss, symbol):>10}"
        )

    lines.append("=" * 70)
    lines.append(f"  Items:          {len(timeline.entries)}")
    lines.append(f"  Total at risk:  {format_currency(timeline.total_at_risk, symbol)}")
    lines.append("=" * 70)

    return "\n".join(lines)


def export_matches_csv(results: list[MatchResult], output: TextIO | None = None) -> str:
    """
    Export matches to CSV format.

    Returns:
        CSV string (also writes to output if provided)
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer)

    writer.writerow(["sku", "name", "brand", "category", "unit_price", "matched_by", "confidence"])
    for r in results:
        writer.writerow([
            r.item.sku,
            r.item.name,
            r.item.brand,
            r.item.category,
            r.item.unit_price,
            r.matched_by.value,
            f"{r.match_confidence:.4f}",
        ])

    csv_content = buffer.getvalue()
    if output:
        output.write(csv_content)
    return csv_content


TIMELINE_COLUMNS = [
    "sku",
    "name",
    "category",
    "location",
    "days_until_expiry",
    "urgency",
    "quantity",
    "unit_price",
    "loss",
]


def timeline_rows(timeline: ExpiryTimeline) -> list[list]:
    """Timeline entries as plain rows in TIMELINE_COLUMNS order."""
    return [
        [
            entry.item.sku,
            entry.item.name,
            entry.item.category,
            entry.item.location,
            entry.days_until_expiry,
            entry.urgency.value,
            entry.quantity,
            entry.item.unit_price,
            entry.loss,
        ]
        for entry in timeline.entries
    ]


def export_timeline_csv(timeline: ExpiryTimeline, output: TextIO | None = None) -> str:
    """
    Export an expiry timeline to CSV format.

    Returns:
        CSV string (also writes to output if provided)
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(TIMELINE_COLUMNS)
    writer.writerows(timeline_rows(timeline))

    csv_content = buffer.getvalue()
    if output:
        output.write(csv_content)
    return csv_content


def generate_report_filename(kind: str = "timeline", extension: str = "csv") -> str:
    """
    Generate a filename for the report.

    Returns:
        Filename like "waste_match_timeline_2026-01-08.csv"
    """
    date_str = datetime.now().strftime("%Y-%m-%d")
    return f"waste_match_{kind}_{date_str}.{extension}"
