"""Side-by-side comparison of normalized vendor statistics"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Literal, Mapping, Optional, Sequence, Tuple

from src.core import ComparisonRow, NegotiationMetadata
from src.normalization.coercion import group_thousands

ColumnCategory = Literal["negotiation", "risk"]

CURRENCY_SYMBOLS = {"USD": "$", "EUR": "€", "GBP": "£", "JPY": "¥", "INR": "₹"}


def format_currency(amount: float, currency: str = "USD") -> str:
    """
    Format an amount with two decimals and the currency symbol

    Unknown currency codes are written as a prefix: 'CHF 1,200.00'
    """
    code = (currency or "USD").upper()
    number = f"{abs(amount):,.2f}"
    sign = "-" if amount < 0 else ""
    symbol = CURRENCY_SYMBOLS.get(code)
    if symbol:
        return f"{sign}{symbol}{number}"
    return f"{sign}{code} {number}"


def _percent(value: float) -> str:
    return f"{group_thousands(value)}%"


@dataclass(frozen=True)
class ComparisonColumn:
    key: str
    label: str
    category: ColumnCategory
    render: Callable[[NegotiationMetadata], str]
    enabled: bool = True


COMPARISON_COLUMNS: Tuple[ComparisonColumn, ...] = (
    ComparisonColumn("dealHealth", "Deal Health", "negotiation",
                     lambda m: f"{group_thousands(m.overall_deal_health_score)}/100"),
    ComparisonColumn("latestPrice", "Latest Quoted Price", "negotiation",
                     lambda m: format_currency(m.latest_quoted_price, m.currency)),
    ComparisonColumn("discount", "Discount %", "negotiation",
                     lambda m: _percent(m.latest_discount_percentage)),
    ComparisonColumn("wiggleRoom", "Wiggle Room", "negotiation",
                     lambda m: _percent(m.remaining_wiggle_room)),
    ComparisonColumn("dealPhase", "Deal Phase", "negotiation",
                     lambda m: m.deal_phase, enabled=False),
    ComparisonColumn("buyerPower", "Buyer Power", "negotiation",
                     lambda m: f"{group_thousands(m.buyer_power_index)}/10", enabled=False),
    ComparisonColumn("stalemateRisk", "Stalemate Risk", "risk",
                     lambda m: _percent(m.stalemate_risk_probability)),
    ComparisonColumn("sellerFloorHit", "Seller Floor Hit %", "risk",
                     lambda m: _percent(m.seller_floor_hit_probability), enabled=False),
    ComparisonColumn("urgency", "Seller Urgency", "risk",
                     lambda m: f"{group_thousands(m.seller_urgency_score)}/10", enabled=False),
)


def health_band(score: float) -> str:
    if score >= 80:
        return "Excellent"
    if score >= 60:
        return "Good"
    if score >= 40:
        return "Fair"
    return "At Risk"


def risk_band(risk: float) -> str:
    if risk <= 20:
        return "Low"
    if risk <= 40:
        return "Moderate"
    if risk <= 60:
        return "Elevated"
    return "High"


def resolve_columns(keys: Optional[Iterable[str]] = None) -> List[ComparisonColumn]:
    """
    Pick comparison columns by key, in catalogue order

    Args:
        keys: Column keys to show; None selects the columns enabled by default.
            Unknown keys are ignored

    Returns:
        List of ComparisonColumn
    """
    if keys is None:
        return [c for c in COMPARISON_COLUMNS if c.enabled]
    wanted = set(keys)
    return [c for c in COMPARISON_COLUMNS if c.key in wanted]


def build_comparison_table(
    statistics: Mapping[str, NegotiationMetadata],
    column_keys: Optional[Iterable[str]] = None,
) -> List[ComparisonRow]:
    """
    Build one ComparisonRow per vendor, in the mapping's order

    Args:
        statistics: vendor_id -> normalized statistics
        column_keys: Columns to render (see resolve_columns)
    """
    columns = resolve_columns(column_keys)
    return [
        ComparisonRow(
            vendor_id=vendor_id,
            values={c.key: c.render(metadata) for c in columns},
            health_band=health_band(metadata.overall_deal_health_score),
            risk_band=risk_band(metadata.stalemate_risk_probability),
        )
        for vendor_id, metadata in statistics.items()
    ]


def rank_vendors(statistics: Mapping[str, NegotiationMetadata]) -> List[str]:
    """
    Vendor ids ordered best first: highest deal health, then lowest
    stalemate risk, then lowest latest quoted price. Ties keep input order.
    """
    return sorted(
        statistics,
        key=lambda vendor_id: (
            -statistics[vendor_id].overall_deal_health_score,
            statistics[vendor_id].stalemate_risk_probability,
            statistics[vendor_id].latest_quoted_price,
        ),
    )


def table_headers(column_keys: Optional[Sequence[str]] = None) -> List[str]:
    """Header labels for a rendered table: vendor, the chosen columns, then the two bands"""
    return ["Vendor"] + [c.label for c in resolve_columns(column_keys)] + ["Health", "Risk"]


def rows_as_lists(rows: Sequence[ComparisonRow], column_keys: Optional[Sequence[str]] = None) -> List[List[str]]:
    columns = resolve_columns(column_keys)
    return [
        [row.vendor_id] + [row.values.get(c.key, "") for c in columns] + [row.health_band, row.risk_band]
        for row in rows
    ]
