"""
Transaction log analysis service.

Responsibility: turn one month of raw UPI records into a single
:class:`~upi_analyzer.models.schemas.AnalysisReport`.  Pure business
logic – no I/O, and the caller's list and records are never mutated.

Pipeline
--------
1. Reject input that is not a list/tuple, or is empty.
2. Keep only valid records (see :mod:`validation_service`), in input order.
3. Aggregate totals, mean, maximum, per-category sums, most frequent
   counterparty and the two amount flags over the valid records.
4. Assemble the report.

"No usable data" (bad input shape, empty log, nothing valid) is reported
as ``None`` in every case.
"""

from __future__ import annotations

from collections import Counter
from decimal import Decimal, localcontext
from typing import Any, Dict, List, Mapping, Optional

from upi_analyzer.models.schemas import AnalysisReport
from upi_analyzer.services.validation_service import is_valid_record
from upi_analyzer.utils.financial import (
    CREDIT,
    LARGE_TRANSACTION_THRESHOLD,
    SMALL_TRANSACTION_FLOOR,
    ZERO,
    exact_context,
    rounded_mean,
    to_decimal,
)
from upi_analyzer.utils.log import get_logger

logger = get_logger(__name__)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _label(value: Any) -> str:
    """
    Dictionary key for a ``category`` / ``to`` value.

    Non-strings go through ``str()``, so ``1`` and ``"1"`` share a key and a
    missing value becomes ``"None"``.
    """
    return value if isinstance(value, str) else str(value)


def _highest(records: List[Mapping[str, Any]]) -> Mapping[str, Any]:
    # Strict ">" keeps the earliest record on ties.
    best = records[0]
    for record in records[1:]:
        if record["amount"] > best["amount"]:
            best = record
    return best


def _most_frequent(labels: List[str]) -> str:
    counts = Counter(labels)
    best, best_count = labels[0], counts[labels[0]]
    # Counter preserves first-seen order.
    for label, count in counts.items():
        if count > best_count:
            best, best_count = label, count
    return best


# ── Public API ────────────────────────────────────────────────────────────────

def analyze_transactions(
    transactions: Any,
    *,
    large_threshold: Decimal = LARGE_TRANSACTION_THRESHOLD,
    floor: Decimal = SMALL_TRANSACTION_FLOOR,
) -> Optional[AnalysisReport]:
    """
    Analyze a UPI transaction log.

    Parameters
    ----------
    transactions:
        List of records shaped like
        ``{"id", "type", "amount", "to", "category", "date"}``.
    large_threshold:
        An amount >= this sets ``has_large_transaction``.
    floor:
        ``all_above_100`` holds when every amount is strictly above this.

    Returns
    -------
    AnalysisReport or None
        ``None`` when there is no usable data.
    """
    if not isinstance(transactions, (list, tuple)) or len(transactions) == 0:
        return None

    valid = [t for t in transactions if is_valid_record(t)]
    if not valid:
        logger.debug("All %d records discarded; nothing to analyze.", len(transactions))
        return None
    if len(valid) < len(transactions):
        logger.debug("Discarded %d invalid record(s).", len(transactions) - len(valid))

    amounts = [to_decimal(t["amount"]) for t in valid]
    category_breakdown: Dict[str, Decimal] = {}
    all_above_floor = True
    has_large = False

    with localcontext(exact_context(amounts)):
        total_credit = ZERO
        total_debit = ZERO

        for record, amount in zip(valid, amounts):
            if record["type"] == CREDIT:
                total_credit += amount
            else:
                total_debit += amount

            category = _label(record.get("category"))
            category_breakdown[category] = category_breakdown.get(category, ZERO) + amount

            if amount <= floor:
                all_above_floor = False
            if amount >= large_threshold:
                has_large = True

        net_balance = total_credit - total_debit
        total = total_credit + total_debit

    count = len(valid)

    return AnalysisReport(
        total_credit=total_credit,
        total_debit=total_debit,
        net_balance=net_balance,
        transaction_count=count,
        avg_transaction=rounded_mean(total, count),
        highest_transaction=_highest(valid),
        category_breakdown=category_breakdown,
        frequent_contact=_most_frequent([_label(r.get("to")) for r in valid]),
        all_above_100=all_above_floor,
        has_large_transaction=has_large,
    )
