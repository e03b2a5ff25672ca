"""
Immutable data models / schemas for the UPI transaction analyzer.

These dataclasses serve as typed containers that travel between
the route → service → model layers.  No business logic lives here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Any, List, Mapping, Optional


#Validation output
@dataclass(frozen=True)
class InvalidRecord:
    """A raw record that failed the validity predicate."""
    index: int
    record: Any
    message: str

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "message": self.message,
            "record": self.record,
        }


@dataclass(frozen=True)
class ValidationResult:
    """Output of the record validator service."""
    valid: List[Mapping[str, Any]]
    invalid: List[InvalidRecord]

    def to_dict(self) -> dict:
        return {
            "valid": [dict(r) for r in self.valid],
            "invalid": [r.to_dict() for r in self.invalid],
        }


#Analysis output
@dataclass(frozen=True)
class AnalysisReport:
    """
    Aggregate report over the valid records of one transaction log.

    ``highest_transaction`` is the caller's own record object, not a copy.
    """
    total_credit: Decimal
    total_debit: Decimal
    net_balance: Decimal
    transaction_count: int
    avg_transaction: int
    highest_transaction: Mapping[str, Any]
    category_breakdown: Mapping[str, Decimal] = field(default_factory=dict)
    frequent_contact: str = ""
    all_above_100: bool = False
    has_large_transaction: bool = False

    def __post_init__(self) -> None:
        # Read-only view over a private copy.
        object.__setattr__(
            self, "category_breakdown", MappingProxyType(dict(self.category_breakdown))
        )

    def to_dict(self) -> dict:
        from upi_analyzer.utils.financial import decimal_to_number
        return {
            "totalCredit": decimal_to_number(self.total_credit),
            "totalDebit": decimal_to_number(self.total_debit),
            "netBalance": decimal_to_number(self.net_balance),
            "transactionCount": self.transaction_count,
            "avgTransaction": self.avg_transaction,
            "highestTransaction": dict(self.highest_transaction),
            "categoryBreakdown": {
                category: decimal_to_number(total)
                for category, total in self.category_breakdown.items()
            },
            "frequentContact": self.frequent_contact,
            "allAbove100": self.all_above_100,
            "hasLargeTransaction": self.has_large_transaction,
        }


#Performance output
@dataclass(frozen=True)
class AnalysisRun:
    """Bookkeeping for one ``transactions:analyze`` call."""
    received: int
    valid: int
    elapsed_ms: float

    @property
    def discarded(self) -> int:
        return self.received - self.valid

    def to_dict(self) -> dict:
        return {
            "received": self.received,
            "valid": self.valid,
            "discarded": self.discarded,
            "time": f"{self.elapsed_ms:.4f} ms",
        }


@dataclass(frozen=True)
class PerformanceSnapshot:
    """Process metrics reported by ``GET /performance``."""
    last_analysis: Optional[AnalysisRun]
    memory_mb: float
    threads: int

    def to_dict(self) -> dict:
        return {
            "lastAnalysis": self.last_analysis.to_dict() if self.last_analysis else None,
            "memory": f"{self.memory_mb:.2f} MB",
            "threads": self.threads,
        }
