"""
Record validator service.

Responsibility: decide which raw UPI records are usable and partition
a log into *valid* / *invalid* buckets.

Rules (applied in order, first failure wins):
1. Record must be a mapping.
2. ``type`` must be exactly ``"credit"`` or ``"debit"``.
3. ``amount`` must be a real number (booleans excluded).
4. ``amount`` must be finite.
5. ``amount`` > 0.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List, Optional, Sequence

from upi_analyzer.models.schemas import InvalidRecord, ValidationResult
from upi_analyzer.utils.financial import TRANSACTION_TYPES, is_finite, is_number


def rejection_reason(record: Any) -> Optional[str]:
    """Return why *record* is unusable, or ``None`` when it is valid."""
    # Rule 1 – shape
    if not isinstance(record, Mapping):
        return f"Record must be an object, got {type(record).__name__}."

    # Rule 2 – type
    txn_type = record.get("type")
    if not isinstance(txn_type, str) or txn_type not in TRANSACTION_TYPES:
        return f"Unsupported type {txn_type!r}; expected 'credit' or 'debit'."

    # Rule 3 – numeric amount
    amount = record.get("amount")
    if not is_number(amount):
        return f"amount ({amount!r}) must be a number."

    # Rule 4 – finite amount
    if not is_finite(amount):
        return f"amount ({amount!r}) must be finite."

    # Rule 5 – positive amount
    if not amount > 0:
        return f"amount ({amount!r}) must be > 0."

    return None


def is_valid_record(record: Any) -> bool:
    return rejection_reason(record) is None


def validate_records(transactions: Sequence[Any]) -> ValidationResult:
    """
    Apply all validation rules and return a :class:`~upi_analyzer.models.schemas.ValidationResult`.

    Parameters
    ----------
    transactions:
        Raw UPI records, in log order.

    Returns
    -------
    ValidationResult
        Valid records (original objects, input order) and the rejected
        ones with their position and a human-readable message.
    """
    valid: List[Any] = []
    invalid: List[InvalidRecord] = []

    for index, record in enumerate(transactions):
        reason = rejection_reason(record)
        if reason is None:
            valid.append(record)
        else:
            invalid.append(InvalidRecord(index=index, record=record, message=reason))

    return ValidationResult(valid=valid, invalid=invalid)
