import copy
from decimal import Decimal

import pytest

from upi_analyzer.services.analysis_service import analyze_transactions


def _txn(id, type, amount, to="X", category="misc", date="2025-01-01"):
    return {"id": id, "type": type, "amount": amount, "to": to, "category": category, "date": date}


def test_monthly_log_report(monthly_log):
    report = analyze_transactions(monthly_log)

    assert report.to_dict() == {
        "totalCredit": 5000,
        "totalDebit": 300,
        "netBalance": 4700,
        "transactionCount": 3,
        "avgTransaction": 1767,
        "highestTransaction": monthly_log[0],
        "categoryBreakdown": {"income": 5000, "food": 300},
        "frequentContact": "Swiggy",
        "allAbove100": False,
        "hasLargeTransaction": True,
    }
    assert report.highest_transaction is monthly_log[0]


@pytest.mark.parametrize("transactions", [None, [], (), "credit", 42, {"id": "T1"}])
def test_no_usable_input_returns_none(transactions):
    assert analyze_transactions(transactions) is None


def test_all_invalid_records_return_none():
    transactions = [
        _txn("A", "debit", -5),
        _txn("B", "credit", 0),
        _txn("C", "refund", 300),
        _txn("D", "debit", "300"),
        None,
    ]

    assert analyze_transactions(transactions) is None


def test_invalid_records_are_skipped():
    transactions = [
        _txn("A", "credit", 1000, to="Rahul", category="gift"),
        _txn("B", "debit", -50, to="Rahul", category="gift"),
        _txn("C", "Debit", 400, to="Zomato", category="food"),
        _txn("D", "debit", True, to="Zomato", category="food"),
        _txn("E", "debit", float("nan"), to="Zomato", category="food"),
        _txn("F", "debit", 250, to="Ola", category="travel"),
    ]

    report = analyze_transactions(transactions)

    assert report.transaction_count == 2
    assert report.total_credit == 1000
    assert report.total_debit == 250
    assert report.category_breakdown == {"gift": Decimal("1000"), "travel": Decimal("250")}


def test_totals_are_consistent():
    transactions = [
        _txn("A", "credit", 0.1, category="a"),
        _txn("B", "credit", 0.2, category="b"),
        _txn("C", "debit", 1250.5, category="a"),
        _txn("D", "debit", 99.99, category="c"),
    ]

    report = analyze_transactions(transactions)

    assert report.total_credit == Decimal("0.3")
    assert report.net_balance == report.total_credit - report.total_debit
    assert sum(report.category_breakdown.values()) == report.total_credit + report.total_debit
    assert report.to_dict()["totalCredit"] == 0.3


def test_average_rounds_half_up():
    transactions = [_txn("A", "debit", 2), _txn("B", "debit", 3)]

    assert analyze_transactions(transactions).avg_transaction == 3


def test_average_rounds_down_below_half():
    transactions = [_txn("A", "debit", 1), _txn("B", "debit", 1), _txn("C", "debit", 2)]

    assert analyze_transactions(transactions).avg_transaction == 1


def test_highest_transaction_first_on_tie():
    first = _txn("A", "debit", 700)
    second = _txn("B", "credit", 700)
    transactions = [_txn("Z", "debit", 10), first, second]

    assert analyze_transactions(transactions).highest_transaction is first


def test_input_is_not_mutated():
    transactions = [
        _txn("A", "debit", 10),
        _txn("B", "credit", 900),
        _txn("C", "debit", 300),
    ]
    snapshot = copy.deepcopy(transactions)

    analyze_transactions(transactions)

    assert transactions == snapshot


def test_frequent_contact_first_seen_wins_ties():
    transactions = [
        _txn("A", "debit", 150, to="Rahul"),
        _txn("B", "debit", 150, to="Priya"),
        _txn("C", "debit", 150, to="Priya"),
        _txn("D", "debit", 150, to="Rahul"),
    ]

    assert analyze_transactions(transactions).frequent_contact == "Rahul"


def test_frequent_contact_counts_valid_records_only():
    transactions = [
        _txn("A", "debit", 150, to="Rahul"),
        _txn("B", "debit", -1, to="Priya"),
        _txn("C", "debit", -1, to="Priya"),
        _txn("D", "debit", 150, to="Amit"),
        _txn("E", "debit", 150, to="Amit"),
    ]

    assert analyze_transactions(transactions).frequent_contact == "Amit"


def test_all_above_100_is_strict():
    above = [_txn("A", "debit", 101), _txn("B", "credit", 5000)]
    boundary = above + [_txn("C", "debit", 100)]

    assert analyze_transactions(above).all_above_100 is True
    assert analyze_transactions(boundary).all_above_100 is False


def test_large_transaction_threshold_is_inclusive():
    assert analyze_transactions([_txn("A", "debit", 5000)]).has_large_transaction is True
    assert analyze_transactions([_txn("A", "debit", 4999.99)]).has_large_transaction is False


def test_large_transaction_threshold_is_configurable():
    report = analyze_transactions([_txn("A", "debit", 501)], large_threshold=Decimal("500"))

    assert report.has_large_transaction is True


def test_non_string_labels_are_stringified():
    transactions = [
        {"id": "A", "type": "debit", "amount": 150},
        {"id": "B", "type": "debit", "amount": 150, "to": 42, "category": 7},
    ]

    report = analyze_transactions(transactions)

    assert report.category_breakdown == {"None": Decimal("150"), "7": Decimal("150")}
    assert report.frequent_contact == "None"


def test_tuple_input_is_accepted(monthly_log):
    report = analyze_transactions(tuple(monthly_log))

    assert report.transaction_count == 3


def test_very_large_amount():
    report = analyze_transactions([_txn("A", "credit", 1e30)])

    assert report.total_credit == Decimal("1E+30")
    assert report.avg_transaction == 10**30
    assert report.to_dict()["totalCredit"] == 10**30


def test_large_sums_keep_small_digits():
    transactions = [_txn("A", "credit", 10**28), _txn("B", "credit", 1)]

    report = analyze_transactions(transactions)

    assert report.total_credit == Decimal(10**28 + 1)
    assert report.net_balance == Decimal(10**28 + 1)
    assert report.avg_transaction == 5 * 10**27 + 1
    assert report.to_dict()["totalCredit"] == 10**28 + 1


def test_category_breakdown_is_read_only(monthly_log):
    report = analyze_transactions(monthly_log)

    with pytest.raises(TypeError):
        report.category_breakdown["food"] = Decimal("0")

    assert report.to_dict()["categoryBreakdown"] == {"income": 5000, "food": 300}


def test_numeric_and_string_contacts_share_a_key():
    transactions = [
        _txn("A", "debit", 150, to="Amit"),
        _txn("B", "debit", 150, to=1),
        _txn("C", "debit", 150, to="1"),
    ]

    assert analyze_transactions(transactions).frequent_contact == "1"
