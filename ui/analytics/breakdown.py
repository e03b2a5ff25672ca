def category_shares(report):
    breakdown = report["categoryBreakdown"]
    total = sum(breakdown.values())
    if total == 0:
        return {category: 0.0 for category in breakdown}
    return {
        category: round(amount * 100 / total, 2)
        for category, amount in breakdown.items()
    }


def spending_flags(report):
    flags = []

    if report["netBalance"] < 0:
        flags.append("Spent more than received this month")
    if report["hasLargeTransaction"]:
        flags.append("Large transaction in this log")
    if not report["allAbove100"]:
        flags.append("Small-ticket payments present")

    return flags
