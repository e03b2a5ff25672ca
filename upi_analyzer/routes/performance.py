"""
Performance metrics route.

Endpoint
--------
GET /upi/v1/performance

Reports the most recent ``transactions:analyze`` run (records received,
kept and discarded, and analysis time) alongside process RSS memory and
active thread count.
"""

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from upi_analyzer.utils.performance import collect_performance_snapshot

performance_bp = Blueprint("performance", __name__)


@performance_bp.route("/performance", methods=["GET"])
def get_performance() -> tuple[Response, int]:
    """
    Response body::

        {
            "lastAnalysis": {"received": int, "valid": int,
                             "discarded": int, "time": "X.XXXX ms"} | null,
            "memory":  "XXX.XX MB",
            "threads": integer
        }

    ``lastAnalysis`` is ``null`` until the first analyze request.
    """
    return jsonify(collect_performance_snapshot()), 200
