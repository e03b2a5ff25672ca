from __future__ import annotations

import time
from typing import Any

from flask import Blueprint, Response, current_app, jsonify, request

from upi_analyzer.models.schemas import AnalysisRun
from upi_analyzer.services.analysis_service import analyze_transactions
from upi_analyzer.services.validation_service import validate_records
from upi_analyzer.utils.log import get_logger
from upi_analyzer.utils.performance import record_analysis

transactions_bp = Blueprint("transactions", __name__)

logger = get_logger(__name__)

_MISSING = object()


#Shared parsing helpers
def _read_log() -> Any:
    """
    Return the transaction log from the request body, or ``_MISSING``.

    Accepts a bare JSON array or ``{"transactions": [...]}``.
    """
    body = request.get_json(silent=True)
    if body is None:
        return _MISSING
    if isinstance(body, dict) and "transactions" in body:
        return body["transactions"]
    return body


#Endpoint: analyze
@transactions_bp.route("/transactions:analyze", methods=["POST"])
def analyze() -> tuple[Response, int]:

    log = _read_log()
    if log is _MISSING:
        return jsonify({"error": "Invalid or missing JSON body."}), 400

    started = time.perf_counter()
    report = analyze_transactions(
        log,
        large_threshold=current_app.config["LARGE_TRANSACTION_THRESHOLD"],
        floor=current_app.config["SMALL_TRANSACTION_FLOOR"],
    )
    run = AnalysisRun(
        received=len(log) if isinstance(log, list) else 0,
        valid=report.transaction_count if report else 0,
        elapsed_ms=(time.perf_counter() - started) * 1_000,
    )
    record_analysis(run)

    if report is None:
        logger.info("Analyze request carried no usable transactions (%d received).", run.received)
        response, status = jsonify({"error": "No valid transactions to analyze."}), 422
    else:
        response, status = jsonify(report.to_dict()), 200

    response.headers["X-Analysis-Time-Ms"] = f"{run.elapsed_ms:.4f}"
    return response, status


#Endpoint: validate
@transactions_bp.route("/transactions:validate", methods=["POST"])
def validate() -> tuple[Response, int]:

    log = _read_log()
    if log is _MISSING:
        return jsonify({"error": "Invalid or missing JSON body."}), 400

    if not isinstance(log, list):
        return jsonify({"error": "'transactions' must be a list."}), 422

    result = validate_records(log)
    return jsonify(result.to_dict()), 200
