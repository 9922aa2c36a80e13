"""HTTP routes for the Flask API."""

import logging
import math
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, Response, current_app, jsonify, request
from werkzeug.exceptions import BadRequest

from retirecalc.core.analysis import build_report
from retirecalc.core.projection import project
from retirecalc.core.validation import ProjectionValidationError, parse_request
from retirecalc.presentation import currency_symbol, get_renderer
from retirecalc.schemas.analysis import RetirementReport
from retirecalc.schemas.ping import PingResponse

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ProjectionValidationError)
def _handle_validation_error(exc: ProjectionValidationError):
    """Convert rejected projection inputs into JSON responses."""
    logger.warning("projection rejected: %s", exc.reason)
    return jsonify({"detail": exc.reason}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(BadRequest)
def _handle_bad_request(exc: BadRequest):
    """Keep malformed bodies on the same JSON error contract."""
    logger.warning("bad request: %s", exc.description)
    return jsonify({"detail": exc.description}), HTTPStatus.BAD_REQUEST


def _finite_or_none(value: Any) -> Any:
    """Replace inf/nan (balances past float range) with None so the body stays valid JSON."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _finite_or_none(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_finite_or_none(item) for item in value]
    return value


def _report_from_request() -> RetirementReport:
    payload: Any = request.get_json(force=True, silent=False)
    if isinstance(payload, dict):
        defaults: Dict[str, Any] = {"currencyLabel": current_app.config["SETTINGS"].default_currency}
        payload = {**defaults, **payload}

    # non-object bodies are rejected by parse_request like any malformed input
    projection_request = parse_request(payload)
    return build_report(project(projection_request))


def _symbol_for(report: RetirementReport) -> str:
    settings = current_app.config["SETTINGS"]
    return currency_symbol(report.result.currencyLabel, settings.currency_symbols)


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message="pong", env=current_app.config["SETTINGS"].env)
    return jsonify(response.model_dump())


@api_bp.post("/projection")
def projection() -> Any:
    """Return the projection plus goal, income and purchasing-power views."""
    report = _report_from_request()
    body = _finite_or_none(report.model_dump(mode="json"))
    body["currencySymbol"] = _symbol_for(report)
    return jsonify(body), HTTPStatus.OK


@api_bp.post("/projection/report")
def projection_report() -> Any:
    """Return the same report rendered as text or HTML (?format=text|html)."""
    try:
        renderer = get_renderer(request.args.get("format", "text"))
    except ValueError as exc:
        return jsonify({"detail": str(exc)}), HTTPStatus.BAD_REQUEST

    report = _report_from_request()
    body = renderer.render(report, _symbol_for(report))
    return Response(body, status=HTTPStatus.OK, mimetype=renderer.media_type)
