from __future__ import annotations

from typing import Any, Dict, Optional

from flask import current_app, jsonify, request


def json_body() -> Dict[str, Any]:
    """Request JSON as a dict; anything else counts as an empty body."""

    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def error_response(message: str, status: int, exc: Optional[BaseException] = None):
    body: Dict[str, Any] = {"message": message}
    # Internal error text only in debug mode.
    if exc is not None and bool(current_app.config.get("DEBUG", False)):
        body["error"] = str(exc)
    return jsonify(body), status
