from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.http import error_response
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/report/<student_id>", methods=["GET"], endpoint="attendance_report")
    def attendance_report(student_id: str):
        try:
            report = container.report_service.build_report(student_id)
        except Exception as e:
            logger.exception("Error generating report")
            return error_response("Error generating report", 500, e)

        return jsonify([row.to_dict() for row in report])
