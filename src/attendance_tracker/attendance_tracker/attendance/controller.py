from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.http import error_response, json_body
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container
from .schemas import MarkAttendanceRequest

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/mark-attendance", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance():
        try:
            req = MarkAttendanceRequest.from_json(json_body())
            container.attendance_service.save_day(req.student_id, req.date, req.entries)
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception as e:
            logger.exception("Error saving attendance")
            return error_response("Server error", 500, e)

        return jsonify({"message": "Attendance saved"}), 200

    @app.route("/attendance/<student_id>/<date>", methods=["GET"], endpoint="attendance_for_day")
    def attendance_for_day(student_id: str, date: str):
        try:
            record = container.attendance_service.get_day(student_id, date)
        except NotFoundError as e:
            return error_response(str(e), 404)
        except Exception as e:
            logger.exception("Error fetching attendance")
            return error_response("Error fetching attendance", 500, e)

        return jsonify(record.to_dict())
