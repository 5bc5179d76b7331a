from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.http import error_response, json_body
from ..core.exceptions import ValidationError
from ..container import Container
from .schemas import SaveTimetableRequest

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/timetable", methods=["POST"], endpoint="save_timetable")
    def save_timetable():
        try:
            req = SaveTimetableRequest.from_json(json_body())
            timetable = container.timetable_service.save(req.student_id, req.schedule)
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception as e:
            logger.exception("Error saving timetable")
            return error_response("Error saving timetable", 500, e)

        return jsonify({"message": "Timetable saved", "data": timetable.to_dict()}), 200

    @app.route("/timetable/<student_id>", methods=["GET"], endpoint="timetable_for_student")
    def timetable_for_student(student_id: str):
        try:
            timetable = container.timetable_service.get_for_student(student_id)
        except Exception as e:
            logger.exception("Error fetching timetable")
            return error_response("Error fetching timetable", 500, e)

        return jsonify(timetable.to_dict() if timetable else {}), 200
