from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.datetime_utils import require_iso_date
from ..common.http import error_response, request_data
from ..core.exceptions import PersistenceError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.time_entry_service

    @app.route("/save-time-entry", methods=["POST"], endpoint="save_time_entry")
    def save_time_entry():
        try:
            entry = service.save(request_data())
        except ValidationError as e:
            return error_response(e)
        except PersistenceError as e:
            logger.exception("Error saving time entry")
            return error_response(e, generic_message="Failed to save time entry")

        return jsonify(
            {
                "success": True,
                "message": "Time entry saved successfully",
                "available_hours": entry.available_hours,
            }
        )

    @app.route("/time-entry/preview", methods=["POST"], endpoint="preview_time_entry")
    def preview_time_entry():
        try:
            preview = service.preview(request_data())
        except ValidationError as e:
            return error_response(e)
        return jsonify({"success": True, "preview": preview.to_dict()})

    @app.route("/time-entries/<int:user_id>", methods=["GET"], endpoint="list_time_entries")
    def list_time_entries(user_id: int):
        try:
            entries = service.list_entries(user_id)
        except PersistenceError as e:
            logger.exception("Error fetching time entries")
            return error_response(e)
        return jsonify({"success": True, "entries": [e.to_dict() for e in entries]})

    @app.route("/time-entry/<int:user_id>/<date_s>", methods=["GET"], endpoint="get_time_entry")
    def get_time_entry(user_id: int, date_s: str):
        try:
            entry = service.get_entry(user_id, require_iso_date(date_s))
        except ValidationError as e:
            return error_response(e)
        except PersistenceError as e:
            logger.exception("Error fetching time entry")
            return error_response(e)
        return jsonify({"success": True, "entry": entry.to_dict() if entry else {}})
