from __future__ import annotations

import io
import logging

from flask import Flask, jsonify, request, send_file

from ..common.http import admin_required, error_response
from ..core.exceptions import PersistenceError
from ..container import Container
from .excel_exporter import XLSX_MIMETYPE

logger = logging.getLogger(__name__)

EXPORT_FILENAME = "time_entries_export.xlsx"


def register(app: Flask, container: Container) -> None:
    reports = container.report_service

    @app.route("/admin/users-data", methods=["GET"], endpoint="admin_users_data")
    @admin_required
    def admin_users_data():
        try:
            rows = reports.build_flat_report()
        except PersistenceError as e:
            logger.exception("Error fetching users data")
            return error_response(e)
        return jsonify({"success": True, "data": [r.to_dict() for r in rows]})

    @app.route("/admin/project-distribution", methods=["GET"], endpoint="admin_project_distribution")
    @admin_required
    def admin_project_distribution():
        user_filter = request.args.get("user") or None
        try:
            distribution = reports.build_distribution(user_filter)
        except PersistenceError as e:
            logger.exception("Error fetching project distribution")
            return error_response(e)
        return jsonify({"success": True, "distribution": [a.to_dict() for a in distribution]})

    @app.route("/admin/export-excel", methods=["GET"], endpoint="admin_export_excel")
    @admin_required
    def admin_export_excel():
        try:
            content = container.excel_exporter.export(reports.build_flat_report())
        except PersistenceError as e:
            logger.exception("Error fetching data for export")
            return error_response(e, generic_message="Export failed")

        return send_file(
            io.BytesIO(content),
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name=EXPORT_FILENAME,
        )
