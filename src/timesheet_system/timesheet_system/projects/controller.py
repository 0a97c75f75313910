from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.http import admin_required, error_response, request_data
from ..core.exceptions import DomainError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.project_service

    @app.route("/admin/projects", methods=["GET"], endpoint="admin_projects")
    @admin_required
    def admin_projects():
        try:
            projects = service.list_projects()
        except DomainError as e:
            logger.exception("Error fetching projects")
            return error_response(e)
        return jsonify({"success": True, "projects": [p.to_dict() for p in projects]})

    @app.route("/admin/projects", methods=["POST"], endpoint="add_project")
    @admin_required
    def add_project():
        try:
            project_id = service.add_project(request_data().get("name", ""))
        except DomainError as e:
            return error_response(e, generic_message="Failed to add project")
        return jsonify({"success": True, "message": "Project added successfully", "projectId": project_id})

    @app.route("/admin/projects/<int:project_id>/toggle", methods=["PUT"], endpoint="toggle_project")
    @admin_required
    def toggle_project(project_id: int):
        try:
            service.toggle_project(project_id)
        except DomainError as e:
            return error_response(e, generic_message="Failed to update project")
        return jsonify({"success": True, "message": "Project status updated"})

    @app.route("/admin/projects/<int:project_id>", methods=["DELETE"], endpoint="delete_project")
    @admin_required
    def delete_project(project_id: int):
        try:
            service.delete_project(project_id)
        except DomainError as e:
            return error_response(e, generic_message="Failed to delete project")
        return jsonify({"success": True, "message": "Project deleted successfully"})
