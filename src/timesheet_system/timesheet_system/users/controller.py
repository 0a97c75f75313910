from __future__ import annotations

import logging

from flask import Flask, jsonify, session

from ..common.http import admin_required, error_response, request_data
from ..core.exceptions import DomainError, PersistenceError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/register", methods=["POST"], endpoint="register")
    def register_user():
        data = request_data()
        logger.info("Registration attempt ps_number=%s", data.get("ps_number"))
        try:
            container.auth_service.register(
                ps_number=data.get("ps_number", ""),
                password=data.get("password", ""),
                name=data.get("name", ""),
            )
        except PersistenceError as e:
            logger.exception("Registration failed")
            return error_response(e, generic_message="Registration failed")
        except DomainError as e:
            return error_response(e)
        return jsonify({"success": True, "message": "Registration successful"})

    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = request_data()
        try:
            s_user = container.auth_service.authenticate(data.get("ps_number", ""), data.get("password", ""))
        except DomainError as e:
            return error_response(e)

        session["user_id"] = s_user.user_id
        session["name"] = s_user.name
        return jsonify({"success": True, "message": "Login successful", "user": s_user.to_dict()})

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"success": True, "message": "Logged out"})

    @app.route("/admin-login", methods=["POST"], endpoint="admin_login")
    def admin_login():
        try:
            container.auth_service.check_admin_password(request_data().get("password", ""))
        except DomainError as e:
            return error_response(e)

        session["is_admin"] = True
        return jsonify({"success": True, "message": "Admin login successful"})

    @app.route("/admin/users", methods=["GET"], endpoint="admin_users")
    @admin_required
    def admin_users():
        try:
            users = container.user_service.list_users()
        except DomainError as e:
            logger.exception("Error fetching users")
            return error_response(e)
        return jsonify({"success": True, "users": [u.to_public_dict() for u in users]})

    @app.route("/admin/users/<int:user_id>", methods=["DELETE"], endpoint="delete_user")
    @admin_required
    def delete_user(user_id: int):
        try:
            deleted_entries = container.user_service.delete_user(user_id)
        except DomainError as e:
            return error_response(e, generic_message="Failed to delete user")
        return jsonify(
            {
                "success": True,
                "message": "User deleted successfully",
                "deletedEntries": deleted_entries,
            }
        )
