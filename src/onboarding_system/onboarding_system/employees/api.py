from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..core.constants import APP_TITLE
from ..core.exceptions import (
    AuthenticationError,
    ConflictError,
    DataParseError,
    DomainError,
    InvalidTokenError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from ..container import Container

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (InvalidTokenError, 401),
    (NotFoundError, 404),
    (ConflictError, 409),
    (StorageError, 500),
    (DataParseError, 500),
)


def status_for(error: DomainError) -> int:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status
    return 500


def error_response(error: DomainError):
    status = status_for(error)
    if status >= 500:
        logger.error("API request failed: %s", error)
    else:
        logger.debug("API request rejected (%d): %s", status, error)
    return jsonify({"error": str(error)}), status


def _employee_fields(body: dict) -> dict:
    return {
        "first_name": body.get("first_name"),
        "last_name": body.get("last_name"),
        "personal_email": body.get("personal_email"),
        "age": body.get("age"),
        "diploma": body.get("diploma"),
    }


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/healthcheck", methods=["GET"], endpoint="healthcheck")
    @app.route("/api/v1/healthchecker", methods=["GET"], endpoint="api_healthcheck")
    def healthcheck():
        return jsonify({"status": "success", "message": APP_TITLE})

    @app.route("/api/v1/employees", methods=["POST"], endpoint="api_create_employee")
    def api_create_employee():
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400
        try:
            employee = service.create(**_employee_fields(body))
        except DomainError as e:
            return error_response(e)
        return jsonify({"message": "Employee created successfully", "data": employee.to_public_dict()}), 201

    @app.route("/api/v1/employees", methods=["GET"], endpoint="api_list_employees")
    def api_list_employees():
        try:
            page = service.list_page(request.args.get("page"), request.args.get("limit"))
        except DomainError as e:
            return error_response(e)
        return jsonify(
            {
                "message": "Employees list",
                "results": len(page.items),
                "total": page.total,
                "employees": [e.to_public_dict() for e in page.items],
            }
        )

    @app.route("/api/v1/employees/<employee_id>", methods=["GET"], endpoint="api_get_employee")
    def api_get_employee(employee_id: str):
        try:
            employee = service.get(employee_id)
        except DomainError as e:
            return error_response(e)
        return jsonify({"message": "Employee found", "data": employee.to_public_dict()})

    @app.route("/api/v1/employees/handle/<handle>", methods=["GET"], endpoint="api_get_employee_by_handle")
    def api_get_employee_by_handle(handle: str):
        try:
            employee = service.get_by_handle(handle)
        except DomainError as e:
            return error_response(e)
        return jsonify({"message": "Employee found", "data": employee.to_public_dict()})

    @app.route("/api/v1/employees/<employee_id>", methods=["PATCH"], endpoint="api_onboard_employee")
    def api_onboard_employee(employee_id: str):
        try:
            employee = service.onboard(employee_id)
        except DomainError as e:
            return error_response(e)
        return jsonify({"message": "Employee onboarded successfully", "data": employee.to_public_dict()})

    @app.route("/api/v1/employees/<employee_id>", methods=["PUT"], endpoint="api_update_employee")
    def api_update_employee(employee_id: str):
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400
        try:
            employee = service.edit(employee_id, **_employee_fields(body))
        except DomainError as e:
            return error_response(e)
        return jsonify({"message": f"Employee {employee_id!r} updated successfully", "data": employee.to_public_dict()})

    @app.route("/api/v1/employees/<employee_id>", methods=["DELETE"], endpoint="api_delete_employee")
    def api_delete_employee(employee_id: str):
        try:
            service.delete(employee_id)
            employees = service.list_all()
        except DomainError as e:
            return error_response(e)
        return jsonify(
            {
                "message": f"Employee {employee_id!r} deleted successfully",
                "results": len(employees),
                "employees": [e.to_public_dict() for e in employees],
            }
        )

    @app.route("/api/v1/employees/<employee_id>/secure-password", methods=["POST"], endpoint="api_secure_password")
    def api_secure_password(employee_id: str):
        try:
            employee = service.secure_password(employee_id)
        except DomainError as e:
            return error_response(e)
        return jsonify({"message": "Password secured", "data": employee.to_public_dict()})
