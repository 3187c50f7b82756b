from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.responses import error_response, system_error_response
from ..core.exceptions import DomainError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _employee_fields() -> dict:
        data = request.get_json(silent=True) or {}
        return {
            "name": str(data.get("name") or ""),
            "email": str(data.get("email") or ""),
            "position": data.get("position"),
            "avatar_url": data.get("avatar_url"),
        }

    @app.route("/api/employees", methods=["GET"], endpoint="api_employees")
    def api_employees():
        try:
            employees = container.employee_service.list_employees()
            return jsonify({"success": True, "employees": [e.to_dict() for e in employees]})
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Listing employees failed")
            return system_error_response()

    @app.route("/api/employees", methods=["POST"], endpoint="api_employee_create")
    def api_employee_create():
        try:
            employee_id = container.employee_service.create_employee(**_employee_fields())
            employee = container.employee_service.get_employee(employee_id)
            return jsonify({"success": True, "message": "Employee created", "employee": employee.to_dict()}), 201
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Creating employee failed")
            return system_error_response()

    @app.route("/api/employees/<int:employee_id>", methods=["PUT"], endpoint="api_employee_update")
    def api_employee_update(employee_id: int):
        try:
            container.employee_service.update_employee(employee_id=employee_id, **_employee_fields())
            employee = container.employee_service.get_employee(employee_id)
            return jsonify({"success": True, "message": "Employee updated", "employee": employee.to_dict()})
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Updating employee %s failed", employee_id)
            return system_error_response()

    @app.route("/api/employees/<int:employee_id>", methods=["DELETE"], endpoint="api_employee_delete")
    def api_employee_delete(employee_id: int):
        try:
            container.employee_service.delete_employee(employee_id)
            return jsonify({"success": True, "message": "Employee deleted"})
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Deleting employee %s failed", employee_id)
            return system_error_response()
