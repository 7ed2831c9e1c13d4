from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.responses import domain_error, json_error, unexpected_error
from ..common.validators import require_int
from ..container import Container
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    @app.route("/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        try:
            employees = container.employee_service.list_active()
            return jsonify({"employees": [e.to_dict() for e in employees]})
        except DomainError as e:
            return domain_error(e)
        except Exception as e:
            return unexpected_error(app.logger, e, "Failed to get employees")

    @app.route("/employees", methods=["POST"], endpoint="add_employee")
    def add_employee():
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            return json_error("Invalid JSON in request body", 400)

        name = body.get("name")
        if not isinstance(name, str) or not name.strip():
            return json_error("Employee name is required", 400)

        try:
            app.logger.info("Adding employee %r", name.strip())
            employee_id = container.employee_service.add_employee(name)
            return jsonify({"success": True, "employeeId": employee_id})
        except DomainError as e:
            return domain_error(e)
        except Exception as e:
            return unexpected_error(app.logger, e, "Failed to add employee")

    @app.route("/employees", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee():
        raw_id = request.args.get("id")
        if not raw_id:
            return json_error("Employee ID is required", 400)

        try:
            employee_id = require_int(raw_id, "Employee ID")
            deleted = container.employee_service.delete_employee(employee_id)
            return jsonify({"success": True, "deletedRows": deleted})
        except DomainError as e:
            return domain_error(e)
        except Exception as e:
            return unexpected_error(app.logger, e, "Failed to delete employee")
