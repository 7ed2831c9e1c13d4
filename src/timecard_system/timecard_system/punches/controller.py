from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.responses import domain_error, json_error, unexpected_error
from ..container import Container
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    @app.route("/punch", methods=["POST"], endpoint="record_punch")
    def record_punch():
        body = request.get_json(silent=True) or {}
        employee = body.get("employee") if isinstance(body, dict) else None
        punch_type = body.get("type") if isinstance(body, dict) else None

        if not isinstance(employee, str) or not employee.strip() or not punch_type:
            return json_error("Employee name and punch type are required", 400)
        employee = employee.strip()

        try:
            container.employee_service.require_active(employee)
            punch_id = container.punch_service.record_punch(employee, punch_type)
            status = container.punch_service.current_status(employee)
            return jsonify({"success": True, "punchId": punch_id, "status": status.value})
        except DomainError as e:
            return domain_error(e)
        except Exception as e:
            return unexpected_error(app.logger, e, "Failed to record punch")

    @app.route("/punch", methods=["GET"], endpoint="punch_status")
    def punch_status():
        employee = (request.args.get("employee") or "").strip()
        if not employee:
            return json_error("Employee name is required", 400)

        try:
            container.employee_service.require_active(employee)
            status = container.punch_service.current_status(employee)
            return jsonify({"status": status.value})
        except DomainError as e:
            return domain_error(e)
        except Exception as e:
            return unexpected_error(app.logger, e, "Failed to get punch status")

    @app.route("/offday", methods=["POST"], endpoint="mark_off_day")
    def mark_off_day():
        body = request.get_json(silent=True) or {}
        employee_name = body.get("employeeName") if isinstance(body, dict) else None
        work_date = body.get("date") if isinstance(body, dict) else None

        if not isinstance(employee_name, str) or not employee_name.strip() or not work_date:
            return json_error("Employee name and date are required", 400)
        employee_name = employee_name.strip()

        try:
            container.employee_service.require_active(employee_name)
            record_id = container.punch_service.mark_off_day(employee_name, work_date)
            return jsonify({"success": True, "recordId": record_id})
        except DomainError as e:
            return domain_error(e)
        except Exception as e:
            return unexpected_error(app.logger, e, "Failed to mark off day")
