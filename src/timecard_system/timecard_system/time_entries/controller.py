from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_iso_date
from ..common.responses import domain_error, json_error, unexpected_error
from ..container import Container
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    @app.route("/time-entries", methods=["POST"], endpoint="save_time_entry")
    def save_time_entry():
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            return json_error("Invalid JSON in request body", 400)

        employee_name = body.get("employeeName")
        work_date = body.get("date")
        if not employee_name or not work_date or body.get("hours") is None:
            return json_error("Employee name, date and hours are required", 400)

        lunch_taken = body.get("lunchTaken", False)
        if not isinstance(lunch_taken, bool):
            return json_error("lunchTaken must be true or false", 400)

        try:
            entry_id = container.time_entry_service.save_time_entry(
                employee_name,
                work_date,
                body.get("hours"),
                lunch_taken,
            )
            return jsonify({"success": True, "entryId": entry_id})
        except DomainError as e:
            return domain_error(e)
        except Exception as e:
            return unexpected_error(app.logger, e, "Failed to save time entry")

    @app.route("/time-entries/weekly", methods=["GET"], endpoint="weekly_time_entries")
    def weekly_time_entries():
        try:
            report = container.time_entry_service.weekly_report()
            return jsonify(
                {
                    "entries": [e.to_dict() for e in report.entries],
                    "weekStart": format_iso_date(report.week_start),
                    "weekEnding": format_iso_date(report.week_ending),
                }
            )
        except DomainError as e:
            return domain_error(e)
        except Exception as e:
            return unexpected_error(app.logger, e, "Failed to get weekly report")
