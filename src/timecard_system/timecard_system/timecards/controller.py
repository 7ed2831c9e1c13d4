from __future__ import annotations

import io

from flask import Flask, jsonify, request, send_file

from ..common.datetime_utils import format_iso_date
from ..common.responses import domain_error, json_error, unexpected_error
from ..container import Container
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    @app.route("/timecard", methods=["GET"], endpoint="weekly_timecard")
    def weekly_timecard():
        employee = (request.args.get("employee") or "").strip()
        if not employee:
            return json_error("Employee name is required", 400)

        try:
            container.employee_service.require_active(employee)
            timecard = container.timecard_service.build_timecard(employee, request.args.get("weekEnding"))
            return jsonify(timecard.to_dict())
        except DomainError as e:
            return domain_error(e)
        except Exception as e:
            return unexpected_error(app.logger, e, "Failed to get timecard")

    @app.route("/export/csv", methods=["GET"], endpoint="export_timecard_csv")
    def export_timecard_csv():
        employee = (request.args.get("employee") or "").strip()
        if not employee:
            return json_error("Employee name is required", 400)

        try:
            container.employee_service.require_active(employee)
            svc = container.timecard_service
            week_ending = svc.resolve_week_ending(request.args.get("weekEnding"))

            content = svc.export_csv(employee, week_ending)
            filename = svc.csv_filename(employee, week_ending)
            app.logger.info("Exported timecard for %s, week ending %s", employee, format_iso_date(week_ending))
            # send_file adds an RFC 5987 filename* for names outside latin-1.
            return send_file(
                io.BytesIO(content.encode("utf-8")),
                mimetype="text/csv",
                as_attachment=True,
                download_name=filename,
            )
        except DomainError as e:
            return domain_error(e)
        except Exception as e:
            return unexpected_error(app.logger, e, "Failed to export CSV")
