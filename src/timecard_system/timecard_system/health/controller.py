from __future__ import annotations

from flask import Flask, jsonify

from ..common.responses import domain_error, json_error, unexpected_error
from ..container import Container
from ..core.exceptions import DomainError
from ..database.bootstrap import missing_tables


def register(app: Flask, container: Container) -> None:
    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        """Connectivity check: can we reach the store and is the schema there?"""
        try:
            tables = container.list_tables()
        except DomainError as e:
            return domain_error(e)
        except Exception as e:
            return unexpected_error(app.logger, e, "Health check failed")

        missing = missing_tables(tables)
        if missing:
            return json_error(
                f"Database not set up. Missing tables: {', '.join(missing)}. Run scripts/init_db.py.",
                500,
            )
        return jsonify({"success": True, "tables": sorted(tables)})
