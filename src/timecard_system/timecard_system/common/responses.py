from __future__ import annotations

import logging

from flask import current_app, jsonify

from ..core.exceptions import DomainError


def json_error(message: str, status: int):
    return jsonify({"error": message}), status


def domain_error(e: DomainError):
    """JSON response for a business rule violation, using the error's HTTP status."""
    if e.status_code >= 500:
        current_app.logger.error("%s: %s", type(e).__name__, e)
    return json_error(str(e), e.status_code)


def unexpected_error(logger: logging.Logger, e: Exception, message: str):
    logger.exception("%s: %s", message, e)
    return json_error(message, 500)
