from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.responses import error_response, system_error_response
from ..core.exceptions import DomainError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/anomaly/<int:employee_id>", methods=["POST"], endpoint="api_anomaly")
    def api_anomaly(employee_id: int):
        try:
            result = container.anomaly_service.analyze(employee_id)
            return jsonify({"success": result.error is None, **result.to_dict()})
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Anomaly analysis request failed")
            return system_error_response()
