from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.responses import error_response, system_error_response
from ..core.exceptions import DomainError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/settings", methods=["GET"], endpoint="api_settings")
    def api_settings():
        try:
            settings = container.settings_service.get_settings()
            return jsonify({"success": True, "settings": settings.to_dict() if settings else None})
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Loading settings failed")
            return system_error_response()

    @app.route("/api/settings", methods=["PUT"], endpoint="api_settings_update")
    def api_settings_update():
        data = request.get_json(silent=True) or {}
        try:
            settings = container.settings_service.update_settings(
                latitude=data.get("latitude"),
                longitude=data.get("longitude"),
                radius_m=data.get("radius_m"),
                work_start=data.get("work_start"),
                work_end=data.get("work_end"),
                late_tolerance_minutes=data.get("late_tolerance_minutes", 0),
            )
            return jsonify({"success": True, "message": "Settings saved", "settings": settings.to_dict()})
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Saving settings failed")
            return system_error_response()
