from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_hhmm, parse_iso_date
from ..common.responses import error_response, system_error_response
from ..common.validators import require_int
from ..core.exceptions import CollaboratorError, DomainError, ValidationError
from ..geofence.evaluator import Coordinates
from ..container import Container

logger = logging.getLogger(__name__)

_GEOLOCATION_MESSAGES = {
    "denied": "Location permission was denied. Allow location access to record attendance.",
    "unavailable": "Location information is unavailable.",
    "timeout": "Timed out while reading your location.",
}


def _position_from(data: dict) -> Coordinates:
    """Coordinates from a request body, or the device's geolocation failure."""
    failure = data.get("geolocation_error")
    if failure:
        message = data.get("message") or _GEOLOCATION_MESSAGES.get(str(failure), "Unable to read your location.")
        raise CollaboratorError("geolocation", message)
    return Coordinates.parse(data.get("latitude"), data.get("longitude"))


def register(app: Flask, container: Container) -> None:
    def _body() -> dict:
        return request.get_json(silent=True) or {}

    @app.route("/api/attendance/check-in", methods=["POST"], endpoint="api_check_in")
    def api_check_in():
        data = _body()
        try:
            employee_id = require_int(data.get("employee_id"), "Employee")
            result = container.attendance_service.request_check_in(
                employee_id,
                position=_position_from(data),
                photo_url=data.get("photo_url"),
            )
            return jsonify(
                {
                    "success": True,
                    "message": f"Check-in recorded ({result.work_log.status.value})",
                    "work_log": result.work_log.to_dict(),
                    "distance_m": round(result.geofence.distance_m, 1),
                }
            )
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Check-in failed")
            return system_error_response("System error while checking in")

    @app.route("/api/attendance/check-out", methods=["POST"], endpoint="api_check_out")
    def api_check_out():
        data = _body()
        try:
            employee_id = require_int(data.get("employee_id"), "Employee")
            result = container.attendance_service.request_check_out(
                employee_id,
                position=_position_from(data),
                photo_url=data.get("photo_url"),
            )
            return jsonify(
                {
                    "success": True,
                    "message": "Check-out recorded",
                    "early": result.early,
                    "work_log": result.work_log.to_dict(),
                    "distance_m": round(result.geofence.distance_m, 1),
                }
            )
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Check-out failed")
            return system_error_response("System error while checking out")

    @app.route("/api/attendance/today/<int:employee_id>", methods=["GET"], endpoint="api_today_record")
    def api_today_record(employee_id: int):
        try:
            record = container.attendance_service.get_today_record(employee_id)
            return jsonify(
                {
                    "success": True,
                    "state": record.state.value if record else "no-record",
                    "work_log": record.to_dict() if record else None,
                }
            )
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Loading today's record failed")
            return system_error_response()

    @app.route("/api/attendance/history/<int:employee_id>", methods=["GET"], endpoint="api_history")
    def api_history(employee_id: int):
        try:
            limit = require_int(request.args.get("limit", container.history_limit), "Limit", minimum=1)
            logs = container.attendance_service.get_history(employee_id, limit=limit)
            return jsonify({"success": True, "work_logs": [log.to_dict() for log in logs]})
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Loading history failed")
            return system_error_response()

    @app.route("/api/leave", methods=["POST"], endpoint="api_leave_request")
    def api_leave_request():
        data = _body()
        try:
            employee_id = require_int(data.get("employee_id"), "Employee")
            work_date = None
            if data.get("date"):
                try:
                    work_date = parse_iso_date(str(data["date"]))
                except ValueError:
                    raise ValidationError("Invalid date (YYYY-MM-DD)")
            record = container.attendance_service.request_leave(
                employee_id,
                leave_type=data.get("leave_type", ""),
                note=data.get("note") or "",
                work_date=work_date,
            )
            return jsonify({"success": True, "message": "Leave request submitted", "work_log": record.to_dict()}), 201
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Leave request failed")
            return system_error_response()

    @app.route("/api/worklogs/<int:work_log_id>/leave-decision", methods=["POST"], endpoint="api_leave_decision")
    def api_leave_decision(work_log_id: int):
        data = _body()
        try:
            record = container.attendance_service.decide_leave(work_log_id, data.get("decision", ""))
            return jsonify({"success": True, "message": "Leave request updated", "work_log": record.to_dict()})
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Leave decision failed")
            return system_error_response()

    @app.route("/api/worklogs/<int:work_log_id>/correction", methods=["POST"], endpoint="api_correction")
    def api_correction(work_log_id: int):
        data = _body()
        try:
            try:
                check_out_time = parse_hhmm(data.get("check_out_time") or "")
            except ValueError:
                raise ValidationError("Invalid time (HH:MM)")
            record = container.attendance_service.correct_check_out(
                work_log_id,
                check_out_time=check_out_time,
                note=data.get("note"),
            )
            return jsonify({"success": True, "message": "Check-out corrected", "work_log": record.to_dict()})
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Correction failed")
            return system_error_response()

    @app.route("/api/worklogs", methods=["DELETE"], endpoint="api_reset_activity")
    def api_reset_activity():
        try:
            deleted = container.attendance_service.reset_activity()
            return jsonify({"success": True, "message": f"{deleted} work logs deleted", "deleted": deleted})
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Activity reset failed")
            return system_error_response()
