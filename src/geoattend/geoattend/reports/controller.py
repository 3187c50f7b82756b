from __future__ import annotations

import csv
import io
import logging
from dataclasses import fields

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_iso_date, parse_iso_date
from ..common.responses import error_response, system_error_response
from ..core.enums import ReportKind
from ..core.exceptions import DomainError, ValidationError
from ..container import Container
from .model import LogRow, RangeReport, RecapRow, WorkHoursRow

logger = logging.getLogger(__name__)

_ROW_TYPES = {
    ReportKind.RECAP: RecapRow,
    ReportKind.LATENESS: LogRow,
    ReportKind.WORK_HOURS: WorkHoursRow,
    ReportKind.LEAVE: LogRow,
}


def register(app: Flask, container: Container) -> None:
    def _parse_date(value: str):
        try:
            return parse_iso_date(value)
        except ValueError:
            raise ValidationError("Invalid date (YYYY-MM-DD)")

    def _load_report(kind: str) -> RangeReport:
        start_default, end_default = container.report_service.default_period()
        start_s = request.args.get("start")
        end_s = request.args.get("end")
        start = _parse_date(start_s) if start_s else start_default
        end = _parse_date(end_s) if end_s else (end_default if not start_s else None)
        return container.report_service.build_report(kind, start=start, end=end)

    def _write_report_csv(*, report: RangeReport, filename: str):
        """Write report rows to a CSV download (UTF-8 with BOM for spreadsheets)."""

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=[f.name for f in fields(_ROW_TYPES[report.kind])])
        writer.writeheader()
        for row in report.row_dicts():
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/dashboard", methods=["GET"], endpoint="api_dashboard")
    def api_dashboard():
        try:
            data = container.report_service.build_dashboard()
            return jsonify({"success": True, **data.to_dict()})
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Building dashboard failed")
            return system_error_response()

    @app.route("/api/reports/<kind>", methods=["GET"], endpoint="api_report")
    def api_report(kind: str):
        # "<kind>.csv" downloads the same rows as a spreadsheet-friendly file
        as_csv = kind.endswith(".csv")
        if as_csv:
            kind = kind[: -len(".csv")]
        try:
            report = _load_report(kind)
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Building %s report failed", kind)
            return system_error_response()

        if as_csv:
            filename = f"{report.kind.value}_{format_iso_date(report.start)}_{format_iso_date(report.end)}.csv"
            return _write_report_csv(report=report, filename=filename)
        return jsonify({"success": True, **report.to_dict()})
