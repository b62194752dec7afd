from __future__ import annotations

import csv
import io
import logging
from datetime import date

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..core.exceptions import ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _range() -> tuple[date, date]:
        today = date.today()
        start_s = request.args.get("start") or today.replace(day=1).strftime("%Y-%m-%d")
        end_s = request.args.get("end") or today.strftime("%Y-%m-%d")
        return parse_iso_date(start_s), parse_iso_date(end_s)

    def _build(start: date, end: date):
        carer_id_s = request.args.get("carer_id")
        return container.report_service.build_report(
            start=start,
            end=end,
            carer_id=int(carer_id_s) if carer_id_s and carer_id_s.isdigit() else None,
            manual_entry_code=request.args.get("manual_entry_code") or None,
        )

    def _error(message: str, status: int):
        return jsonify({"success": False, "message": message}), status

    def _write_line_items_csv(*, report, filename: str):
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=["category", "code", "description", "hours", "cost"])
        writer.writeheader()
        for row in report.line_items:
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/reports", methods=["GET"], endpoint="api_reports")
    def api_reports():
        try:
            start, end = _range()
            report = _build(start, end)
        except ValidationError as e:
            return _error(str(e), 400)
        except Exception:
            logger.exception("Failed to build report")
            return _error("System error while building report", 500)

        return jsonify(
            {
                "carers": report.carers,
                "line_items": report.line_items,
                "categories": report.categories,
                "total_hours": report.total_hours,
                "total_cost": report.total_cost,
            }
        )

    @app.route("/api/reports/line-items.csv", methods=["GET"], endpoint="api_reports_line_items_csv")
    def api_reports_line_items_csv():
        try:
            start, end = _range()
            report = _build(start, end)
        except ValidationError as e:
            return _error(str(e), 400)
        except Exception:
            logger.exception("Failed to export report")
            return _error("System error while exporting report", 500)

        filename = f"line_items_{start.strftime('%Y%m%d')}_{end.strftime('%Y%m%d')}.csv"
        return _write_line_items_csv(report=report, filename=filename)
