from __future__ import annotations

import logging
from datetime import date

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..core.exceptions import ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _optional_date(name: str):
        value = request.args.get(name)
        return parse_iso_date(value) if value else None

    def _int_list(name: str) -> list[int]:
        out: list[int] = []
        for raw in request.args.getlist(name):
            for part in raw.split(","):
                part = part.strip()
                if not part.isdigit():
                    raise ValidationError(f"{name} is invalid")
                out.append(int(part))
        return out

    @app.route("/api/invoices/preview", methods=["GET"], endpoint="api_invoice_preview")
    def api_invoice_preview():
        try:
            client_id_s = request.args.get("client_id") or ""
            if not client_id_s.isdigit():
                raise ValidationError("Client is required")

            invoice = container.invoice_service.build_invoice(
                carer_ids=_int_list("carer_id"),
                client_id=int(client_id_s),
                invoice_number=request.args.get("invoice_number") or "",
                invoice_date=_optional_date("invoice_date") or date.today(),
                date_from=_optional_date("date_from"),
                date_to=_optional_date("date_to"),
            )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("Failed to build invoice")
            return jsonify({"success": False, "message": "System error while building invoice"}), 500

        return jsonify(invoice.as_dict())
