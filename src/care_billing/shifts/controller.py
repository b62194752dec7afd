from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..core.constants import MANUAL_ENTRY_CATEGORY
from ..core.exceptions import ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def parse_cost(value):
    """Form/JSON cost value; non-numeric text is passed on for the allocator to reject."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return value
    return value


def register(app: Flask, container: Container) -> None:
    def _payload() -> dict:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}

    def _shift_fields(data: dict) -> dict:
        return {
            "shift_date": data.get("shift_date") or "",
            "start_time": data.get("start_time"),
            "end_time": data.get("end_time"),
            "category": data.get("category") or "",
            "manual_cost": parse_cost(data.get("cost")),
        }

    def _error(message: str, status: int):
        return jsonify({"success": False, "message": message}), status

    @app.route("/api/categories", methods=["GET"], endpoint="api_categories")
    def api_categories():
        try:
            categories = list(container.line_items_repo.list_categories())
        except Exception:
            logger.exception("Failed to load categories")
            return _error("System error while loading categories", 500)
        return jsonify({"categories": categories + [MANUAL_ENTRY_CATEGORY]})

    @app.route("/api/shifts/cost-breakdown", methods=["POST"], endpoint="api_shift_cost_breakdown")
    def api_shift_cost_breakdown():
        try:
            allocation = container.shift_service.quote(**_shift_fields(_payload()))
        except ValidationError as e:
            return _error(str(e), 400)
        except Exception:
            logger.exception("Failed to compute cost breakdown")
            return _error("System error while computing cost", 500)
        return jsonify(allocation.as_dict())

    @app.route("/api/shifts", methods=["POST"], endpoint="api_shift_create")
    def api_shift_create():
        data = _payload()
        try:
            saved = container.shift_service.create(
                carer_id=data.get("carer_id"),
                client_id=data.get("client_id"),
                **_shift_fields(data),
            )
        except ValidationError as e:
            return _error(str(e), 400)
        except Exception:
            logger.exception("Failed to add shift")
            return _error("Failed to add shift", 500)
        return jsonify({"success": True, "shift_id": saved.shift_id, "cost": saved.cost, **saved.allocation.as_dict()}), 201

    @app.route("/api/shifts/<int:shift_id>", methods=["PUT"], endpoint="api_shift_update")
    def api_shift_update(shift_id: int):
        data = _payload()
        try:
            saved = container.shift_service.update(
                shift_id=shift_id,
                carer_id=data.get("carer_id"),
                client_id=data.get("client_id"),
                **_shift_fields(data),
            )
        except ValidationError as e:
            return _error(str(e), 400)
        except Exception:
            logger.exception("Failed to update shift %s", shift_id)
            return _error("Failed to update shift", 500)
        return jsonify({"success": True, "shift_id": saved.shift_id, "cost": saved.cost, **saved.allocation.as_dict()})

    @app.route("/api/shifts/<int:shift_id>", methods=["DELETE"], endpoint="api_shift_delete")
    def api_shift_delete(shift_id: int):
        try:
            container.shift_service.delete(shift_id=shift_id)
        except ValidationError as e:
            return _error(str(e), 400)
        except Exception:
            logger.exception("Failed to delete shift %s", shift_id)
            return _error("Failed to delete shift", 500)
        return jsonify({"success": True})
