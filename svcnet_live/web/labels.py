from __future__ import annotations
from flask import Blueprint, current_app, request

from ..errors import DuplicateLabelError
from .jsonio import json_response

labels_bp = Blueprint("labels", __name__)

def _store():
    return current_app.extensions["label_store"]

@labels_bp.get("/api/labels")
def list_labels():
    return json_response({"labels": [row.to_dict() for row in _store().all()]})

@labels_bp.post("/api/labels")
def add_label():
    body = request.get_json(silent=True) or {}
    label = body.get("label") if isinstance(body, dict) else None
    if not isinstance(label, str) or not label.strip():
        return json_response({"error": "Label is required and must be a non-empty string"}, 400)
    try:
        row = _store().add(label.strip())
    except DuplicateLabelError:
        return json_response({"error": "Label already exists"}, 409)
    current_app.logger.info("label added: %s", row.label)
    return json_response({"label": row.to_dict()}, 201)

@labels_bp.delete("/api/labels")
def delete_label():
    label_id = request.args.get("id")
    name = request.args.get("label")
    if not label_id and not name:
        return json_response({"error": "Either id or label parameter is required"}, 400)
    if label_id:
        try:
            ok = _store().remove(int(label_id))
        except ValueError:
            return json_response({"error": "id must be an integer"}, 400)
    else:
        ok = _store().remove_by_name(name)
    if not ok:
        return json_response({"error": "Label not found"}, 404)
    return json_response({"message": "Label deleted successfully"})
