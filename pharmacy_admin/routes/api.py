from flask import Blueprint, jsonify, request

from ..extensions import products, orders, settings
from ..services.statistics import compute_statistics

bp = Blueprint("api", __name__)


@bp.get("/health")
def health():
    return jsonify({"status": "ok", "message": "Pharmacy Admin API is running"})


@bp.get("/settings")
def get_settings():
    return jsonify(settings.get())


@bp.put("/settings")
def put_settings():
    body = request.get_json(silent=True)
    # full replacement, the stored object is whatever the admin sent
    return jsonify(settings.put(body if body is not None else {}))


@bp.get("/statistics")
def statistics():
    return jsonify(compute_statistics(products.list(), orders.list()))
