from flask import Blueprint, jsonify, request

from ..extensions import REPOSITORIES

bp = Blueprint("collections_api", __name__)

COLLECTION = "<any(products, offers, categories, orders, pages):collection>"
# orders are never deleted; DELETE on them falls through to 405
DELETABLE = "<any(products, offers, categories, pages):collection>"


def _body() -> dict:
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


@bp.get(f"/{COLLECTION}")
def list_records(collection):
    return jsonify(REPOSITORIES[collection].list())


@bp.get(f"/{COLLECTION}/<key>")
def get_record(collection, key):
    return jsonify(REPOSITORIES[collection].get(key))


@bp.post(f"/{COLLECTION}")
def create_record(collection):
    record = REPOSITORIES[collection].create(_body())
    return jsonify(record), 201


@bp.put(f"/{COLLECTION}/<key>")
def update_record(collection, key):
    return jsonify(REPOSITORIES[collection].update(key, _body()))


@bp.delete(f"/{DELETABLE}/<key>")
def delete_record(collection, key):
    return jsonify(REPOSITORIES[collection].delete(key))
