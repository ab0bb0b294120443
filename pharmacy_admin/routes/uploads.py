import re
from pathlib import Path

from flask import Blueprint, current_app, jsonify, request
from werkzeug.utils import secure_filename

from ..exceptions import UploadError
from ..storage.repository import identities

bp = Blueprint("uploads_api", __name__)

_UNSAFE = re.compile(r"[^a-zA-Z0-9-_]")


def upload_filename(original: str) -> str:
    """``photo 1.png`` -> ``photo_1-1700000000000.png``"""
    safe = Path(secure_filename(original) or "upload")
    stem = _UNSAFE.sub("_", safe.stem)
    return f"{stem}-{identities.next_millis()}{safe.suffix}"


@bp.post("/upload")
def upload_image():
    f = request.files.get("image")
    if not f or not f.filename:
        raise UploadError("No file uploaded")

    filename = upload_filename(f.filename)
    uploads_dir = Path(current_app.config["UPLOADS_DIR"])
    try:
        uploads_dir.mkdir(parents=True, exist_ok=True)
        f.save(uploads_dir / filename)
    except OSError:
        current_app.logger.exception("Upload error")
        return jsonify({"error": "Upload failed"}), 500

    url = f"{request.host_url}uploads/{filename}"
    return jsonify({"filename": filename, "url": url})
