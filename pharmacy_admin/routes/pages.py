from pathlib import Path

from flask import Blueprint, abort, current_app, send_from_directory

bp = Blueprint("pages", __name__)

# never answered with the storefront's index.html
RESERVED_PREFIXES = ("api", "uploads", "admin", "image")


def _hidden(path: str) -> bool:
    return any(part.startswith(".") for part in Path(path).parts)


def _send(directory, path: str, cached: bool = False):
    if _hidden(path):
        abort(404)
    max_age = current_app.config["STATIC_MAX_AGE"] if cached else None
    return send_from_directory(directory, path, max_age=max_age)


@bp.get("/uploads/<path:filename>")
def uploaded_file(filename):
    return _send(current_app.config["UPLOADS_DIR"], filename, cached=True)


@bp.get("/image/<path:filename>")
def image_file(filename):
    images_dir = Path(current_app.config["IMAGES_DIR"])
    if not images_dir.is_dir():
        abort(404)
    return _send(images_dir, filename, cached=True)


@bp.get("/admin/", defaults={"path": "index.html"})
@bp.get("/admin/<path:path>")
def admin(path):
    admin_dir = Path(current_app.config["ADMIN_DIR"])
    if not admin_dir.is_dir():
        abort(404)
    if (admin_dir / path).is_dir():
        path = f"{path.rstrip('/')}/index.html"
    return _send(admin_dir, path)


@bp.get("/", defaults={"path": ""})
@bp.get("/<path:path>")
def frontend(path):
    if path.split("/", 1)[0] in RESERVED_PREFIXES:
        abort(404)
    frontend_dir = Path(current_app.config["FRONTEND_DIR"])
    data_dir = Path(current_app.config["DATA_DIR"]).resolve()
    target = (frontend_dir / path).resolve()
    if path and not _hidden(path) and target.is_file() and data_dir not in target.parents:
        return send_from_directory(frontend_dir, path)
    # SPA fallback
    if (frontend_dir / "index.html").is_file():
        return send_from_directory(frontend_dir, "index.html")
    abort(404)
