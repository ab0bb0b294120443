from pathlib import Path
from dataclasses import dataclass
import json
import logging
import os
import threading
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

logger = logging.getLogger(__name__)

OK = "ok"
MISSING = "missing"
CORRUPT = "corrupt"


@dataclass(frozen=True)
class Document:
    """Result of reading one collection file.

    ``status`` tells a missing file apart from one that exists but could not
    be read or decoded. ``data`` is only meaningful when ``status == "ok"``.
    """

    name: str
    status: str
    data: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == OK


class JsonStore:
    """JSON-on-disk documents: one file per collection, rewritten whole on save."""

    def __init__(self, data_dir: Optional[Path] = None):
        self.data_dir: Optional[Path] = None
        self._locks: Dict[str, threading.RLock] = {}
        self._locks_guard = threading.Lock()
        if data_dir is not None:
            self.configure(data_dir)

    def init_app(self, app):
        self.configure(app.config["DATA_DIR"])
        app.extensions["json_store"] = self

    def configure(self, data_dir: Path):
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def _path(self, collection: str) -> Path:
        if self.data_dir is None:
            raise RuntimeError("JsonStore has no data directory; call init_app() first")
        return self.data_dir / f"{collection}.json"

    def exists(self, collection: str) -> bool:
        return self._path(collection).exists()

    @contextmanager
    def lock(self, collection: str) -> Iterator[None]:
        """Serialize read-modify-write cycles on one collection."""
        with self._locks_guard:
            lock = self._locks.setdefault(collection, threading.RLock())
        with lock:
            yield

    def load_document(self, collection: str) -> Document:
        p = self._path(collection)
        if not p.exists():
            return Document(collection, MISSING)
        try:
            with p.open("r", encoding="utf-8") as f:
                return Document(collection, OK, json.load(f))
        except (OSError, ValueError) as e:
            logger.error("Error reading %s: %s", p.name, e)
            return Document(collection, CORRUPT, error=str(e))

    def load(self, collection: str, default: Any = None) -> Any:
        doc = self.load_document(collection)
        return doc.data if doc.ok else default

    def save(self, collection: str, obj: Any) -> bool:
        p = self._path(collection)
        tmp = p.with_name(f"{p.name}.tmp")
        try:
            with tmp.open("w", encoding="utf-8") as f:
                json.dump(obj, f, indent=2, ensure_ascii=False)
            os.replace(tmp, p)
        except (OSError, TypeError, ValueError) as e:
            logger.error("Error writing %s: %s", p.name, e)
            tmp.unlink(missing_ok=True)
            return False
        return True
