"""
Errors raised by the storage layer and translated to JSON responses.

Each error carries the client-facing message and the HTTP status it maps to;
the handlers registered in ``create_app`` turn them into ``{"error": message}``.
"""
from typing import Any, Dict, Optional


class StoreError(Exception):
    status_code = 500

    def __init__(self, message: str = "An unexpected error occurred", context: Optional[Dict[str, Any]] = None):
        self.message = message
        # logged, never returned to the client
        self.context = context or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message}


class NotFoundError(StoreError):
    """The identity is not present in the collection."""

    status_code = 404

    def __init__(self, label: str, key: Optional[str] = None):
        super().__init__(f"{label} not found", context={"key": key})


class ConflictError(StoreError):
    """A create would duplicate an existing identity."""

    status_code = 400


class PersistenceError(StoreError):
    """Writing the collection file failed; the mutation was discarded."""

    status_code = 500


class UploadError(StoreError):
    status_code = 400


class InvalidRecordError(StoreError):
    """The request body cannot form a record, e.g. an identity that is not a string or number."""

    status_code = 400


class NotAllowedError(StoreError):
    status_code = 405
