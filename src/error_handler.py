"""Error types and envelope rendering for the cheque and loan APIs."""
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)

ERR_NOT_FOUND = "ERR_NOT_FOUND"
ERR_VALIDATION = "ERR_VALIDATION"
ERR_UPLOAD_FAILED = "ERR_UPLOAD_FAILED"
ERR_UPSTREAM_UNAVAILABLE = "ERR_UPSTREAM_UNAVAILABLE"
ERR_INTERNAL = "ERR_INTERNAL"


class ApiError(Exception):
    """Failure surfaced to API callers as ``{"error": {code, message, module, retriable?}}``."""

    def __init__(
        self,
        code: str,
        message: str,
        *,
        status_code: int,
        module: str = "cheques",
        retriable: Optional[bool] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code
        self.module = module
        self.retriable = retriable

    def to_envelope(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"code": self.code, "message": self.message, "module": self.module}
        if self.retriable is not None:
            body["retriable"] = self.retriable
        return {"error": body}


def not_found(message: str = "Request not found", module: str = "cheques") -> ApiError:
    return ApiError(ERR_NOT_FOUND, message, status_code=404, module=module)


def validation_error(message: str, module: str = "cheques") -> ApiError:
    return ApiError(ERR_VALIDATION, message, status_code=400, module=module)


# Errors that can be forced through the X-Error-Force-Code header.
_FORCED_ERRORS: Dict[str, Dict[str, Any]] = {
    ERR_UPLOAD_FAILED: {"message": "Failed to upload file", "status_code": 500},
    ERR_UPSTREAM_UNAVAILABLE: {
        "message": "Bank service is currently unavailable",
        "status_code": 503,
        "retriable": True,
    },
    ERR_VALIDATION: {"message": "Validation failed (forced)", "status_code": 400},
}


def forced_error(code: Optional[str], module: str = "cheques") -> Optional[ApiError]:
    """Return the ApiError for an injected code, or None when the code is absent or unknown."""
    key = (code or "").strip().upper()
    if not key:
        return None
    entry = _FORCED_ERRORS.get(key)
    if entry is None:
        logger.warning("Ignoring unknown forced error code: %s", key)
        return None
    return ApiError(key, module=module, **entry)


class ErrorHandler:
    def handle_exception(self, exc: Exception, context: Dict[str, Any] = None) -> Dict[str, Any]:
        logger.error("Unhandled exception while serving request: %s", exc, exc_info=True)
        return {
            "error": {
                "code": ERR_INTERNAL,
                "message": "An internal error occurred while processing your request. Please try again later.",
                "module": (context or {}).get("module", "api"),
            }
        }
