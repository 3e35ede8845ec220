from flask import jsonify, g, current_app
from werkzeug.exceptions import HTTPException

from .services.tally import VoteValidationError, TallyStoreError

def _payload(code: str, message: str, details=None, status=400):
    return (
        jsonify({
            "success": False,
            "error": {
                "code": code,
                "message": message,
                "details": details or None,
            },
            "request_id": getattr(g, "request_id", None),
        }),
        status,
    )

def register_error_handlers(app):
    @app.errorhandler(VoteValidationError)
    def handle_vote_validation(e: VoteValidationError):
        return _payload("VALIDATION_ERROR", "Validation error", details=e.errors, status=422)

    @app.errorhandler(TallyStoreError)
    def handle_store_error(_):
        # Already logged with traceback where it was raised
        return _payload("INTERNAL_SERVER_ERROR", "An unexpected error occurred", status=500)

    # Generic HTTP errors (404, 405, ...)
    @app.errorhandler(HTTPException)
    def handle_http_exception(e: HTTPException):
        desc = e.description

        # If we pass structured error info via abort(description=dict)
        if isinstance(desc, dict):
            code = desc.get("code") or e.name.replace(" ", "_").upper()
            message = desc.get("message") or e.name
            details = desc.get("errors") or desc.get("details")
            return _payload(code=code, message=message, details=details, status=e.code or 400)

        return _payload(
            code=e.name.replace(" ", "_").upper(),
            message=desc or e.name,
            details=None,
            status=e.code or 400
        )

    @app.errorhandler(404)
    def handle_404(_):
        return _payload("NOT_FOUND", "Resource not found", status=404)

    @app.errorhandler(500)
    def handle_500(e):
        current_app.logger.error(
            "Unhandled exception request_id=%s: %s", getattr(g, "request_id", None), getattr(e, "original_exception", e)
        )
        # Don't leak internals
        return _payload("INTERNAL_SERVER_ERROR", "An unexpected error occurred", status=500)
