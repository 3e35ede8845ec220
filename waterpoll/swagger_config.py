def swagger_template(app=None):
    title = "Water Situation Poll API"
    version = "1.0.0"

    if app:
        title = app.config.get("SWAGGER_TITLE", title)
        version = app.config.get("SWAGGER_VERSION", version)

    return {
        "swagger": "2.0",
        "info": {
            "title": title,
            "version": version,
            "description": "Yes/no poll on urgent action for the water crisis. Votes are anonymous and not deduplicated.",
        },
        "definitions": {
            "Tally": {
                "type": "object",
                "properties": {
                    "yes": {"type": "integer", "example": 12},
                    "no": {"type": "integer", "example": 3},
                    "total": {"type": "integer", "example": 15},
                    "yes_percentage": {"type": "integer", "example": 80},
                    "no_percentage": {"type": "integer", "example": 20},
                }
            },
            "VoteReceipt": {
                "type": "object",
                "properties": {
                    "message": {"type": "string", "example": "Vote recorded"},
                    "choice": {"type": "string", "enum": ["yes", "no"]},
                }
            },
            "ErrorResponse": {
                "type": "object",
                "properties": {
                    "success": {"type": "boolean", "example": False},
                    "error": {
                        "type": "object",
                        "properties": {
                            "code": {"type": "string", "example": "VALIDATION_ERROR"},
                            "message": {"type": "string", "example": "Validation error"},
                            "details": {"type": "object"}
                        }
                    },
                    "request_id": {"type": "string"}
                }
            }
        }
    }
