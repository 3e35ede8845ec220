from flask import Blueprint, request, current_app, render_template, redirect, url_for, flash
from flasgger import swag_from

from ... import content
from ...schemas.vote import VoteReceiptSchema
from ...services.tally import VoteValidationError, get_tally, submit_vote, tally_results

page_bp = Blueprint("page", __name__)
vote_receipt_schema = VoteReceiptSchema()


def _has_voted_cookie() -> bool:
    return request.cookies.get(current_app.config["HAS_VOTED_COOKIE"]) == "1"


def _mark_has_voted(response):
    response.set_cookie(
        current_app.config["HAS_VOTED_COOKIE"],
        "1",
        max_age=current_app.config["HAS_VOTED_COOKIE_MAX_AGE"],
        samesite="Lax",
    )
    return response


@page_bp.get("/")
def index():
    tally = get_tally()
    page_data = {
        "stats": tally,
        "has_voted": _has_voted_cookie(),
        "history": content.HISTORY_CHART,
    }
    return render_template(
        "water_situation.html",
        page_data=page_data,
        results=tally_results(tally),
        content=content,
    )


@page_bp.post("/vote")
@swag_from({
    "tags": ["Poll"],
    "summary": "Cast a vote (anonymous, not deduplicated)",
    "description": (
        "Accepts JSON or form-encoded `choice`.\n"
        "- JSON: 201 receipt, 422 on an invalid choice.\n"
        "- Form: 303 back to the page with a flashed message."
    ),
    "consumes": ["application/json", "application/x-www-form-urlencoded"],
    "parameters": [{
        "in": "body",
        "name": "body",
        "required": True,
        "schema": {
            "type": "object",
            "properties": {"choice": {"type": "string", "enum": ["yes", "no"]}},
            "required": ["choice"],
        },
    }],
    "responses": {
        201: {"description": "Vote recorded", "schema": {"$ref": "#/definitions/VoteReceipt"}},
        303: {"description": "Form submission redirected back to the page"},
        422: {"description": "Validation error", "schema": {"$ref": "#/definitions/ErrorResponse"}},
        500: {"description": "Server error", "schema": {"$ref": "#/definitions/ErrorResponse"}},
    },
})
def vote():
    if request.is_json:
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            payload = {}

        # VoteValidationError / TallyStoreError are rendered by the app error handlers
        recorded = submit_vote(payload.get("choice"))
        body = vote_receipt_schema.dump({"message": "Vote recorded", "choice": recorded.choice})
        return _mark_has_voted(current_app.make_response((body, 201)))

    back = url_for("page.index", _anchor="voting-section")
    try:
        submit_vote(request.form.get("choice"))
    except VoteValidationError:
        flash(content.VOTE_REJECTED_MESSAGE, "error")
        return redirect(back, code=303)

    flash(content.VOTE_SUCCESS_MESSAGE, "success")
    return _mark_has_voted(redirect(back, code=303))
