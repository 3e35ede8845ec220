from flask import Blueprint
from flasgger import swag_from

from ...schemas.results import TallyResultsSchema
from ...services.tally import get_tally, tally_results

tally_bp = Blueprint("tally", __name__)
tally_results_schema = TallyResultsSchema()


@tally_bp.get("/tally")
@swag_from({
    "tags": ["Poll"],
    "summary": "Current vote counts with display percentages",
    "description": "Counted from all stored votes on every request.",
    "responses": {
        200: {"description": "Tally", "schema": {"$ref": "#/definitions/Tally"}},
        500: {"description": "Server error", "schema": {"$ref": "#/definitions/ErrorResponse"}},
    },
})
def read_tally():
    return tally_results_schema.dump(tally_results(get_tally())), 200
