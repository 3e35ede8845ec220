"""
Vote tally service.

Owns the ``votes`` table: counts it on every read and appends one row per
accepted submission. Nothing here tracks who voted; the same caller may
vote any number of times.
"""
from typing import Any, Dict

from flask import current_app, g
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from ..extensions import db
from ..models.vote import Vote
from ..schemas.vote import VoteSubmitSchema

vote_submit_schema = VoteSubmitSchema()


class TallyServiceError(Exception):
    """Base class for tally service failures."""


class VoteValidationError(TallyServiceError):
    """``choice`` was missing or not one of the accepted values."""

    def __init__(self, errors: Dict[str, Any]):
        super().__init__("Validation error")
        self.errors = errors


class TallyStoreError(TallyServiceError):
    """The vote store could not be read or written."""


def get_tally() -> Dict[str, int]:
    """
    Count persisted votes per choice.
    Always returns both keys, zero when a choice has no votes yet.
    """
    try:
        rows = (
            db.session.query(
                Vote.choice.label("choice"),
                func.count(Vote.id).label("votes"),
            )
            .group_by(Vote.choice)
            .all()
        )
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.exception("DB error while counting votes")
        raise TallyStoreError("Failed to read votes") from e

    counts_map = {row.choice: int(row.votes) for row in rows}
    return {choice: counts_map.get(choice, 0) for choice in Vote.VALID_CHOICES}


def submit_vote(choice) -> Vote:
    """
    Validate ``choice`` and append one vote.

    Raises VoteValidationError before touching the database when the choice
    is rejected, and TallyStoreError when the insert fails.
    """
    payload = {} if choice is None else {"choice": choice}
    errors = vote_submit_schema.validate(payload)
    if errors:
        current_app.logger.info(
            "Vote rejected request_id=%s errors=%s", getattr(g, "request_id", None), errors
        )
        raise VoteValidationError(errors)

    vote = Vote(choice=choice)
    try:
        db.session.add(vote)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.exception("DB error while recording vote")
        raise TallyStoreError("Failed to record vote") from e

    current_app.logger.info(
        "Vote recorded id=%s choice=%s request_id=%s", vote.id, vote.choice, getattr(g, "request_id", None)
    )
    return vote


def _percentage(votes: int, total: int) -> int:
    # Whole percent, halves rounded up
    if total <= 0:
        return 0
    return (200 * votes + total) // (2 * total)


def tally_results(tally: Dict[str, int]) -> Dict[str, int]:
    total = tally[Vote.CHOICE_YES] + tally[Vote.CHOICE_NO]
    return {
        "yes": tally[Vote.CHOICE_YES],
        "no": tally[Vote.CHOICE_NO],
        "total": total,
        "yes_percentage": _percentage(tally[Vote.CHOICE_YES], total),
        "no_percentage": _percentage(tally[Vote.CHOICE_NO], total),
    }
