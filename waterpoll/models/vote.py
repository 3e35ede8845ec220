from datetime import datetime
from ..extensions import db

class Vote(db.Model):
    __tablename__ = "votes"

    CHOICE_YES = "yes"
    CHOICE_NO = "no"
    VALID_CHOICES = (CHOICE_YES, CHOICE_NO)

    id = db.Column(db.Integer, primary_key=True)

    # Append-only: rows are never updated or deleted by the app
    choice = db.Column(db.String(3), nullable=False, index=True)

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    __table_args__ = (
        db.CheckConstraint("choice IN ('yes', 'no')", name="ck_votes_choice"),
    )

    def __repr__(self) -> str:
        return f"<Vote id={self.id} choice={self.choice}>"
