from marshmallow import Schema, fields, validate

from ..models.vote import Vote

class VoteSubmitSchema(Schema):
    # Exact, case-sensitive match: "Yes" and " yes" are rejected
    choice = fields.Str(required=True, validate=validate.OneOf(Vote.VALID_CHOICES))

class VoteReceiptSchema(Schema):
    message = fields.Str(required=True)
    choice = fields.Str(required=True)
