from marshmallow import fields

from ..extensions import ma

class TallySchema(ma.Schema):
    yes = fields.Int(required=True)
    no = fields.Int(required=True)

class TallyResultsSchema(TallySchema):
    total = fields.Int(required=True)
    yes_percentage = fields.Int(required=True)
    no_percentage = fields.Int(required=True)
