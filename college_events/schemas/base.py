# college_events/schemas/base.py
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class CommandModel(CamelModel):
    """Request body whose fields are checked by the service layer, not by pydantic.

    Every field arrives as optional text so that blank or missing values can be
    reported together with the field names the client used.
    """

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        coerce_numbers_to_str = True
        extra = "ignore"
