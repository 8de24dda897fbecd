"""Shared schema config - camelCase on the wire, snake_case in Python."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    # Unknown fields are ignored (stripped), not rejected
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class ResponseModel(CamelModel):
    model_config = ConfigDict(from_attributes=True)
