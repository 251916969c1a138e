# backend/spotbnb/schemas/commons.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    # JSON は camelCase（ownerId, startDate ...）、Python 側は snake_case
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class MessageOut(BaseModel):
    message: str
