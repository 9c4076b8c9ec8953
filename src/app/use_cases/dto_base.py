from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Response DTO serialized with camelCase keys (createdAt, lastLogin, ...)"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
