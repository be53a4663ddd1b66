"""Base models for use case requests and responses."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class UseCaseModel(BaseModel):
    """Base for use case requests and responses.

    Serialized by alias, so responses returned from routes are camelCase on
    the wire while Python code keeps snake_case field names.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
