"""Pydantic base model shared by the configuration loaders."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    A base model that maps snake_case fields to camelCase keys.

    Chain spec documents spell their keys in camel case (`forkBlocks`,
    `badBlocks`), while the Python side keeps snake_case attributes.
    Both spellings are accepted on input, and `model_dump(by_alias=True)`
    writes the camel case form back out.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_default=True,
        arbitrary_types_allowed=True,
    )
