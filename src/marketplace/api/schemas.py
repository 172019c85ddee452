"""Shared pydantic building blocks for the HTTP contract.

Bodies are exchanged in camelCase (``productId``, ``totalAmount``); Python
code keeps snake_case attribute names.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(CamelModel):
    msg: str
