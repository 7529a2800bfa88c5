"""Base model for pylistserver wire payloads.

Every JSON body the API reads or writes goes through :class:`ApiModel`,
which maps the camelCase keys used by the browser client
(``hasMore``, ``newSortedIds``) to snake_case fields.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for request and response bodies.

    Handles:
    * camelCase ↔ snake_case via ``alias_generator=to_camel``
    * construction by field name as well as by alias
    * unknown keys are ignored, like the browser client expects
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def to_json(self) -> str:
        """Serialize with wire (camelCase) keys."""
        return self.model_dump_json(by_alias=True)
