"""Base model for declarative REST API definitions.

API definition files are written in camelCase (``rootEndpointUri``,
``relativePath``) while the models expose snake_case attributes. Unknown keys
in a definition file are rejected so a misspelt field fails at load time
instead of silently falling back to its default.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Base for ``RestApi``, ``RestService`` and ``RestParameter``.

    Accepts either the camelCase key from a definition file or the snake_case
    field name from Python code, and dumps camelCase with ``by_alias=True``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )
