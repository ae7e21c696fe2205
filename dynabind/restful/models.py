from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional
from urllib.parse import quote

from pydantic import Field

from dynabind.errors import PropertyNotFoundError
from dynabind.runtime.resolver import PropertyResolver

from .schemas.base import BaseSchema


class ParameterLocation(str, Enum):
    PATH = "path"
    QUERY = "query"


class RestParameter(BaseSchema):
    name: str = Field(
        ...,
        description="Name of the parameter as sent to the remote service.",
        min_length=1,
        examples=["userId"],
    )
    location: ParameterLocation = Field(
        default=ParameterLocation.QUERY,
        description=(
            "Where the parameter goes. Query parameters are appended to the URL; "
            "path parameters are substituted through placeholders in the service's relative path."
        ),
    )
    source: Optional[str] = Field(
        default=None,
        description=(
            "Property path (or a single {placeholder}) on the context object that supplies the value. "
            "Defaults to the parameter name."
        ),
        examples=["user.id", "{userId}"],
    )

    def resolve_value(self, params: Any) -> Any:
        """Read this parameter's value from the context object."""
        path = self.source or self.name
        if path.startswith("{") or path.startswith("$("):
            found, value = PropertyResolver.try_resolve_single_property_value(params, path)
            if not found:
                raise PropertyNotFoundError(type(params), path)
            return value
        return PropertyResolver.get_property_value(params, path)


class RestService(BaseSchema):
    name: str = Field(
        ...,
        description="Service name, unique within its API.",
        min_length=1,
        examples=["todos", "posts"],
    )
    relative_path: str = Field(
        default="",
        description="Path relative to the API root. May contain {name} or $(name) placeholders.",
        examples=["todos/{id}"],
    )
    version: int = Field(default=1, ge=1, description="Service version.")
    parameters: List[RestParameter] = Field(default_factory=list, description="Declared request parameters.")
    post: bool = Field(
        default=False,
        description="Use POST (with the request content as JSON body) instead of GET.",
    )

    @property
    def method(self) -> str:
        return "POST" if self.post else "GET"

    def build_url(self, root_endpoint_uri: str, params: Any) -> str:
        """
        Join the API root and this service's relative path, filling path placeholders from ``params``.

        Each substituted value is percent-encoded as a single path segment, so a value
        such as ``"a/b"`` or ``"7?x=1"`` cannot add segments or a query string.
        """
        path = PropertyResolver.resolve_property_values(params, self.relative_path, escape=_quote_segment)
        if not root_endpoint_uri.endswith("/"):
            root_endpoint_uri += "/"
        return root_endpoint_uri + path.lstrip("/")

    def build_query(self, params: Any) -> Dict[str, str]:
        query: Dict[str, str] = {}
        for p in self.parameters:
            if p.location != ParameterLocation.QUERY:
                continue
            value = p.resolve_value(params)
            if value is None:
                continue
            query[p.name] = str(value).lower() if isinstance(value, bool) else str(value)
        return query


class RestApi(BaseSchema):
    name: str = Field(
        ...,
        description="Name commands use to refer to this API.",
        min_length=1,
        examples=["jsonplaceholder"],
    )
    root_endpoint_uri: str = Field(
        ...,
        description="Base URI every service path is resolved against.",
        examples=["https://jsonplaceholder.typicode.com"],
    )
    services: List[RestService] = Field(default_factory=list, description="Services exposed by the API.")

    def get_service_by_name(self, service_name: str) -> Optional[RestService]:
        for svc in self.services:
            if svc.name == service_name:
                return svc
        return None


def _quote_segment(value: str) -> str:
    return quote(value, safe="")
