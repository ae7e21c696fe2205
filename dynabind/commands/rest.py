from __future__ import annotations

"""Command that calls a declared REST service and binds its payloads to the context.

``CallRestServiceCommand`` is configured with four strings:

- ``api_name`` / ``service_name`` select the service to call,
- ``request_content_property_name`` names the context property holding the
  request body (empty: no body),
- ``response_content_property_name`` names the context property receiving the
  parsed JSON response (empty: the body is discarded).

The same ``RestApiService`` can serve context objects of any shape purely
through this configuration.
"""

import json
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from dynabind.capabilities.registry import ServiceRegistry
from dynabind.core.logging_config import get_logger
from dynabind.errors import CapabilityNotFoundError, ResponseContentError
from dynabind.restful.service import RestApiService
from dynabind.runtime.resolver import PropertyResolver

from .base import Command, CommandResult
from .set_property import SetPropertyValueCommand

logger = get_logger(__name__)


@dataclass(frozen=True)
class HttpCommandResult(CommandResult):
    """``CommandResult`` that also carries the raw HTTP response."""

    response: Optional[httpx.Response] = None

    @classmethod
    def from_response(cls, response: httpx.Response) -> "HttpCommandResult":
        return cls(succeeded=response.is_success, diagnostic=response.reason_phrase, response=response)

    @property
    def status_code(self) -> Optional[int]:
        return self.response.status_code if self.response is not None else None

    @property
    def headers(self) -> Optional[httpx.Headers]:
        return self.response.headers if self.response is not None else None

    @property
    def content_as_string(self) -> Optional[str]:
        """Response text for successful responses, else None."""
        if self.response is None or not self.succeeded:
            return None
        return self.response.text

    @property
    def content_as_json(self) -> Any:
        """Parsed JSON body for successful responses, else None."""
        if self.response is None or not self.succeeded:
            return None
        return parse_response_content(self.response)


def parse_response_content(response: httpx.Response) -> Any:
    """
    Parse a response body as JSON.

    Raises:
        ResponseContentError: If the body is not valid JSON.
    """
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ResponseContentError(
            f"Response content is not valid JSON: {e}",
            status_code=response.status_code,
            details=response.text,
        ) from e


@dataclass
class CallRestServiceCommand(Command):
    """
    Command that invokes a REST service through the registered ``RestApiService``.

    Execution order:

    1. Resolve ``RestApiService`` from the registry, or raise ``CapabilityNotFoundError``.
    2. Read the request body from ``request_content_property_name`` when set.
    3. Await ``invoke(api_name, service_name, context, body)``.
    4. On a success status, when ``response_content_property_name`` is set, parse the
       body and write it back through a nested ``SetPropertyValueCommand``.
    5. Return an ``HttpCommandResult`` mirroring the response status.

    A non-success status is not an error: the result reports ``succeeded=False`` and
    the context is not written. Transport errors from the capability propagate.
    """

    api_name: str = ""
    service_name: str = ""
    request_content_property_name: str = ""
    response_content_property_name: str = ""

    async def execute(self, registry: ServiceRegistry, context: Any) -> HttpCommandResult:
        rest_api_service = registry.resolve(RestApiService)
        if rest_api_service is None:
            raise CapabilityNotFoundError(RestApiService)

        content = None
        if self.request_content_property_name:
            content = PropertyResolver.get_property_value(context, self.request_content_property_name)

        logger.debug("CallRestServiceCommand.execute: api=%s service=%s", self.api_name, self.service_name)
        response = await rest_api_service.invoke(self.api_name, self.service_name, context, content)

        if response.is_success:
            if self.response_content_property_name:
                set_cmd = SetPropertyValueCommand(
                    property_name=self.response_content_property_name,
                    value=parse_response_content(response),
                )
                await set_cmd.execute(registry, context)
        else:
            logger.debug(
                "CallRestServiceCommand.execute: api=%s service=%s returned %d, skipping write-back",
                self.api_name,
                self.service_name,
                response.status_code,
            )

        return HttpCommandResult.from_response(response)
