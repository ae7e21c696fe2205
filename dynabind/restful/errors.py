"""Error types specific to the REST invocation layer.

Purpose:
- Provide typed exceptions thrown by ``HttpRestApiService`` when a declared
  API or service cannot be found.
- Expose lookup context (API name, service name) for diagnosis.

Usage:
- Catch ``RestApiError`` for general failures of the REST layer.
- Transport failures are not wrapped: ``httpx`` exceptions reach the caller
  unchanged.
"""

from __future__ import annotations

from dynabind.errors import DynabindError


class RestApiError(DynabindError):
    """Base error for REST invocation layer failures."""


class RestApiNotFoundError(RestApiError):
    """Raised when no API is registered under the requested name.

    Args:
        api_name: The API name that was not found.
    """

    def __init__(self, api_name: str) -> None:
        super().__init__(f"API not found - {api_name}")
        self.api_name = api_name


class RestServiceNotFoundError(RestApiError):
    """Raised when an API has no service with the requested name.

    Args:
        api_name: The API that was searched.
        service_name: The service name that was not found.
    """

    def __init__(self, api_name: str, service_name: str) -> None:
        super().__init__(f"Rest service not found - {service_name} (api '{api_name}')")
        self.api_name = api_name
        self.service_name = service_name
