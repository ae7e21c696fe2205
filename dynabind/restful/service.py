"""REST invocation capability.

Defines the ``RestApiService`` protocol that commands resolve from the
``ServiceRegistry``, and ``HttpRestApiService``, its ``httpx`` implementation
driven by declarative ``RestApi`` definitions.

Usage:
- Register an instance under ``RestApiService`` at startup.
- ``CallRestServiceCommand`` resolves it and calls ``invoke``.
- Non-success HTTP statuses are returned as-is; transport errors propagate.
"""

from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Protocol, Tuple, Union, runtime_checkable

import httpx
from pydantic import BaseModel

from dynabind.core.config import Settings
from dynabind.core.logging_config import get_logger
from dynabind.runtime.accessor import DynamicObject

from .errors import RestApiNotFoundError, RestServiceNotFoundError
from .loader import load_rest_apis
from .models import RestApi, RestService


@runtime_checkable
class RestApiService(Protocol):
    """Protocol for capabilities that invoke declared REST services."""

    def get_api_by_name(self, api_name: str) -> Optional[RestApi]: ...

    async def invoke(
        self,
        api_name: str,
        service_name: str,
        params: Any = None,
        content: Any = None,
    ) -> httpx.Response: ...


class HttpRestApiService:
    """
    ``RestApiService`` implementation over ``httpx.AsyncClient``.

    Responsibilities:
    - hold the declared APIs and look them up by name
    - build the request URL and query string from the context object
    - send GET, or POST with a JSON body when the service is declared ``post``

    Note: no retries are attempted. Timeouts come from the client configuration.
    """

    def __init__(
        self,
        apis: Optional[Iterable[RestApi]] = None,
        *,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 30.0,
        user_agent: str = "dynabind/0.1.0",
    ) -> None:
        self._apis: Dict[str, RestApi] = {}
        if apis is not None:
            self.load(apis)
        self._http = client or httpx.AsyncClient(timeout=timeout, follow_redirects=True)
        self.user_agent = user_agent
        self._logger = get_logger(__name__)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        *,
        client: Optional[httpx.AsyncClient] = None,
    ) -> "HttpRestApiService":
        settings = settings or Settings()
        service = cls(client=client, timeout=settings.http_timeout_seconds, user_agent=settings.user_agent)
        if settings.rest_apis_path is not None:
            service.load_file(settings.rest_apis_path)
        return service

    def load(self, apis: Iterable[RestApi]) -> None:
        """Replace the declared APIs."""
        self._apis = {api.name: api for api in apis}

    def load_file(self, path: Union[str, Path]) -> None:
        self.load(load_rest_apis(path))

    @property
    def apis(self) -> Tuple[RestApi, ...]:
        return tuple(self._apis.values())

    def get_api_by_name(self, api_name: str) -> Optional[RestApi]:
        return self._apis.get(api_name)

    def _find_service(self, api_name: str, service_name: str) -> Tuple[RestApi, RestService]:
        api = self.get_api_by_name(api_name)
        if api is None:
            raise RestApiNotFoundError(api_name)
        svc = api.get_service_by_name(service_name)
        if svc is None:
            raise RestServiceNotFoundError(api_name, service_name)
        return api, svc

    def _headers(self) -> Dict[str, str]:
        return {
            "Accept": "*/*",
            "Accept-Encoding": "gzip, deflate",
            "Accept-Charset": "UTF-8",
            "Accept-Language": "en",
            "Cache-Control": "no-cache",
            "User-Agent": self.user_agent,
        }

    async def invoke(
        self,
        api_name: str,
        service_name: str,
        params: Any = None,
        content: Any = None,
    ) -> httpx.Response:
        """
        Call a declared service.

        Args:
            api_name: Name of the declared API.
            service_name: Name of the service within the API.
            params: Context object supplying path placeholders and query parameters.
            content: Request body, sent as JSON for ``post`` services.

        Returns:
            The raw ``httpx.Response``, whatever its status.

        Raises:
            RestApiNotFoundError: If ``api_name`` is not declared.
            RestServiceNotFoundError: If the API has no ``service_name`` service.
            httpx.HTTPError: Transport failures, unchanged.
        """
        api, svc = self._find_service(api_name, service_name)
        url = svc.build_url(api.root_endpoint_uri, params)
        query = svc.build_query(params)
        body = _to_jsonable(content) if svc.post and content is not None else None
        self._logger.debug(
            "HttpRestApiService.invoke: %s %s params=%s has_body=%s", svc.method, url, query, body is not None
        )
        r = await self._http.request(svc.method, url, params=query or None, headers=self._headers(), json=body)
        self._logger.debug("HttpRestApiService.invoke: %s %s -> %d", svc.method, url, r.status_code)
        return r

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "HttpRestApiService":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


def _to_jsonable(content: Any) -> Any:
    if isinstance(content, BaseModel):
        return content.model_dump(mode="json", by_alias=True)
    if isinstance(content, DynamicObject):
        return content.to_dict()
    if dataclasses.is_dataclass(content) and not isinstance(content, type):
        return dataclasses.asdict(content)
    return content
