from .errors import RestApiError, RestApiNotFoundError, RestServiceNotFoundError
from .loader import load_rest_apis
from .models import ParameterLocation, RestApi, RestParameter, RestService
from .service import HttpRestApiService, RestApiService

__all__ = [
    "HttpRestApiService",
    "ParameterLocation",
    "RestApi",
    "RestApiError",
    "RestApiNotFoundError",
    "RestApiService",
    "RestParameter",
    "RestService",
    "RestServiceNotFoundError",
    "load_rest_apis",
]
