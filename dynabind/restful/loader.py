"""Load REST API definitions from JSON files.

The file holds a JSON array of API objects using camelCase keys::

    [
      {
        "name": "jsonplaceholder",
        "rootEndpointUri": "https://jsonplaceholder.typicode.com",
        "services": [
          {"name": "todos", "relativePath": "todos/{id}"},
          {"name": "posts", "relativePath": "posts", "post": true}
        ]
      }
    ]
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

from pydantic import TypeAdapter

from dynabind.core.logging_config import get_logger

from .models import RestApi

logger = get_logger(__name__)

_API_LIST = TypeAdapter(List[RestApi])


def load_rest_apis(path: Union[str, Path]) -> List[RestApi]:
    """
    Parse a JSON file of REST API definitions.

    Raises:
        FileNotFoundError: If the file does not exist.
        pydantic.ValidationError: If the content does not match the API schema.
    """
    raw = Path(path).read_bytes()
    apis = _API_LIST.validate_json(raw)
    logger.debug("load_rest_apis: loaded %d apis from %s", len(apis), path)
    return apis
