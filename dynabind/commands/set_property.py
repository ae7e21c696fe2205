from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from dynabind.capabilities.registry import ServiceRegistry
from dynabind.core.logging_config import get_logger
from dynabind.errors import PropertyResolutionError
from dynabind.runtime.resolver import PropertyResolver

from .base import SUCCESS, Command, CommandResult

logger = get_logger(__name__)


@dataclass
class SetPropertyValueCommand(Command):
    """
    Command that writes a value into a named property of the context object.

    The value may be a literal from configuration or the output of an earlier
    step (e.g. a parsed response body). Resolver errors propagate.
    """

    property_name: str = ""
    value: Any = None

    async def execute(self, registry: ServiceRegistry, context: Any) -> CommandResult:
        if context is None:
            raise PropertyResolutionError(None, self.property_name, "Context object must not be None")
        logger.debug("SetPropertyValueCommand.execute: property=%s", self.property_name)
        PropertyResolver.set_property_value(context, self.property_name, self.value)
        return SUCCESS
