"""Commands: declaratively configured units of work.

Every command exposes ``async execute(registry, context) -> CommandResult``.
Commands read inputs from and write outputs to the caller's context object
through ``PropertyResolver``, and resolve the capabilities they need from the
``ServiceRegistry``.

This package exports:

- ``Command`` / ``CommandResult`` / ``SUCCESS``: the contract and outcome envelope.
- ``SetPropertyValueCommand``: write one value into the context.
- ``CallRestServiceCommand`` / ``HttpCommandResult``: call a declared REST service.
- ``DelegateCommand``, ``ConditionalCommand``, ``MacroCommand``: composition helpers.
"""

from .base import SUCCESS, Command, CommandResult
from .conditional import ConditionalCommand
from .delegate import DelegateCommand
from .macro import MacroCommand, MacroCommandResult
from .rest import CallRestServiceCommand, HttpCommandResult, parse_response_content
from .set_property import SetPropertyValueCommand

__all__ = [
    "SUCCESS",
    "CallRestServiceCommand",
    "Command",
    "CommandResult",
    "ConditionalCommand",
    "DelegateCommand",
    "HttpCommandResult",
    "MacroCommand",
    "MacroCommandResult",
    "SetPropertyValueCommand",
    "parse_response_content",
]
