"""dynabind.

This package contains a command execution pipeline with dynamic property
binding: declaratively configured commands read inputs from, and write
outputs to, named fields of an arbitrary caller-owned context object.

High-level architecture
-----------------------

- **Commands** (``dynabind.commands``): units of work exposing
  ``async execute(registry, context) -> CommandResult``. Commands compose by
  constructing and awaiting other commands against the same registry and
  context.
- **Capabilities** (``dynabind.capabilities``): a ``ServiceRegistry`` mapping
  capability identifiers to implementations, populated by the host at startup
  and resolved by commands at execution time.
- **Conditions** (``dynabind.conditions``): declarative true/false tests such as
  ``PropertyCompare`` and ``CompoundCondition`` that gate a ``ConditionalCommand``.
- **Property binding** (``dynabind.runtime``): ``PropertyResolver`` reads and
  writes (dot-separated) property paths on dicts, attribute objects and
  ``PropertyAccessor`` implementations.
- **REST invocation** (``dynabind.restful``): ``RestApiService`` capability and
  its ``httpx`` implementation driven by JSON API definitions.

Typical workflow
----------------

1. Build an ``HttpRestApiService`` (``from_settings`` reads the API file) and
   register it under ``RestApiService`` in a ``ServiceRegistry``.
2. Configure a ``CallRestServiceCommand`` with an API name, a service name and
   the two context property names.
3. ``await command.execute(registry, context)``.
4. Branch on exceptions (the command could not run) versus
   ``result.succeeded`` (the remote side accepted or rejected the call).
"""
