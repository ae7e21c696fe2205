"""Capability lookup for commands.

A *capability* is a behavioral contract (for example "can invoke REST
services") resolved at runtime instead of being wired at construction time.

- The host registers implementations at startup.
- Commands resolve what they need from the ``ServiceRegistry`` they are
  executed with, and fail fast with ``CapabilityNotFoundError`` when an entry
  is missing.
"""

from .registry import CapabilityId, ServiceRegistry

__all__ = [
    "CapabilityId",
    "ServiceRegistry",
]
