"""Ambient configuration for dynabind: settings and logging."""
