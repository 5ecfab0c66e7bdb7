"""Shared utilities: request context and logging setup."""
