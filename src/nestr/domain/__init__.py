"""Domain layer — non-empty value types and their operations.

This layer depends only on stdlib and pydantic.
It must never import from services, config, output, or commands.
"""
