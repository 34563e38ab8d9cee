"""Domain layer — the bounded value type, its errors, and its operators.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
