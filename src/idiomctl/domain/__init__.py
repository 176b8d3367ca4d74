"""Domain layer — the idiom demonstrations themselves.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, config, or output.
"""
