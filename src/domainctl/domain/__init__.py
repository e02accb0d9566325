"""Domain layer — catalog model, filter engine, and copy state types.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
