"""Domain layer — board model, partition engine, and snapshot codec.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
