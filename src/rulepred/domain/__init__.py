"""Domain layer — rule identifiers, rule models, and predicates.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
