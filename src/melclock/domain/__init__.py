"""Domain layer: categories, deadline rules, and result models.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
