"""Domain layer — values, records, and validation rules.

This layer depends only on stdlib and pydantic.
It must never import from services, plugins, commands, or config.
"""
