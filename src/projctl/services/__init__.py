"""Service layer — the shared store and ServiceResult-returning operations.

Services may import from domain.
They must never import from commands, output, or plugins.
"""
