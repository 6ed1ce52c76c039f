"""Core services and cross-cutting concerns.

Subpackages are imported directly (``qrmenu.core.errors``,
``qrmenu.core.database`` ...) so that ``qrmenu.config`` can import
``qrmenu.core.constants`` without pulling in the database layer.
"""
