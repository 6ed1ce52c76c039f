"""Catalog module - categories and items of a shop."""

# Module metadata
__module_info__ = {
    "name": "catalog",
    "version": "1.0.0",
    "description": "Categories and items",
    "dependencies": ["shops"],
}
