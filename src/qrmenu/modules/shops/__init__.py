"""Shops module - tenants and their public menus."""

# Module metadata
__module_info__ = {
    "name": "shops",
    "version": "1.0.0",
    "description": "Shops, settings and the public menu",
    "dependencies": ["accounts"],
}
