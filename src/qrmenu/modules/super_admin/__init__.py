"""Super-admin module - platform-wide shop management."""

# Module metadata
__module_info__ = {
    "name": "super_admin",
    "version": "1.0.0",
    "description": "Platform-admin shop lifecycle",
    "dependencies": ["accounts", "shops", "catalog"],
}
