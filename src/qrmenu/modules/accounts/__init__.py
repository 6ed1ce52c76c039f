"""Accounts module - owner and platform-admin accounts."""

# Module metadata
__module_info__ = {
    "name": "accounts",
    "version": "1.0.0",
    "description": "Accounts and credentials",
    "dependencies": [],
}
