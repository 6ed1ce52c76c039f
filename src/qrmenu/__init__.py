"""QR Menu: multi-tenant QR-code restaurant menus."""

__version__ = "0.1.0"
