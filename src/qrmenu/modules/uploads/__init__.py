"""Uploads module - image uploads to the image host."""

# Module metadata
__module_info__ = {
    "name": "uploads",
    "version": "1.0.0",
    "description": "Image uploads",
    "dependencies": [],
}
