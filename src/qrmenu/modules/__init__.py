"""Feature modules with auto-discovery."""

from importlib import import_module
from pathlib import Path

import structlog
from fastapi import APIRouter


logger = structlog.get_logger()


def discover_modules() -> list[APIRouter]:
    """Auto-discover and return routers from all modules.

    Scans the modules directory for packages with a ``routes`` module
    that defines a ``router`` attribute. Packages without routes (such
    as accounts, whose endpoints live in the auth package) are skipped.

    Returns:
        List of FastAPI routers from discovered modules, in name order.
    """
    modules_dir = Path(__file__).parent
    routers: list[APIRouter] = []

    for path in sorted(modules_dir.iterdir()):
        if not path.is_dir() or path.name.startswith("_"):
            continue
        if not (path / "routes.py").exists():
            continue

        module = import_module(f"qrmenu.modules.{path.name}.routes")
        if hasattr(module, "router"):
            routers.append(module.router)
            logger.debug("module_loaded", module=path.name)

    return routers
