"""
Static file serving.

When SERVE_STATIC_ROOT_PATH is set, the directory is served at the site root.
The mount is registered after every API and GraphQL route, so /api* and
/graphql always reach their handlers first.
"""

from dataclasses import dataclass
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from core.config import Settings
from core.logging import get_logger


logger = get_logger(__name__)


@dataclass(frozen=True)
class StaticMount:
    root_path: Path
    serve_root: str = "/"


def build_static_mounts(settings: Settings) -> list[StaticMount]:
    """Static mounts for the configured root path (none when unset)."""
    if not settings.serve_static_root_path:
        return []

    resolved = Path(settings.serve_static_root_path).resolve()
    logger.info("Serving static files", root_path=str(resolved))
    return [StaticMount(root_path=resolved)]


def mount_static(app: FastAPI, mounts: list[StaticMount]) -> None:
    for mount in mounts:
        app.mount(
            mount.serve_root,
            StaticFiles(directory=mount.root_path, html=True),
            name=f"static:{mount.serve_root}",
        )
