from __future__ import annotations

from pathlib import Path
from typing import Any

from rentassist.config import Settings, get_settings
from rentassist.db.session import Database


def ensure_data_directories(settings: Settings | None = None) -> None:
    settings = settings or get_settings()
    paths: list[Path] = [settings.data_dir, settings.upload_dir]
    database_path = sqlite_database_path(settings.database_url)
    if database_path is not None:
        paths.append(database_path.parent)
    for path in paths:
        path.mkdir(parents=True, exist_ok=True)


def sqlite_database_path(database_url: str) -> Path | None:
    prefix = "sqlite:///"
    if not database_url.startswith(prefix):
        return None
    raw = database_url[len(prefix):]
    if not raw or raw == ":memory:":
        return None
    return Path(raw)


def init_database(settings: Settings | None = None) -> dict[str, Any]:
    settings = settings or get_settings()
    ensure_data_directories(settings)
    database = Database(settings.database_url)
    try:
        database.create_schema()
    finally:
        database.dispose()
    return {"database_url": settings.database_url, "upload_dir": str(settings.upload_dir)}


def reset_database(settings: Settings | None = None) -> dict[str, Any]:
    settings = settings or get_settings()
    ensure_data_directories(settings)
    database = Database(settings.database_url)
    try:
        database.drop_schema()
        database.create_schema()
    finally:
        database.dispose()
    return {"database_url": settings.database_url, "reset": True}
