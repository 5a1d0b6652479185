from __future__ import annotations

import json
from collections.abc import Iterator
from contextlib import contextmanager

import typer
import uvicorn

from rentassist.api.app import create_app
from rentassist.api.schemas import ApplicationResponse
from rentassist.config import get_settings
from rentassist.db.init import init_database, reset_database
from rentassist.db.models import Application
from rentassist.db.repositories import ApplicationRepository
from rentassist.db.session import Database
from rentassist.logging_config import configure_logging

app = typer.Typer(help="Rental assistance intake CLI")
applications_app = typer.Typer(help="Inspect and manage submitted applications")

app.add_typer(applications_app, name="applications")

_INITIALIZED = False


def ensure_initialized() -> None:
    global _INITIALIZED
    if _INITIALIZED:
        return
    init_database()
    _INITIALIZED = True


@contextmanager
def open_repository() -> Iterator[ApplicationRepository]:
    settings = get_settings()
    database = Database(settings.database_url)
    try:
        with database.session() as db:
            yield ApplicationRepository(db, affirmative_flag=settings.affirmative_flag)
    finally:
        database.dispose()


def _dump(row: Application) -> dict:
    return ApplicationResponse.model_validate(row).model_dump(mode="json")


@app.command("init")
def init_cmd() -> None:
    """Create the data directories and the applications table."""
    configure_logging()
    result = init_database()
    typer.echo(json.dumps({"ok": True, **result}, indent=2))


@app.command("reset-db")
def reset_db_cmd(yes: bool = typer.Option(False, "--yes", help="Confirm dropping every application")) -> None:
    """Drop and recreate the applications table."""
    configure_logging()
    if not yes:
        typer.confirm("This deletes every stored application. Continue?", abort=True)
    result = reset_database()
    typer.echo(json.dumps({"ok": True, **result}, indent=2))


@applications_app.command("list")
def applications_list() -> None:
    configure_logging()
    ensure_initialized()
    with open_repository() as repo:
        typer.echo(json.dumps([_dump(row) for row in repo.list_applications()], indent=2))


@applications_app.command("show")
def applications_show(application_id: int = typer.Option(..., "--id")) -> None:
    configure_logging()
    ensure_initialized()
    with open_repository() as repo:
        row = repo.get_application(application_id)
        if row is None:
            raise typer.BadParameter(f"application {application_id} not found")
        typer.echo(json.dumps(_dump(row), indent=2))


@applications_app.command("search")
def applications_search(query: str = typer.Option(..., "--query")) -> None:
    configure_logging()
    ensure_initialized()
    with open_repository() as repo:
        try:
            rows = repo.search(query)
        except ValueError as exc:
            raise typer.BadParameter(str(exc)) from exc
        typer.echo(json.dumps([_dump(row) for row in rows], indent=2))


@applications_app.command("delete")
def applications_delete(application_id: int = typer.Option(..., "--id")) -> None:
    configure_logging()
    ensure_initialized()
    with open_repository() as repo:
        deleted = repo.delete_application(application_id)
    typer.echo(json.dumps({"id": application_id, "deleted": deleted}, indent=2))
    if not deleted:
        raise typer.Exit(code=1)


@app.command("stats")
def stats_cmd() -> None:
    configure_logging()
    ensure_initialized()
    with open_repository() as repo:
        typer.echo(json.dumps(repo.stats().model_dump(), indent=2))


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, "--host"),
    port: int | None = typer.Option(None, "--port"),
) -> None:
    configure_logging()
    ensure_initialized()
    settings = get_settings()
    app_instance = create_app(settings)
    uvicorn.run(app_instance, host=host or settings.app_host, port=port or settings.app_port)
