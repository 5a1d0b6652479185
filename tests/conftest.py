from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from rentassist.api.app import create_app
from rentassist.config import Settings
from rentassist.db.session import Database

ADMIN_SECRET = "test-secret"


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(
        app_env="test",
        database_url=f"sqlite:///{tmp_path / 'rental_assistance.db'}",
        data_dir=tmp_path,
        upload_dir=tmp_path / "uploads",
        admin_password=ADMIN_SECRET,
    )


@pytest.fixture()
def database(settings: Settings) -> Iterator[Database]:
    db = Database(settings.database_url)
    db.create_schema()
    yield db
    db.dispose()


@pytest.fixture()
def client(settings: Settings) -> Iterator[TestClient]:
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def application_form() -> dict[str, str]:
    return {
        "full_name": "  Jane Doe ",
        "phone": "555-0100",
        "email": " Jane.Doe@Example.COM ",
        "dob": "1980-04-12",
        "gender": "Female",
        "age": "44",
        "city": "Springfield",
        "ssn": "123-45-6789",
        "past_due_rent": "1250.50",
        "applied_before": "No",
        "receiving_ss": "Yes",
        "verified_idme": "Yes",
    }


@pytest.fixture()
def admin_headers() -> dict[str, str]:
    return {"X-Admin-Password": ADMIN_SECRET}
