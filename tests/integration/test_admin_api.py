import pytest
from fastapi.testclient import TestClient

from rentassist.api.app import create_app


def _submit(client, form, **overrides) -> int:
    response = client.post("/submit", data={**form, **overrides})
    assert response.status_code == 200
    return response.json()["applicationId"]


@pytest.mark.parametrize(
    "path",
    [
        "/api/admin/applications",
        "/api/admin/applications/1",
        "/api/admin/search?q=jane",
        "/api/admin/stats",
    ],
)
def test_admin_endpoints_require_secret(client, path) -> None:
    assert client.get(path).status_code == 401
    assert client.get(path, headers={"X-Admin-Password": "wrong"}).status_code == 401


def test_admin_rejection_does_not_leak_secret(client) -> None:
    response = client.get("/api/admin/applications?password=nope")

    assert response.status_code == 401
    assert response.json() == {"detail": "Admin authentication required"}
    assert "test-secret" not in response.text


def test_delete_requires_secret(client, application_form, admin_headers) -> None:
    application_id = _submit(client, application_form)

    assert client.delete(f"/api/admin/applications/{application_id}").status_code == 401
    assert client.get(f"/api/admin/applications/{application_id}", headers=admin_headers).status_code == 200


def test_secret_accepted_as_query_parameter(client) -> None:
    response = client.get("/api/admin/applications", params={"password": "test-secret"})

    assert response.status_code == 200
    assert response.json() == []


def test_unset_admin_secret_locks_admin_api(settings) -> None:
    settings.admin_password = ""
    with TestClient(create_app(settings)) as locked:
        assert locked.get("/api/admin/stats", params={"password": ""}).status_code == 401


def test_get_unknown_application_is_404(client, admin_headers) -> None:
    response = client.get("/api/admin/applications/999", headers=admin_headers)

    assert response.status_code == 404
    assert response.json() == {"detail": "Application not found"}


def test_search_requires_query(client, admin_headers) -> None:
    assert client.get("/api/admin/search", headers=admin_headers).status_code == 400
    assert client.get("/api/admin/search", params={"q": "  "}, headers=admin_headers).status_code == 400


def test_search_matches_case_insensitively(client, application_form, admin_headers) -> None:
    application_id = _submit(client, application_form)
    _submit(client, application_form, city="Capital City", full_name="Someone Else")

    hits = client.get("/api/admin/search", params={"q": "spring"}, headers=admin_headers).json()
    misses = client.get("/api/admin/search", params={"q": "zzz"}, headers=admin_headers).json()

    assert [row["id"] for row in hits] == [application_id]
    assert misses == []


def test_delete_is_idempotent(client, application_form, admin_headers) -> None:
    application_id = _submit(client, application_form)

    first = client.delete(f"/api/admin/applications/{application_id}", headers=admin_headers)
    second = client.delete(f"/api/admin/applications/{application_id}", headers=admin_headers)

    assert first.status_code == 200
    assert first.json() == {"success": True, "message": "Application deleted"}
    assert second.status_code == 404
    assert client.get(f"/api/admin/applications/{application_id}", headers=admin_headers).status_code == 404


def test_list_returns_newest_first(client, application_form, admin_headers) -> None:
    first = _submit(client, application_form)
    second = _submit(client, application_form)

    rows = client.get("/api/admin/applications", headers=admin_headers).json()

    assert [row["id"] for row in rows] == [second, first]


def test_stats(client, application_form, admin_headers) -> None:
    for rent, receiving in (("100", "Yes"), ("200", "No"), ("300", "No")):
        _submit(client, application_form, past_due_rent=rent, receiving_ss=receiving)

    stats = client.get("/api/admin/stats", headers=admin_headers).json()

    assert stats == {
        "total_applications": 3,
        "total_rent_owed": 600.0,
        "avg_rent_owed": 200.0,
        "receiving_social_security": 1,
    }


def test_empty_query_secret_falls_back_to_header(client, admin_headers) -> None:
    response = client.get("/api/admin/applications?password=", headers=admin_headers)

    assert response.status_code == 200


def test_id_beyond_integer_range_is_not_found(client, admin_headers) -> None:
    huge = "99999999999999999999"

    fetched = client.get(f"/api/admin/applications/{huge}", headers=admin_headers)
    deleted = client.delete(f"/api/admin/applications/{huge}", headers=admin_headers)

    assert fetched.status_code == 404
    assert fetched.json() == {"detail": "Application not found"}
    assert deleted.status_code == 404
