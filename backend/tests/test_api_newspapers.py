"""Tests for the newspaper catalog endpoints."""

import pytest


@pytest.mark.unit
class TestNewspapersAPI:
    def test_list_newspapers(self, client, test_newspapers):
        response = client.get("/api/newspapers/")

        assert response.status_code == 200
        assert [n["name"] for n in response.json()] == [
            "Die Zeit",
            "Süddeutsche Zeitung",
            "taz",
        ]
        assert set(response.json()[0]) == {"id", "name"}

    def test_get_newspaper(self, client, test_newspapers):
        newspaper = test_newspapers[2]

        response = client.get(f"/api/newspapers/{newspaper.id}")

        assert response.status_code == 200
        assert response.json()["url"] == "https://taz.de/rss.xml"

    def test_get_missing_newspaper(self, client):
        response = client.get("/api/newspapers/999")
        assert response.status_code == 404

    def test_create_newspaper(self, authenticated_client):
        response = authenticated_client.post(
            "/api/newspapers/",
            json={"name": "Der Tagesspiegel", "url": "https://www.tagesspiegel.de/rss"},
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Der Tagesspiegel"

    def test_create_duplicate_newspaper(self, authenticated_client, test_newspapers):
        response = authenticated_client.post(
            "/api/newspapers/", json={"name": "taz"}
        )
        assert response.status_code == 400

    def test_create_requires_auth(self, client):
        response = client.post("/api/newspapers/", json={"name": "Neu"})
        assert response.status_code == 401
