"""
Roster Backend — Student Endpoint Tests
========================================

What:  HTTP-level tests for GET /student/{student}/detail and the
       by-number variant.
How:   httpx AsyncClient over ASGITransport against a seeded SQLite database.

What we test:
    ✅ 200 with the student at the top level of the body (no "data" envelope)
    ✅ 404 with "No query results for model [Student] <key>"
    ✅ Non-numeric or out-of-range id → 404 (not 422 or 500)
    ✅ Datastore unreachable → 500 with a generic body
"""

import pytest
from unittest.mock import AsyncMock, patch

from sqlalchemy.exc import OperationalError


class TestStudentDetail:

    @pytest.mark.asyncio
    async def test_existing_student(self, test_client):
        response = await test_client.get("/student/7/detail")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        body = response.json()
        assert body["id"] == 7
        assert body["name"] == "Ada Lovelace"
        assert body["email"] == "ada@example.edu"
        assert body["student_number"] == "S-2024-0007"
        assert "data" not in body

    @pytest.mark.asyncio
    async def test_every_seeded_student_resolves(self, test_client, seeded):
        for row in seeded:
            response = await test_client.get(f"/student/{row['id']}/detail")
            assert response.status_code == 200
            assert response.json()["id"] == row["id"]

    @pytest.mark.asyncio
    async def test_missing_student(self, test_client):
        response = await test_client.get("/student/12345/detail")

        assert response.status_code == 404
        assert response.headers["content-type"] == "application/json"
        assert response.json() == {"message": "No query results for model [Student] 12345"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("key", ["0", "9", "999999"])
    async def test_missing_keys_name_the_key(self, test_client, key):
        response = await test_client.get(f"/student/{key}/detail")

        assert response.status_code == 404
        assert response.json() == {"message": f"No query results for model [Student] {key}"}

    @pytest.mark.asyncio
    async def test_non_numeric_id_is_not_found(self, test_client):
        response = await test_client.get("/student/abc/detail")

        assert response.status_code == 404
        assert response.json() == {"message": "No query results for model [Student] abc"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("key", ["2147483648", "99999999999999999999"])
    async def test_out_of_range_id_is_not_found(self, test_client, key):
        response = await test_client.get(f"/student/{key}/detail")

        assert response.status_code == 404
        assert response.json() == {"message": f"No query results for model [Student] {key}"}

    @pytest.mark.asyncio
    async def test_datastore_unreachable_is_server_error(self, test_client):
        error = OperationalError("SELECT", {}, ConnectionRefusedError("refused"))
        with patch(
            "roster.services.resolver.find_by_key", AsyncMock(side_effect=error)
        ):
            response = await test_client.get(
                "/student/7/detail", headers={"X-Request-ID": "req-500"}
            )

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "server_error"
        assert body["request_id"] == "req-500"
        assert "refused" not in response.text


class TestStudentDocs:

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "path", ["/student/{student}/detail", "/student/by-number/{student}/detail"]
    )
    async def test_error_responses_documented(self, app, path):
        responses = app.openapi()["paths"][path]["get"]["responses"]

        assert responses["404"]["content"]["application/json"]["schema"]["$ref"].endswith(
            "/NotFoundResponse"
        )
        assert responses["500"]["content"]["application/json"]["schema"]["$ref"].endswith(
            "/ErrorResponse"
        )


class TestStudentByNumber:

    @pytest.mark.asyncio
    async def test_existing_number(self, test_client):
        response = await test_client.get("/student/by-number/S-2024-0008/detail")

        assert response.status_code == 200
        assert response.json()["id"] == 8

    @pytest.mark.asyncio
    async def test_missing_number(self, test_client):
        response = await test_client.get("/student/by-number/S-1999-0001/detail")

        assert response.status_code == 404
        assert response.json() == {
            "message": "No query results for model [Student] S-1999-0001"
        }
