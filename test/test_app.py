"""
Tests for application wiring: docs, health and middleware.
"""

import pytest
from httpx import ASGITransport, AsyncClient

from contacts_api.contacts.router import get_contact_service
from contacts_api.main import app
from contacts_api.shared.correlation import CORRELATION_ID_HEADER


class TestApp:
    @pytest.mark.asyncio
    async def test_health(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    @pytest.mark.asyncio
    async def test_openapi_document(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/swagger.json")

        assert response.status_code == 200
        schema = response.json()
        assert schema["info"]["title"] == "Contacts API"
        assert set(schema["paths"]["/contacts"]) == {"get", "post"}
        assert set(schema["paths"]["/contacts/{contact_id}"]) == {"get", "put", "delete"}

    @pytest.mark.asyncio
    async def test_docs_ui(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/api-docs")
        assert response.status_code == 200
        assert "swagger" in response.text.lower()

    @pytest.mark.asyncio
    async def test_correlation_id_echoed(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/health", headers={CORRELATION_ID_HEADER: "req-1"})
        assert response.headers[CORRELATION_ID_HEADER] == "req-1"

    @pytest.mark.asyncio
    async def test_correlation_id_generated(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/health")
        assert response.headers[CORRELATION_ID_HEADER]

    @pytest.mark.asyncio
    async def test_unexpected_error_has_json_body(self) -> None:
        def _broken_service() -> None:
            raise RuntimeError("service unavailable")

        app.dependency_overrides[get_contact_service] = _broken_service
        try:
            # The server error middleware re-raises after responding.
            transport = ASGITransport(app=app, raise_app_exceptions=False)
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                response = await client.get("/contacts")
        finally:
            app.dependency_overrides.pop(get_contact_service, None)

        assert response.status_code == 500
        assert response.json() == {"message": "Server error", "error": "service unavailable"}
