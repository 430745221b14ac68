import logging
import uuid

import pytest

pytestmark = pytest.mark.integration


class TestRequestLoggingMiddleware:
    def test_returns_provided_request_id(self, client):
        custom_id = "my-custom-request-id-123"
        response = client.get("/health", HTTP_X_REQUEST_ID=custom_id)
        assert response["X-Request-ID"] == custom_id

    def test_generates_uuid_when_no_request_id(self, client):
        response = client.get("/api/products")
        request_id = response["X-Request-ID"]
        parsed = uuid.UUID(request_id, version=4)
        assert str(parsed) == request_id

    def test_correlation_id_in_logs(self, api_client_with_correlation, caplog):
        api_client, cid = api_client_with_correlation
        with caplog.at_level(logging.INFO):
            api_client.get("/api/products")
        found = [r.getMessage() for r in caplog.records if cid in r.getMessage()]
        assert any("request_finished" in message for message in found)
        assert any("product.page_listed" in message for message in found)
