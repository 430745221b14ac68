"""Unit tests for the fault translator and the DRF exception handler."""

from __future__ import annotations

import json
import logging

import pytest
from django.db import OperationalError
from django.http import HttpResponse
from django.test import RequestFactory
from rest_framework.exceptions import NotFound, ParseError

from modules.core.exceptions import (
    GENERIC_ERROR_MESSAGE,
    ApplicationError,
    api_exception_handler,
)
from modules.core.middleware import ExceptionHandlingMiddleware

pytestmark = pytest.mark.unit


@pytest.fixture()
def middleware():
    return ExceptionHandlingMiddleware(lambda request: HttpResponse("ok"))


@pytest.fixture()
def request_():
    return RequestFactory().get("/api/products")


class TestExceptionHandlingMiddleware:
    def test_passes_responses_through(self, middleware, request_):
        response = middleware(request_)
        assert response.content == b"ok"

    def test_application_error_becomes_400_with_its_message(self, middleware, request_):
        response = middleware.process_exception(
            request_, ApplicationError("Stock cannot be reserved.")
        )
        assert response.status_code == 400
        assert response["Content-Type"] == "application/json"
        assert json.loads(response.content) == {
            "StatusCode": 400,
            "Message": "Stock cannot be reserved.",
        }

    def test_other_errors_become_generic_500(self, middleware, request_):
        response = middleware.process_exception(
            request_, OperationalError("password authentication failed for db")
        )
        assert response.status_code == 500
        body = json.loads(response.content)
        assert body == {"StatusCode": 500, "Message": GENERIC_ERROR_MESSAGE}
        assert "password" not in response.content.decode()

    def test_original_error_is_logged(self, middleware, request_, caplog):
        with caplog.at_level(logging.ERROR, logger="modules.core.middleware"):
            middleware.process_exception(request_, RuntimeError("boom"))
        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.levelno == logging.ERROR
        assert "unhandled_exception" in record.getMessage()
        assert "RuntimeError" in record.getMessage()


class TestApiExceptionHandler:
    def test_reshapes_parse_error(self):
        response = api_exception_handler(ParseError("JSON parse error"), {})
        assert response.status_code == 400
        assert response.data == {"StatusCode": 400, "Message": "JSON parse error"}

    def test_reshapes_not_found(self):
        response = api_exception_handler(NotFound(), {})
        assert response.status_code == 404
        assert response.data["StatusCode"] == 404
        assert response.data["Message"]

    def test_unknown_exceptions_are_left_to_middleware(self):
        assert api_exception_handler(RuntimeError("boom"), {}) is None
