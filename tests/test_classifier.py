"""Tests for the status code to outcome mapping."""

from __future__ import annotations

import pytest

from listex.classifier import build_exception, classify
from listex.exceptions import (
    InternalServerError,
    ListexError,
    Locked,
    MethodNotAllowed,
    MethodNotFound,
    NoAccess,
    NotAuthorized,
    NotModified,
    RequestError,
    RequestLimitReached,
    ServiceNotAvailable,
    UnknownError,
)
from listex.models import RawResponse


class TestSuccess:
    def test_200_passes_body_through(self):
        assert classify(200, '{"result": []}') == '{"result": []}'

    def test_200_empty_body(self):
        assert classify(200, "") == ""

    @pytest.mark.parametrize("body", ["", "not found", '{"error": "no data"}'])
    def test_404_is_empty_success(self, body):
        assert classify(404, body) == ""


class TestErrors:
    @pytest.mark.parametrize(
        ("status", "exc_cls"),
        [
            (304, NotModified),
            (400, RequestError),
            (401, NotAuthorized),
            (403, NoAccess),
            (405, MethodNotAllowed),
            (423, Locked),
            (429, RequestLimitReached),
            (500, InternalServerError),
            (501, MethodNotFound),
            (503, ServiceNotAvailable),
        ],
    )
    def test_mapped_status(self, status, exc_cls):
        with pytest.raises(exc_cls) as exc_info:
            classify(status, "body")
        assert exc_info.value.status_code == status
        assert type(exc_info.value) is exc_cls

    @pytest.mark.parametrize("status", [0, 201, 204, 302, 402, 409, 422, 502, 504, 999])
    def test_unmapped_status_is_unknown(self, status):
        with pytest.raises(UnknownError) as exc_info:
            classify(status, "")
        assert exc_info.value.status_code == status

    def test_400_carries_exact_body(self):
        body = '{"errors": ["good_id is required"]}\n'
        with pytest.raises(RequestError) as exc_info:
            classify(400, body)
        assert exc_info.value.body == body

    def test_all_errors_share_base(self):
        with pytest.raises(ListexError):
            classify(503, "")

    def test_response_attached(self):
        response = RawResponse(status=429, headers={"RetryAfter": "12"}, body="")
        with pytest.raises(RequestLimitReached) as exc_info:
            classify(429, "", response)
        assert exc_info.value.response is response
        assert exc_info.value.retry_after == 12

    def test_retry_after_without_response(self):
        assert build_exception(429, "").retry_after is None

    def test_message_includes_status(self):
        exc = build_exception(401, "")
        assert str(exc) == "401: Not authorized"
