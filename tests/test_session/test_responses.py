"""Тесты формирования и разбора JSON-ответов."""

from __future__ import annotations

import json

import pytest

from glmy.exceptions import DirectoryListingError, GLMYError
from glmy.session.responses import (
    error_response,
    error_response_from,
    parse_response,
    success_response,
)


def test_success_shape() -> None:
    assert json.loads(success_response({"a": 1})) == {"status": "success", "result": {"a": 1}}


def test_error_without_details_has_no_details_key() -> None:
    assert json.loads(error_response("boom")) == {"status": "error", "message": "boom"}


def test_error_from_listing_error_carries_path(tmp_path) -> None:
    error = DirectoryListingError(tmp_path / "x", "No such file or directory")
    assert json.loads(error_response_from(error)) == {
        "status": "error",
        "message": "No such file or directory",
        "details": {"path": str(tmp_path / "x")},
    }


class TestParseResponse:
    """Разбор ответа на стороне GUI."""

    def test_success_payload_returned(self) -> None:
        payload = parse_response(success_response([1, 2]))
        assert payload["result"] == [1, 2]

    def test_error_status_raises_with_message(self) -> None:
        raw = error_response("home missing")
        with pytest.raises(GLMYError) as info:
            parse_response(raw)
        assert info.value.message == "home missing"
        assert info.value.details == {"response": raw}

    def test_non_string_is_invalid(self) -> None:
        with pytest.raises(GLMYError, match="invalid"):
            parse_response(42)

    @pytest.mark.parametrize("raw", ["not json", "[]", '{"status": 1}'])
    def test_corrupt_response(self, raw: str) -> None:
        with pytest.raises(GLMYError, match="corrupt"):
            parse_response(raw)


def test_non_finite_result_is_rejected() -> None:
    with pytest.raises(ValueError):
        success_response({"version": float("nan")})
