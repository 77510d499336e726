"""Tests for the domain errors and their HTTP mapping."""

import json
import pytest
from newsdesk.core import messages
from newsdesk.core.errors import (
    MissingListIdError,
    NewsdeskError,
    NewsListNotFoundError,
    violations_response,
)
from newsdesk.schemas.news_list import validate_news_list


@pytest.mark.unit
class TestDomainErrors:
    def test_defaults_without_arguments(self):
        error = NewsListNotFoundError()

        assert error.list_id is None
        assert error.message == messages.LIST_NOT_FOUND
        assert str(error) == messages.LIST_NOT_FOUND
        assert error.status_code == 404

    def test_custom_message(self):
        error = NewsListNotFoundError("abc", message="Weg")

        assert error.list_id == "abc"
        assert error.message == "Weg"

    def test_base_error_is_generic(self):
        assert NewsdeskError().message == messages.GENERIC_ERROR
        assert NewsdeskError.status_code == 500

    def test_missing_list_id(self):
        error = MissingListIdError()

        assert error.status_code == 404
        assert error.message == messages.LIST_ID_MISSING


@pytest.mark.unit
class TestViolationsResponse:
    def test_lists_every_field(self):
        outcome = validate_news_list({"name": "ab", "newspapers": []})

        response = violations_response(outcome)

        assert response.status_code == 422
        assert json.loads(response.body) == {
            "detail": [
                {"field": "name", "message": messages.NAME_TOO_SHORT},
                {"field": "newspapers", "message": messages.NEWSPAPERS_EMPTY},
            ]
        }
