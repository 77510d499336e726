"""Tests for route parameter normalization and redirects."""

import pytest
from newsdesk.core.errors import MissingListIdError
from newsdesk.core import messages
from newsdesk.services.navigation import (
    MultiRouteParam,
    SingleRouteParam,
    navigate_to_news_list,
    navigate_to_news_list_edit,
    news_list_edit_path,
    news_list_index_path,
    route_param,
    validate_news_list_id,
)


@pytest.mark.unit
class TestRouteParam:
    def test_string_becomes_single(self):
        assert route_param("abc") == SingleRouteParam("abc")

    def test_sequence_becomes_multi(self):
        assert route_param(["abc", "def"]) == MultiRouteParam(("abc", "def"))

    def test_none_becomes_empty_single(self):
        assert route_param(None) == SingleRouteParam(None)

    def test_existing_variant_passes_through(self):
        param = MultiRouteParam(("abc",))
        assert route_param(param) is param


@pytest.mark.unit
class TestValidateNewsListId:
    def test_single_value(self):
        assert validate_news_list_id(SingleRouteParam("abc")) == "abc"

    def test_sequence_takes_first_value(self):
        assert validate_news_list_id(route_param(["abc"])) == "abc"
        assert validate_news_list_id(["abc", "def"]) == "abc"

    def test_raw_string(self):
        assert validate_news_list_id("abc") == "abc"

    @pytest.mark.parametrize("raw", [[], "", None, [""]])
    def test_missing_identifier(self, raw):
        with pytest.raises(MissingListIdError) as exc_info:
            validate_news_list_id(route_param(raw))

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == messages.LIST_ID_MISSING


@pytest.mark.unit
class TestNavigation:
    def test_paths(self):
        assert news_list_index_path() == "/rss-feeds"
        assert news_list_edit_path("abc") == "/rss-feeds/abc"

    def test_navigate_to_news_list_edit(self):
        response = navigate_to_news_list_edit("abc")

        assert response.status_code == 303
        assert response.headers["location"] == "/rss-feeds/abc"

    def test_navigate_to_news_list(self):
        response = navigate_to_news_list()

        assert response.status_code == 303
        assert response.headers["location"] == "/rss-feeds"
