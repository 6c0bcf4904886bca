import pytest

from google_search_mcp.actions.search.models import SearchResponse, parse_search_arguments, parse_search_response
from google_search_mcp.errors import InvalidArgumentsError, SchemaValidationError
from tests.app.helpers import google_response


def test_parse_valid_response():
    result = parse_search_response(google_response(2))
    assert result.success
    assert isinstance(result.data, SearchResponse)
    assert len(result.data.items) == 2
    assert result.error is None


def test_parse_tolerates_missing_optional_fields():
    result = parse_search_response({"items": [{"title": "t", "link": "https://example.com"}]})
    assert result.success
    item = result.data.items[0]
    assert item.snippet is None
    assert item.pagemap is None
    assert item.first_metatags is None


def test_parse_empty_metatags_list():
    result = parse_search_response({"items": [{"title": "t", "link": "l", "pagemap": {"metatags": []}}]})
    assert result.success
    assert result.data.items[0].first_metatags is None


def test_parse_failure_is_tagged_not_raised():
    result = parse_search_response({"items": "not-a-list"})
    assert not result.success
    assert result.data is None
    assert isinstance(result.error, SchemaValidationError)


def test_parse_rejects_non_object_payload():
    assert not parse_search_response(["items"]).success


def test_parse_arguments_defaults_num():
    assert parse_search_arguments({"query": "q"}).num == 5
    assert parse_search_arguments({"query": "q", "num": None}).num == 5
    assert parse_search_arguments({"query": "q", "num": 8}).num == 8


@pytest.mark.parametrize("arguments", [None, {}, {"query": ["q"]}, {"query": "q", "num": "3"}, {"query": "q", "num": True}])
def test_parse_arguments_rejects_malformed(arguments):
    with pytest.raises(InvalidArgumentsError) as exc_info:
        parse_search_arguments(arguments)
    assert str(exc_info.value).startswith("Invalid arguments:")
