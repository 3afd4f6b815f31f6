import pytest

from jsonrest.errors import InvalidBaseURL
from jsonrest.models import ClientConfig
from jsonrest.utils import build_target, join_path, merge_query, parse_base_url


@pytest.mark.parametrize(
    "url, scheme, port",
    [
        ("api.example.com", "https", 443),
        ("api.example.com/v1", "https", 443),
        ("https://api.example.com", "https", 443),
        ("http://api.example.com", "http", 80),
        ("http://api.example.com:8080/v1", "http", 8080),
        ("api.example.com:8443", "https", 8443),
    ],
)
def test_scheme_and_port_defaults(url, scheme, port):
    parsed_scheme, host, parsed_port, _, _ = parse_base_url(url)
    assert parsed_scheme == scheme
    assert host == "api.example.com"
    assert parsed_port == port


def test_base_url_path_and_query_are_kept():
    _, _, _, path, query = parse_base_url("https://api.example.com/v1?lang=en&debug=")
    assert path == "/v1"
    assert query == {"lang": "en", "debug": ""}


@pytest.mark.parametrize(
    "url",
    ["", "   ", "ftp://files.example.com", "https://", "http://api.example.com:notaport"],
)
def test_malformed_base_url_raises(url):
    with pytest.raises(InvalidBaseURL):
        parse_base_url(url)


def test_invalid_base_url_is_a_value_error():
    with pytest.raises(ValueError):
        ClientConfig.from_url("mailto://someone")


@pytest.mark.parametrize(
    "base, path, expected",
    [
        ("/v1/", "/items", "/v1/items"),
        ("/v1", "items", "/v1/items"),
        ("/v1//", "//items//1", "/v1/items/1"),
        ("", "items", "/items"),
        ("", "", "/"),
        ("/v1", "", "/v1"),
        ("/v1", "items/", "/v1/items/"),
    ],
)
def test_join_path(base, path, expected):
    assert join_path(base, path) == expected


def test_join_path_never_doubles_slashes():
    assert "//" not in join_path("/a/", "/b/")


def test_merge_query_call_wins_and_defaults_survive():
    merged = merge_query({"lang": "en", "page": "1"}, {"page": 2, "q": "shoes"})
    assert merged == {"lang": "en", "page": "2", "q": "shoes"}


def test_merge_query_value_conversion():
    merged = merge_query({}, {"flag": True, "empty": None, "ids": [1, 2]})
    assert merged == {"flag": "true", "empty": "", "ids": ["1", "2"]}


def test_build_target_appends_encoded_query():
    assert build_target("/v1", "items", {"lang": "en", "q": "red shoes"}) == "/v1/items?lang=en&q=red+shoes"
    assert build_target("/v1", "items", {"ids": ["1", "2"]}) == "/v1/items?ids=1&ids=2"
    assert build_target("/v1", "items", {}) == "/v1/items"


def test_client_config_origin_and_immutability():
    config = ClientConfig.from_url("http://localhost:8000/api?token=abc", headers={"X-App": "demo"})
    assert config.origin == "http://localhost:8000"
    assert ClientConfig.from_url("example.com").origin == "https://example.com"
    with pytest.raises(Exception):
        config.host = "other"  # type: ignore[misc]
    with pytest.raises(TypeError):
        config.default_query["token"] = "changed"  # type: ignore[index]
    assert config.default_headers["X-App"] == "demo"


@pytest.mark.parametrize(
    "url, path, query",
    [
        ("api.example.com/v1?next=https://x.io", "/v1", {"next": "https://x.io"}),
        ("api.example.com/redirect/http://x.io", "/redirect/http://x.io", {}),
    ],
)
def test_schemeless_url_containing_scheme_later_defaults_to_https(url, path, query):
    scheme, host, port, parsed_path, parsed_query = parse_base_url(url)
    assert (scheme, host, port) == ("https", "api.example.com", 443)
    assert parsed_path == path
    assert parsed_query == query


def test_client_config_is_hashable():
    first = ClientConfig.from_url("https://api.example.com/v1?lang=en", headers={"X-App": "demo"})
    second = ClientConfig.from_url("https://api.example.com/v1?lang=en", headers={"X-App": "demo"})
    other = ClientConfig.from_url("https://api.example.com/v2")
    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second, other}) == 2
