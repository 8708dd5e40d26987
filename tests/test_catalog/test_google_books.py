# tests/test_catalog/test_google_books.py

from unittest.mock import Mock, patch

import pytest
import requests

from core.catalog.google_books import GoogleBooksClient, SearchResult
from core.exceptions import ExternalServiceError, ValidationError

VOLUMES = {
    "items": [
        {
            "id": "B1hSG45JCX4C",
            "volumeInfo": {
                "title": "Dune",
                "authors": ["Frank Herbert"],
                "description": "Desert planet",
                "categories": ["Fiction"],
                "imageLinks": {"thumbnail": "http://books.example/dune.jpg"},
            },
        },
        {
            "id": "anon",
            "volumeInfo": {"title": "Beowulf", "authors": ["Anonymous", "Seamus Heaney"]},
        },
        {
            "id": "bare",
            "volumeInfo": {"title": "Untitled Notes"},
        },
        {
            "id": "broken",
            "volumeInfo": {},
        },
    ]
}

@pytest.fixture
def client():
    return GoogleBooksClient(base_url="https://books.example/volumes", timeout=5, api_key="key")

def _response(payload):
    response = Mock()
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    return response

def test_search_maps_volumes(client):
    with patch("core.catalog.google_books.requests.get", return_value=_response(VOLUMES)) as get:
        results = client.search("dune", limit=5)

    get.assert_called_once_with(
        "https://books.example/volumes",
        params={"q": "dune", "maxResults": 5, "key": "key"},
        timeout=5
    )
    assert [result.id for result in results] == ["B1hSG45JCX4C", "anon", "bare"]
    assert results[0] == SearchResult(
        id="B1hSG45JCX4C",
        title="Dune",
        author="Frank Herbert",
        cover_image="http://books.example/dune.jpg",
        description="Desert planet",
        genre="Fiction",
    )
    assert results[1].author == "Anonymous, Seamus Heaney"

def test_search_fills_defaults(client):
    with patch("core.catalog.google_books.requests.get", return_value=_response(VOLUMES)):
        bare = client.search("notes")[2]
    assert bare.author == "Unknown"
    assert bare.cover_image == ""
    assert bare.description == ""
    assert bare.genre == "General"

def test_search_without_results(client):
    with patch("core.catalog.google_books.requests.get", return_value=_response({"totalItems": 0})):
        assert client.search("zzzz") == []

def test_search_caps_limit():
    client = GoogleBooksClient()
    with patch("core.catalog.google_books.requests.get", return_value=_response({})) as get:
        client.search("dune", limit=500)
    assert get.call_args.kwargs["params"] == {"q": "dune", "maxResults": 40}

def test_blank_query(client):
    with patch("core.catalog.google_books.requests.get") as get:
        with pytest.raises(ValidationError):
            client.search("   ")
    get.assert_not_called()

def test_request_failure(client):
    with patch("core.catalog.google_books.requests.get", side_effect=requests.ConnectionError("down")):
        with pytest.raises(ExternalServiceError):
            client.search("dune")

def test_http_error(client):
    response = _response({})
    response.raise_for_status.side_effect = requests.HTTPError("503")
    with patch("core.catalog.google_books.requests.get", return_value=response):
        with pytest.raises(ExternalServiceError):
            client.search("dune")

def test_invalid_json(client):
    response = _response(None)
    response.json.side_effect = ValueError("no json")
    with patch("core.catalog.google_books.requests.get", return_value=response):
        with pytest.raises(ExternalServiceError):
            client.search("dune")
