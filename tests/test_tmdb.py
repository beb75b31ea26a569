from unittest.mock import MagicMock

import pytest
import requests

from movieFinder import settings
from movieFinder.movie_api.tmdb import (
    MissingAPIKeyError,
    TMDBClient,
    TransportError,
    build_request,
)

BASE = "https://api.themoviedb.org/3"


class TestBuildRequest:
    def test_search_request_for_non_empty_query(self):
        req = build_request("batman", 1, base_url=BASE)
        assert req.url == f"{BASE}/search/movie?query=batman&page=1"

    def test_discover_request_for_empty_query(self):
        req = build_request("", 1, base_url=BASE)
        assert req.url == f"{BASE}/discover/movie?sort_by=popularity.desc&page=1"

    def test_query_is_url_encoded_like_encode_uri_component(self):
        req = build_request("the dark knight & co/2", 3, base_url=BASE)
        assert req.url == f"{BASE}/search/movie?query=the%20dark%20knight%20%26%20co%2F2&page=3"

    def test_whitespace_query_is_still_a_search(self):
        assert build_request(" ", 1, base_url=BASE).url == f"{BASE}/search/movie?query=%20&page=1"

    def test_keeps_the_characters_encode_uri_component_leaves_alone(self):
        req = build_request("Don't Look Up (2021)!*", 1, base_url=BASE)
        assert req.url == f"{BASE}/search/movie?query=Don't%20Look%20Up%20(2021)!*&page=1"

    def test_rejects_page_below_one(self):
        with pytest.raises(ValueError):
            build_request("batman", 0)


class TestTMDBClient:
    def _client(self, response=None, error=None):
        session = MagicMock(spec=requests.Session)
        session.headers = {}
        if error is not None:
            session.get.side_effect = error
        else:
            session.get.return_value = response
        return TMDBClient(api_key="fake_token", session=session), session

    def _response(self, status=200, payload=None, json_error=None):
        resp = MagicMock()
        resp.status_code = status
        resp.ok = 200 <= status < 300
        if json_error is not None:
            resp.json.side_effect = json_error
        else:
            resp.json.return_value = payload
        return resp

    def test_sets_bearer_and_accept_headers(self):
        _, session = self._client(self._response(payload={}))
        assert session.headers["Authorization"] == "Bearer fake_token"
        assert session.headers["accept"] == "application/json"

    def test_fetch_returns_payload(self):
        payload = {"results": [{"id": 1}], "total_pages": 5}
        client, session = self._client(self._response(payload=payload))
        req = build_request("batman", 1, base_url=BASE)

        assert client.fetch(req) == payload
        session.get.assert_called_once_with(req.url, timeout=settings.REQUEST_TIMEOUT)

    def test_http_500_is_transport_error(self):
        client, _ = self._client(self._response(status=500, payload={}))
        with pytest.raises(TransportError) as exc:
            client.fetch(build_request("batman", 1))
        assert exc.value.status_code == 500

    def test_network_exception_is_transport_error(self):
        client, _ = self._client(error=requests.ConnectionError("dns failure"))
        with pytest.raises(TransportError, match="dns failure"):
            client.fetch(build_request("", 1))

    def test_invalid_json_is_transport_error(self):
        client, _ = self._client(self._response(json_error=ValueError("Expecting value")))
        with pytest.raises(TransportError, match="invalid JSON"):
            client.fetch(build_request("batman", 1))

    def test_non_object_body_is_transport_error(self):
        client, _ = self._client(self._response(payload=[1, 2, 3]))
        with pytest.raises(TransportError, match="JSON object"):
            client.fetch(build_request("batman", 1))

    def test_missing_api_key(self, monkeypatch):
        monkeypatch.setattr(settings, "TMDB_API_KEY", None)
        with pytest.raises(MissingAPIKeyError):
            TMDBClient()
