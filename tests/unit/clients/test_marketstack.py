"""Unit tests for the blocking requests-based client."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from marketstack import Eod, Marketstack, paged, query
from marketstack.core import RemoteMessageError, TransportError, UrlResolutionError
from marketstack.runtime.rest import Client, HttpRequest


def _response(status: int = 200, content: bytes = b"{}", headers: dict[str, str] | None = None) -> MagicMock:
    response = MagicMock()
    response.status_code = status
    response.content = content
    response.headers = CaseInsensitiveDict(headers or {})
    return response


class TestMarketstackConfig:
    """Test construction and URL resolution."""

    def test_defaults(self):
        client = Marketstack(token="t")
        assert client.rest_url == "https://api.marketstack.com/v1/"
        assert client.timeout == 30.0
        assert client.get_auth().token == "t"
        assert isinstance(client, Client)

    def test_insecure_uses_http(self):
        client = Marketstack.insecure("localhost:8080", "t")
        assert client.rest_url == "http://localhost:8080/v1/"

    def test_no_token_means_no_auth(self):
        assert Marketstack().get_auth() is None

    def test_rest_endpoint_joins_below_version(self):
        client = Marketstack(token="t")
        assert client.rest_endpoint("eod/latest") == "https://api.marketstack.com/v1/eod/latest"
        assert client.rest_endpoint("") == "https://api.marketstack.com/v1/"

    @pytest.mark.parametrize(
        "path",
        ["https://evil.example/v1/eod", "//evil.example/eod", "/eod", "../v2/eod", "mailto:x"],
    )
    def test_rest_endpoint_rejects_escaping_paths(self, path):
        with pytest.raises(UrlResolutionError):
            Marketstack(token="t").rest_endpoint(path)

    def test_unsupported_protocol(self):
        with pytest.raises(UrlResolutionError):
            Marketstack(protocol="ftp")

    def test_repr_hides_token(self):
        client = Marketstack(token="super-secret")
        assert "super-secret" not in repr(client)
        assert "auth=set" in repr(client)


class TestMarketstackTransport:
    """Test request sending through a mocked session."""

    def test_rest_passes_request_through(self):
        session = MagicMock()
        session.request.return_value = _response(200, b'{"a": 1}', {"Link": "<x>"})
        client = Marketstack(token="t", session=session, timeout=5.0)

        rsp = client.rest(HttpRequest(method="GET", url="https://api.marketstack.com/v1/eod?a=1"))

        session.request.assert_called_once_with(
            "GET",
            "https://api.marketstack.com/v1/eod?a=1",
            headers={},
            data=None,
            timeout=5.0,
        )
        assert rsp.status == 200
        assert rsp.body == b'{"a": 1}'
        assert rsp.header("link") == "<x>"

    def test_request_exception_becomes_transport_error(self):
        session = MagicMock()
        session.request.side_effect = requests.ConnectionError("refused")
        client = Marketstack(token="t", session=session)

        with pytest.raises(TransportError) as exc_info:
            client.rest(HttpRequest(method="GET", url="https://api.marketstack.com/v1/"))
        assert isinstance(exc_info.value.source, requests.ConnectionError)

    def test_query_end_to_end(self):
        session = MagicMock()
        session.request.return_value = _response(200, b'{"data": []}')
        client = Marketstack(token="t", session=session)

        assert query(Eod(symbols=("AAPL",)), client) == {"data": []}
        url = session.request.call_args.args[1]
        assert url == "https://api.marketstack.com/v1/eod?symbols=AAPL&access_key=t"

    def test_remote_error_end_to_end(self):
        session = MagicMock()
        session.request.return_value = _response(401, b'{"message": "invalid key"}')
        client = Marketstack(token="t", session=session)

        with pytest.raises(RemoteMessageError):
            query(Eod(), client)

    def test_paged_end_to_end(self):
        session = MagicMock()
        session.request.return_value = _response(200, b'{"data": [{"n": 1}, {"n": 2}]}')
        client = Marketstack(token="t", session=session)

        assert paged(Eod()).query(client) == [{"n": 1}, {"n": 2}]
        assert session.request.call_count == 1


class TestMarketstackSession:
    def test_session_created_lazily(self):
        client = Marketstack(token="t")
        assert client._session is None
        assert isinstance(client.session, requests.Session)
        client.close()
        assert client._session is None

    def test_context_manager_closes_owned_session(self):
        with Marketstack(token="t") as client:
            session = client.session
        assert client._session is None
        assert session is not None

    def test_caller_session_not_closed(self):
        session = MagicMock()
        with Marketstack(token="t", session=session):
            pass
        session.close.assert_not_called()
