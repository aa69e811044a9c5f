"""Tests for the requests-backed transport."""

import pytest

from scd_access.transport import RequestsTransport, TransportResponse


class FakeResponse:
    def __init__(self, status_code=200, reason="OK", text="[]", url="https://svc/scrs/3d"):
        self.status_code = status_code
        self.reason = reason
        self.text = text
        self.url = url


class FakeSession:
    def __init__(self, response):
        self.response = response
        self.requests = []
        self.closed = False

    def request(self, method, url, **kwargs):
        self.requests.append((method, url, kwargs))
        return self.response

    def close(self):
        self.closed = True


class TestRequestsTransport:

    def test_perform_get(self):
        session = FakeSession(FakeResponse(text='[{"id": "1"}]'))
        transport = RequestsTransport(session=session, timeout=5)

        response = transport.perform(
            "https://svc/scrs/3d", "GET", {"Accept": "application/json"},
            params={"h3Index": "8928308280fffff"},
        )

        method, url, kwargs = session.requests[0]
        assert method == "GET"
        assert url == "https://svc/scrs/3d"
        assert kwargs["params"] == {"h3Index": "8928308280fffff"}
        assert kwargs["data"] is None
        assert kwargs["timeout"] == 5
        assert response.ok
        assert response.json() == [{"id": "1"}]

    def test_body_is_sent_as_utf8(self):
        session = FakeSession(FakeResponse(text="OK"))
        transport = RequestsTransport(session=session)

        transport.perform("https://svc/scrs/3d", "POST", {}, body='{"title": "café"}')

        assert session.requests[0][2]["data"] == '{"title": "café"}'.encode("utf-8")

    def test_error_status_is_returned(self):
        session = FakeSession(FakeResponse(status_code=500, reason="Internal Server Error", text="boom"))
        response = RequestsTransport(session=session).perform("https://svc", "GET", {})

        assert not response.ok
        assert response.reason == "Internal Server Error"
        assert response.text == "boom"

    def test_close(self):
        session = FakeSession(FakeResponse())
        RequestsTransport(session=session).close()
        assert session.closed


class TestTransportResponse:

    @pytest.mark.parametrize("status,ok", [(200, True), (201, True), (204, True), (301, False), (404, False)])
    def test_ok(self, status, ok):
        assert TransportResponse(status_code=status, reason="", text="").ok is ok
