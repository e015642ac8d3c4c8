import base64

import pytest
import requests
import responses
from responses import matchers

from wistia_api.http import (
    AuthError,
    HTTPStatusError,
    InvalidJSONError,
    NotFound,
    TransportError,
    WistiaClient,
    WistiaError,
)

BASE = "https://api.wistia.com/v1"


@responses.activate
def test_get_happy_path():
    client = WistiaClient(BASE, "fake")
    responses.add(responses.GET, f"{BASE}/account.json", json={"id": 7}, status=200)
    data = client.call("account.json")
    assert data["id"] == 7


@responses.activate
def test_basic_auth_uses_api_user_and_key():
    client = WistiaClient(BASE, "secret-key")
    responses.add(responses.GET, f"{BASE}/account.json", json={}, status=200)

    client.call("account.json")
    auth = responses.calls[0].request.headers.get("Authorization")
    expected = base64.b64encode(b"api:secret-key").decode("ascii")
    assert auth == f"Basic {expected}"


@responses.activate
def test_auth_error_401():
    client = WistiaClient(BASE, "bad")
    responses.add(responses.GET, f"{BASE}/account.json", json={"error": "x"}, status=401)
    with pytest.raises(AuthError) as ei:
        client.call("account.json")
    assert ei.value.status_code == 401


@responses.activate
def test_not_found_404():
    client = WistiaClient(BASE, "fake")
    responses.add(responses.GET, f"{BASE}/projects/missing.json", json={}, status=404)
    with pytest.raises(NotFound):
        client.call("projects/missing.json")


@responses.activate
def test_server_error_is_http_status_error_without_retry():
    client = WistiaClient(BASE, "fake")
    responses.add(responses.GET, f"{BASE}/account.json", body="boom", status=500)

    with pytest.raises(HTTPStatusError) as ei:
        client.call("account.json")
    assert ei.value.status_code == 500
    assert ei.value.body == "boom"
    assert not isinstance(ei.value, (AuthError, NotFound))
    assert len(responses.calls) == 1


@responses.activate
def test_connection_error_is_transport_error():
    client = WistiaClient(BASE, "fake")
    responses.add(
        responses.GET,
        f"{BASE}/account.json",
        body=requests.exceptions.ConnectionError("dns"),
    )
    with pytest.raises(TransportError):
        client.call("account.json")


@responses.activate
def test_invalid_json_raises_invalid_json_error():
    client = WistiaClient(BASE, "fake")
    responses.add(
        responses.GET,
        f"{BASE}/account.json",
        body="not-json",
        content_type="application/json",
        status=200,
    )
    with pytest.raises(InvalidJSONError):
        client.call("account.json")


@responses.activate
def test_empty_body_raises_invalid_json_error():
    client = WistiaClient(BASE, "fake")
    responses.add(responses.DELETE, f"{BASE}/projects/abc.json", body="", status=200)
    with pytest.raises(InvalidJSONError):
        client.call("projects/abc.json", "DELETE")


def test_error_kinds_share_a_base():
    for kind in (TransportError, HTTPStatusError, AuthError, NotFound, InvalidJSONError):
        assert issubclass(kind, WistiaError)


@responses.activate
def test_get_params_go_on_query_string():
    client = WistiaClient(BASE, "fake")
    responses.add(
        responses.GET,
        f"{BASE}/stats/account/by_date.json",
        json=[],
        match=[
            matchers.query_param_matcher(
                {"start_date": "2024-01-01", "end_date": "2024-01-31"}
            )
        ],
    )
    out = client.call(
        "stats/account/by_date.json",
        params={"start_date": "2024-01-01", "end_date": "2024-01-31"},
    )
    assert out == []


@responses.activate
def test_post_params_are_form_encoded():
    client = WistiaClient(BASE, "fake")
    responses.add(
        responses.POST,
        f"{BASE}/projects.json",
        json={"publicId": "p1"},
        match=[matchers.urlencoded_params_matcher({"name": "New Project"})],
    )
    out = client.call("projects.json", "post", {"name": "New Project"})
    assert out["publicId"] == "p1"
    assert "?" not in responses.calls[0].request.url


@responses.activate
def test_base_url_trailing_slash_and_leading_path_slash():
    client = WistiaClient(BASE + "/", "fake")
    url = f"{BASE}/account.json"
    responses.add(responses.GET, url, json={"ok": True}, status=200)

    data = client.call("/account.json")
    assert data["ok"] is True
    assert responses.calls[0].request.url == url


class CapturingSession(requests.Session):
    def __init__(self):
        super().__init__()
        self.kwargs = None

    def request(self, method, url, **kwargs):
        self.kwargs = kwargs
        return super().request(method, url, **kwargs)


@responses.activate
def test_injected_session_is_used_with_timeout_and_tls_verification():
    sess = CapturingSession()
    client = WistiaClient(BASE, "fake", timeout_s=3.5, session=sess)
    responses.add(responses.GET, f"{BASE}/account.json", json={"ok": True}, status=200)

    client.call("account.json")
    assert sess.kwargs["timeout"] == 3.5
    assert sess.kwargs.get("verify", True) is True
    assert sess.verify is True
