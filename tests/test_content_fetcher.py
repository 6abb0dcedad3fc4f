import pytest
import requests

from errors import FetchError, RedirectError, TooManyRedirects
from fakes import FakeResponse, FakeSession, redirect
from repo_releases.content_fetcher import ContentFetcher


def _redirect_chain(hops, final=None):
    routes = {f"https://dl.example.com/{i}": redirect(f"https://dl.example.com/{i + 1}") for i in range(hops)}
    if final is not None:
        routes[f"https://dl.example.com/{hops}"] = final
    return routes


def test_success_returns_body():
    session = FakeSession({"https://dl.example.com/a": FakeResponse(200, b"payload")})
    fetcher = ContentFetcher(session=session)

    assert fetcher.fetch("https://dl.example.com/a") == b"payload"
    url, kwargs = session.calls[0]
    assert kwargs["allow_redirects"] is False
    assert kwargs["timeout"] == 30


def test_three_redirects_then_success():
    session = FakeSession(_redirect_chain(3, FakeResponse(200, b"final body")))
    fetcher = ContentFetcher(session=session)

    assert fetcher.fetch("https://dl.example.com/0") == b"final body"
    assert [c[0] for c in session.calls] == [f"https://dl.example.com/{i}" for i in range(4)]


def test_exactly_max_redirects_is_allowed():
    session = FakeSession(_redirect_chain(10, FakeResponse(200, b"ok")))

    assert ContentFetcher(session=session).fetch("https://dl.example.com/0") == b"ok"


def test_eleven_redirects_raise_too_many_redirects():
    session = FakeSession(_redirect_chain(11, FakeResponse(200, b"never reached")))
    fetcher = ContentFetcher(session=session)

    with pytest.raises(TooManyRedirects):
        fetcher.fetch("https://dl.example.com/0")
    assert len(session.calls) == 11


def test_cyclic_redirect_terminates():
    session = FakeSession({
        "https://dl.example.com/a": redirect("https://dl.example.com/b"),
        "https://dl.example.com/b": redirect("https://dl.example.com/a"),
    })

    with pytest.raises(TooManyRedirects):
        ContentFetcher(session=session, max_redirects=5).fetch("https://dl.example.com/a")
    assert len(session.calls) == 6


def test_relative_location_resolves_against_redirecting_url():
    session = FakeSession({
        "https://github.com/expresslang/eep-releases/releases/download/v1/eep": redirect("/storage/eep?sig=1"),
        "https://github.com/storage/eep?sig=1": FakeResponse(200, b"bin"),
    })

    body = ContentFetcher(session=session).fetch(
        "https://github.com/expresslang/eep-releases/releases/download/v1/eep"
    )

    assert body == b"bin"
    assert session.calls[-1][0] == "https://github.com/storage/eep?sig=1"


def test_redirect_without_location_raises():
    session = FakeSession({"https://dl.example.com/a": redirect(None, status=301)})

    with pytest.raises(RedirectError) as excinfo:
        ContentFetcher(session=session).fetch("https://dl.example.com/a")
    assert excinfo.value.status == 301


def test_error_status_raises_fetch_error_with_status():
    session = FakeSession({"https://dl.example.com/a": FakeResponse(404, reason="Not Found")})

    with pytest.raises(FetchError) as excinfo:
        ContentFetcher(session=session).fetch("https://dl.example.com/a")

    assert excinfo.value.status == 404
    assert "HTTP 404: Not Found" in str(excinfo.value)


def test_transport_error_is_wrapped():
    session = FakeSession({"https://dl.example.com/a": requests.Timeout("read timed out")})

    with pytest.raises(FetchError) as excinfo:
        ContentFetcher(session=session).fetch("https://dl.example.com/a")

    assert excinfo.value.status is None
    assert "read timed out" in str(excinfo.value)


def test_default_session_sends_user_agent():
    fetcher = ContentFetcher(user_agent="Homebrew Formula Generator")
    try:
        assert fetcher.session.headers["User-Agent"] == "Homebrew Formula Generator"
    finally:
        fetcher.close()
