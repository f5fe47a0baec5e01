# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from authcheck.config import HttpSettings
from authcheck.errors import ErrorCategory
from authcheck.http.adapters import StubHttpClient
from authcheck.http.models import HttpRequest, HttpResponse, RetryConfig
from authcheck.models import AuthContext, ComparisonStatus, ProbeStatus
from authcheck.scan.compare import compare, is_static_asset
from authcheck.scan.prober import Prober

WITH_COOKIE = AuthContext("With Cookie", {"Cookie": "session=abc"})
WITHOUT_COOKIE = AuthContext("Without Cookie")


def _prober(client, **settings) -> Prober:
    return Prober(client, HttpSettings(**settings), retry_config=RetryConfig(max_attempts=1))


def _by_cookie(with_cookie: HttpResponse, without_cookie: HttpResponse):
    def responder(request: HttpRequest) -> HttpResponse:
        return with_cookie if "Cookie" in (request.headers or {}) else without_cookie

    return responder


def test_probe_returns_status_and_size():
    client = StubHttpClient({"https://x.test/a": HttpResponse(ok=True, status_code=200, body_size=50)})
    result = _prober(client, timeout=3.0).probe("https://x.test/a", "POST", {"Cookie": "s=1"})

    assert result.status is ProbeStatus.COMPLETED
    assert (result.status_code, result.body_size) == (200, 50)
    sent = client.requests[0]
    assert sent.method == "POST"
    assert sent.headers == {"Cookie": "s=1"}
    assert sent.timeout == 3.0


def test_probe_failure_is_inconclusive_not_raised():
    client = StubHttpClient(
        {
            "https://down.test/": HttpResponse(
                ok=False, error_message="refused", error_type="ConnectError", error_category=ErrorCategory.CONNECTION_ERROR
            )
        }
    )
    result = _prober(client).probe("https://down.test/", "GET")

    assert result.ok is False
    assert result.status is ProbeStatus.INCONCLUSIVE
    assert (result.status_code, result.body_size) == (0, 0)
    assert result.error_category is ErrorCategory.CONNECTION_ERROR


def test_probe_retries_transport_failures(monkeypatch):
    monkeypatch.setattr("time.sleep", lambda _: None)
    answers = iter([HttpResponse(ok=False, error_message="reset"), HttpResponse(ok=True, status_code=200, body_size=5)])
    client = StubHttpClient(responder=lambda _request: next(answers))
    prober = Prober(client, HttpSettings(), retry_config=RetryConfig(max_attempts=2, initial_delay=0.0))

    result = prober.probe("https://x.test/flaky", "GET")

    assert result.ok is True
    assert result.attempts == 2
    assert len(client.requests) == 2


@pytest.mark.parametrize(
    ("endpoint", "expected"),
    [
        ("https://x.test/app.js", True),
        ("https://x.test/app.js.map", True),
        ("https://x.test/logo.svg", True),
        ("https://x.test/app.js?v=3", True),
        ("https://x.test/app.JS", False),
        ("https://x.test/api/users", False),
        ("https://x.test/json", False),
        ("", False),
    ],
)
def test_is_static_asset(endpoint, expected):
    assert is_static_asset(endpoint) is expected


def test_static_assets_never_reach_the_prober():
    client = StubHttpClient(responder=lambda _request: pytest.fail("static assets must not be probed"))
    outcome = compare(_prober(client), "https://x.test/app.js", "GET", WITH_COOKIE, WITHOUT_COOKIE)

    assert outcome.status is ComparisonStatus.SKIPPED
    assert outcome.endpoint == "https://x.test/app.js"
    assert outcome.method == "GET"
    assert client.requests == []


def test_inconclusive_context_a_short_circuits_context_b():
    client = StubHttpClient(responder=_by_cookie(HttpResponse(ok=False, error_message="timeout"), HttpResponse(ok=True, status_code=200)))
    outcome = compare(_prober(client), "https://x.test/a", "GET", WITH_COOKIE, WITHOUT_COOKIE)

    assert outcome.status is ComparisonStatus.INCONCLUSIVE
    assert outcome.result_b is None
    assert len(client.requests) == 1
    assert "With Cookie" in outcome.reason


def test_inconclusive_context_b_fails_the_comparison():
    client = StubHttpClient(
        responder=_by_cookie(HttpResponse(ok=True, status_code=200, body_size=50), HttpResponse(ok=False, error_message="reset"))
    )
    outcome = compare(_prober(client), "https://x.test/a", "POST", WITH_COOKIE, WITHOUT_COOKIE)

    assert outcome.status is ComparisonStatus.INCONCLUSIVE
    assert outcome.result_a.ok is True
    assert outcome.result_b.ok is False
    assert len(client.requests) == 2


def test_completed_comparison_carries_both_results_and_labels():
    client = StubHttpClient(
        responder=_by_cookie(HttpResponse(ok=True, status_code=200, body_size=50), HttpResponse(ok=True, status_code=403, body_size=10))
    )
    outcome = compare(_prober(client), "https://x.test/b", "GET", WITH_COOKIE, WITHOUT_COOKIE)

    assert outcome.status is ComparisonStatus.COMPLETED
    assert (outcome.label_a, outcome.label_b) == ("With Cookie", "Without Cookie")
    assert (outcome.result_a.status_code, outcome.result_a.body_size) == (200, 50)
    assert (outcome.result_b.status_code, outcome.result_b.body_size) == (403, 10)
    assert [req.headers for req in client.requests] == [{"Cookie": "session=abc"}, {}]
    assert {req.method for req in client.requests} == {"GET"}


def test_auth_context_is_read_only():
    headers = {"Cookie": "a=1"}
    context = AuthContext("A", headers)
    headers["Cookie"] = "changed"

    assert context.headers["Cookie"] == "a=1"
    with pytest.raises(TypeError):
        context.headers["Cookie"] = "b=2"  # type: ignore[index]
    copy = context.as_request_headers()
    copy["X"] = "1"
    assert "X" not in context.headers
