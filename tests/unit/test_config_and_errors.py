# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import socket
import ssl

import httpx

from authcheck.config import DEFAULT_USER_AGENT, HttpSettings, load_http_settings
from authcheck.errors import ErrorCategory, categorize_exception, error_category_to_reason
from authcheck.http.models import RetryConfig


def test_http_settings_defaults():
    settings = HttpSettings()
    assert settings.timeout == 10.0
    assert settings.max_workers == 10
    assert settings.keepalive_expiry == 90.0
    assert settings.user_agent == DEFAULT_USER_AGENT


def test_http_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("AUTHCHECK_HTTP_TIMEOUT", "5.5")
    monkeypatch.setenv("AUTHCHECK_HTTP_RETRIES", "0")
    monkeypatch.setenv("AUTHCHECK_HTTP_BACKOFF", "1.5")
    monkeypatch.setenv("AUTHCHECK_HTTP_INITIAL_DELAY", "0.1")
    monkeypatch.setenv("AUTHCHECK_USER_AGENT", "CustomAgent/1.0")
    monkeypatch.setenv("AUTHCHECK_HTTP_REDIRECTS", "false")
    monkeypatch.setenv("AUTHCHECK_HTTP_VERIFY_SSL", "0")
    monkeypatch.setenv("AUTHCHECK_HTTP_MAX_CONNECTIONS", "7")
    monkeypatch.setenv("AUTHCHECK_HTTP_MAX_KEEPALIVE", "3")
    monkeypatch.setenv("AUTHCHECK_HTTP_KEEPALIVE_EXPIRY", "12")
    monkeypatch.setenv("AUTHCHECK_WORKERS", "4")

    settings = load_http_settings()

    assert settings.timeout == 5.5
    assert settings.max_retries == 0  # retry config clamps later
    assert settings.backoff_factor == 1.5
    assert settings.initial_delay == 0.1
    assert settings.user_agent == "CustomAgent/1.0"
    assert settings.allow_redirects is False
    assert settings.verify_ssl is False
    assert settings.max_connections == 7
    assert settings.max_keepalive_connections == 3
    assert settings.keepalive_expiry == 12.0
    assert settings.max_workers == 4


def test_http_settings_invalid_env_fall_back(monkeypatch):
    monkeypatch.setenv("AUTHCHECK_HTTP_TIMEOUT", "not-a-number")
    monkeypatch.setenv("AUTHCHECK_HTTP_RETRIES", "ten")
    monkeypatch.setenv("AUTHCHECK_WORKERS", "0")
    monkeypatch.setenv("AUTHCHECK_HTTP_MAX_CONNECTIONS", "-5")

    settings = load_http_settings()

    assert settings.timeout == HttpSettings.timeout
    assert settings.max_retries == HttpSettings.max_retries
    assert settings.max_workers == HttpSettings.max_workers
    assert settings.max_connections == HttpSettings.max_connections


def test_retry_config_from_settings_clamps_minimum():
    retry = RetryConfig.from_settings(HttpSettings(max_retries=0))
    assert retry.max_attempts == 1


def test_categorize_httpx_exceptions():
    request = httpx.Request("GET", "http://x.test/")
    assert categorize_exception(httpx.ConnectTimeout("slow", request=request)) is ErrorCategory.TIMEOUT
    assert categorize_exception(httpx.ReadTimeout("slow", request=request)) is ErrorCategory.TIMEOUT
    assert categorize_exception(httpx.ConnectError("refused", request=request)) is ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(httpx.RemoteProtocolError("bad", request=request)) is ErrorCategory.PROTOCOL_ERROR
    assert categorize_exception(httpx.UnsupportedProtocol("no scheme", request=request)) is ErrorCategory.INVALID_URL
    assert categorize_exception(httpx.InvalidURL("bad url")) is ErrorCategory.INVALID_URL
    assert categorize_exception(RuntimeError("?")) is ErrorCategory.UNKNOWN_ERROR


def test_categorize_walks_wrapped_causes():
    request = httpx.Request("GET", "http://x.test/")

    def wrapped(cause):
        try:
            try:
                raise cause
            except Exception as inner:
                raise httpx.ConnectError("wrapped", request=request) from inner
        except httpx.ConnectError as outer:
            return outer

    assert categorize_exception(wrapped(socket.gaierror(-2, "Name or service not known"))) is ErrorCategory.DNS_ERROR
    assert categorize_exception(wrapped(ssl.SSLError("certificate verify failed"))) is ErrorCategory.SSL_ERROR


def test_error_category_to_reason():
    assert error_category_to_reason(ErrorCategory.TIMEOUT) == "Network timeout during probe"
    assert error_category_to_reason(ErrorCategory.INVALID_URL) == "Malformed endpoint URL"
    assert error_category_to_reason(None) == ""
