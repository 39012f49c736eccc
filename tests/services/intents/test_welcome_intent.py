"""Tests for the welcome intent's fetch-select-respond pipeline."""

from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from devrel_quotes.core.intents import IntentType
from devrel_quotes.core.models import CapabilityFlags
from devrel_quotes.services import ServiceContainer
from devrel_quotes.services.intent_router import IntentRequest
from devrel_quotes.services.intents.welcome import handle_default_welcome

# pylint: disable=missing-function-docstring


def _run(services: ServiceContainer, *, screen: bool = False, language: str = "en") -> dict:
    request = IntentRequest(
        intent=IntentType.DEFAULT_WELCOME,
        language_code=language,
        capabilities=CapabilityFlags(screen_output=screen),
    )
    response = asyncio.run(handle_default_welcome(request, services))
    assert response.intent is IntentType.DEFAULT_WELCOME
    return response.result


def test_welcome_without_screen(make_services, read_fixture) -> None:
    services = make_services(read_fixture("data.json"), values=(0.0, 0.0))
    assert _run(services) == json.loads(read_fixture("response_welcome.json"))


def test_welcome_with_screen(make_services, read_fixture) -> None:
    services = make_services(read_fixture("data.json"), values=(0.7, 0.5))
    assert _run(services, screen=True) == json.loads(read_fixture("response_welcome_screen.json"))


@pytest.mark.parametrize("screen", [False, True])
def test_network_error_yields_problem_response(make_services, read_fixture, screen) -> None:
    services = make_services(error=httpx.ConnectError("connection refused"))
    assert _run(services, screen=screen) == json.loads(read_fixture("response_problem.json"))


def test_http_error_status_yields_problem_response(make_services, read_fixture) -> None:
    services = make_services("Not Found", status_code=404)
    assert _run(services) == json.loads(read_fixture("response_problem.json"))


def test_empty_document_matches_network_error_response(make_services) -> None:
    content_failure = _run(make_services("{}"))
    fetch_failure = _run(make_services(error=httpx.ReadError("stream closed")))
    assert content_failure == fetch_failure


def test_failure_is_logged_with_source_url(make_services, caplog) -> None:
    with caplog.at_level("ERROR"):
        _run(make_services("{}"))
    assert any(
        "https://quotes.test/quotes.json" in record.getMessage() for record in caplog.records
    )


def test_missing_fetcher_is_a_configuration_error(fulfillment_config) -> None:
    services = ServiceContainer(fulfillment_config=fulfillment_config)
    with pytest.raises(RuntimeError):
        _run(services)
