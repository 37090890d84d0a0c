"""Tests for the retrying request wrapper."""

import aiohttp
import pytest

from browser_print.core import RequestConfig
from browser_print.exceptions import ErrorKind, TransportExhaustedError
from browser_print.requester import HTTPStatusError, RetryingRequester

from .fakes import ScriptedTransport, text_response

GET = RequestConfig(method="GET")


@pytest.mark.asyncio
@pytest.mark.parametrize("attempts", [1, 2, 3, 5])
async def test_send_attempts_exactly_n_times_when_every_attempt_fails(attempts):
    transport = ScriptedTransport([aiohttp.ClientError("boom")] * attempts)
    requester = RetryingRequester(transport)

    with pytest.raises(TransportExhaustedError, match="boom"):
        await requester.send("http://agent.test/x", GET, max_attempts=attempts)

    assert len(transport.calls) == attempts


@pytest.mark.asyncio
async def test_send_returns_first_success_without_further_attempts():
    transport = ScriptedTransport(
        [
            aiohttp.ClientError("refused"),
            text_response("hello"),
            text_response("unused"),
        ]
    )
    requester = RetryingRequester(transport)

    response = await requester.send("http://agent.test/x", GET)

    assert response is not None
    assert response.text() == "hello"
    assert len(transport.calls) == 2
    assert transport.outcomes == [text_response("unused")]


@pytest.mark.asyncio
async def test_non_success_status_is_retried_and_reported():
    transport = ScriptedTransport([text_response("", status=500)] * 3)
    requester = RetryingRequester(transport)

    with pytest.raises(TransportExhaustedError) as excinfo:
        await requester.send("http://agent.test/x", GET)

    assert str(excinfo.value) == "HTTP error! Status: 500"
    assert isinstance(excinfo.value.__cause__, HTTPStatusError)
    assert excinfo.value.kind is ErrorKind.TRANSPORT_EXHAUSTED
    assert len(transport.calls) == 3


@pytest.mark.asyncio
async def test_message_comes_from_last_failure():
    transport = ScriptedTransport(
        [aiohttp.ClientError("first"), text_response("", status=404)]
    )
    requester = RetryingRequester(transport, max_attempts=2)

    with pytest.raises(TransportExhaustedError, match="Status: 404"):
        await requester.send("http://agent.test/x", GET)


@pytest.mark.asyncio
async def test_failure_without_message_reports_unknown_error():
    transport = ScriptedTransport([TimeoutError()])
    requester = RetryingRequester(transport, max_attempts=1)

    with pytest.raises(TransportExhaustedError) as excinfo:
        await requester.send("http://agent.test/x", GET)

    assert str(excinfo.value) == "Unknown error"


@pytest.mark.asyncio
async def test_missing_response_is_returned_as_none():
    transport = ScriptedTransport([None])
    requester = RetryingRequester(transport)

    assert await requester.send("http://agent.test/x", GET) is None
    assert len(transport.calls) == 1


@pytest.mark.asyncio
async def test_send_rejects_fewer_than_one_attempt():
    requester = RetryingRequester(ScriptedTransport())

    with pytest.raises(ValueError):
        await requester.send("http://agent.test/x", GET, max_attempts=0)


def test_constructor_rejects_fewer_than_one_attempt():
    with pytest.raises(ValueError):
        RetryingRequester(ScriptedTransport(), max_attempts=0)
