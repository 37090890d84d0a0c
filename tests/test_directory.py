"""Tests for printer discovery."""

import json

import aiohttp
import pytest

from browser_print.core import Device
from browser_print.directory import PrinterDirectory, parse_default_printer
from browser_print.exceptions import (
    InvalidPrinterFormatError,
    NoDefaultPrinterError,
    NoPrintersAvailableError,
)
from browser_print.requester import RetryingRequester
from browser_print.store import DeviceStore

from .fakes import BASE_URL, ReadOnlyStorage, ScriptedTransport, text_response

DEFAULT_REPLY = "\n".join(
    [
        "Name: ZD421 ",
        "Device Type:printer",
        "Connection:  usb",
        "UID: 12345:ABC",
        "Provider: com.zebra.ds.webdriver.desktop.provider.DefaultDeviceProvider",
        "Manufacturer: Zebra Technologies",
        "Version: 0",
    ]
)


@pytest.fixture
def directory(requester: RetryingRequester, store: DeviceStore) -> PrinterDirectory:
    return PrinterDirectory(requester, store, BASE_URL)


@pytest.mark.asyncio
async def test_list_available_returns_raw_entries(directory, transport: ScriptedTransport):
    printers = [{"name": "ZD421", "uid": "1"}, {"name": "ZT410", "uid": "2"}]
    transport.queue(text_response(json.dumps({"printer": printers})))

    assert await directory.list_available() == printers

    endpoint, config = transport.calls[0]
    assert endpoint == "http://agent.test/available"
    assert config.method == "GET"
    assert config.headers["Content-Type"] == "text/plain;charset=UTF-8"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("body", "reason"),
    [
        ('{"printer": []}', "empty"),
        ("{}", "malformed"),
        ('{"printer": "ZD421"}', "malformed"),
        ("[]", "malformed"),
        ("not json", "malformed"),
        ('{"printer": ' + "[" * 200000, "malformed"),
    ],
)
async def test_list_available_rejects_unusable_bodies(
    directory, transport: ScriptedTransport, body: str, reason: str
):
    transport.queue(text_response(body))

    with pytest.raises(NoPrintersAvailableError) as excinfo:
        await directory.list_available()

    assert str(excinfo.value) == "No printers available or network error"
    assert excinfo.value.reason == reason


@pytest.mark.asyncio
async def test_list_available_collapses_network_failure(directory, transport: ScriptedTransport):
    transport.queue(*[aiohttp.ClientError("refused")] * 3)

    with pytest.raises(NoPrintersAvailableError) as excinfo:
        await directory.list_available()

    assert str(excinfo.value) == "No printers available or network error"
    assert excinfo.value.reason == "network"
    assert len(transport.calls) == 3


@pytest.mark.asyncio
async def test_list_available_treats_missing_response_as_network_failure(
    directory, transport: ScriptedTransport
):
    transport.queue(None)

    with pytest.raises(NoPrintersAvailableError):
        await directory.list_available()


@pytest.mark.asyncio
async def test_get_default_parses_and_selects(
    directory, transport: ScriptedTransport, store: DeviceStore
):
    transport.queue(text_response(DEFAULT_REPLY))

    device = await directory.get_default()

    assert device == Device(
        name="ZD421",
        device_type="printer",
        connection="usb",
        uid="12345:ABC",
        provider="com.zebra.ds.webdriver.desktop.provider.DefaultDeviceProvider",
        manufacturer="Zebra Technologies",
        version=0,
    )
    assert store.current() == device
    assert transport.calls[0][0] == "http://agent.test/default"


@pytest.mark.asyncio
async def test_get_default_with_six_lines_is_invalid_format(
    directory, transport: ScriptedTransport, store: DeviceStore
):
    transport.queue(text_response("\n".join(DEFAULT_REPLY.split("\n")[:6])))

    with pytest.raises(InvalidPrinterFormatError, match="Invalid printer data format"):
        await directory.get_default()

    assert store.current() == Device()


@pytest.mark.asyncio
async def test_get_default_line_without_colon_is_no_default(
    directory, transport: ScriptedTransport
):
    lines = DEFAULT_REPLY.split("\n")
    lines[2] = "usb"
    transport.queue(text_response("\n".join(lines)))

    with pytest.raises(NoDefaultPrinterError, match="No default printer found"):
        await directory.get_default()


@pytest.mark.asyncio
async def test_get_default_network_failure_is_no_default(
    directory, transport: ScriptedTransport
):
    transport.queue(*[text_response("", status=503)] * 3)

    with pytest.raises(NoDefaultPrinterError):
        await directory.get_default()


def test_parse_default_ignores_lines_after_sixth():
    device = parse_default_printer(DEFAULT_REPLY + "\nExtra: ignored\nMore: ignored")

    assert device.name == "ZD421"
    assert device.version == 0


@pytest.mark.asyncio
async def test_get_default_storage_failure_is_no_default(
    requester: RetryingRequester, transport: ScriptedTransport
):
    previous = Device(name="ZT410", uid="uid-0002")
    store = DeviceStore(ReadOnlyStorage(json.dumps(previous.to_dict())))
    directory = PrinterDirectory(requester, store, BASE_URL)
    transport.queue(text_response(DEFAULT_REPLY))

    with pytest.raises(NoDefaultPrinterError) as excinfo:
        await directory.get_default()

    assert isinstance(excinfo.value.__cause__, PermissionError)
    assert store.current() == previous
