import pytest

from browser_print.adapters import MemoryStorage
from browser_print.requester import RetryingRequester
from browser_print.store import DeviceStore

from .fakes import ScriptedTransport


@pytest.fixture
def transport() -> ScriptedTransport:
    return ScriptedTransport()


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def store(storage: MemoryStorage) -> DeviceStore:
    return DeviceStore(storage)


@pytest.fixture
def requester(transport: ScriptedTransport) -> RetryingRequester:
    return RetryingRequester(transport)
