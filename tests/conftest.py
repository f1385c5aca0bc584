import httpx
import pytest

from docservice_client.client import ConversionClient
from docservice_client.config import Settings
from tests.helpers.envelopes import CONVERTER_URL, STORAGE_URL


@pytest.fixture
def settings():
    return Settings(converter_url=CONVERTER_URL, storage_url=STORAGE_URL, timeout=5000)


@pytest.fixture
def make_client(settings):
    """Create a client whose HTTP calls are answered by ``handler``."""

    def factory(handler):
        return ConversionClient(settings, transport=httpx.MockTransport(handler))

    return factory
