import logging

import pytest

from o365sub.config.loader import Credentials


@pytest.fixture
def creds():
    return Credentials(
        client_id="client-123",
        tenant_id="tenant-abc",
        client_secret="s3cret",
    )


@pytest.fixture
def proxied_creds():
    return Credentials(
        client_id="client-123",
        tenant_id="tenant-abc",
        client_secret="s3cret",
        proxy_url="http://proxy.local:3128",
    )


@pytest.fixture(autouse=True)
def quiet_logger():
    """Each test starts with the run logger detached from any file."""
    logger = logging.getLogger("o365sub")
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


class FakeResponse:
    def __init__(self, status_code=200, text=""):
        self.status_code = status_code
        self.text = text
        self.headers = {}


@pytest.fixture
def fake_response():
    return FakeResponse
