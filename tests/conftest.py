import io
import logging
from unittest.mock import MagicMock

import pytest


@pytest.fixture()
def source():
    stream = MagicMock(name="byte_source")
    stream.read = MagicMock()
    yield stream


@pytest.fixture()
def read(source):
    yield source.read


@pytest.fixture()
def out():
    yield io.BytesIO()


@pytest.fixture()
def message_file(tmp_path):
    def write(data):
        path = tmp_path / "message.txt"
        path.write_bytes(data)
        return path
    return write


@pytest.fixture(autouse=True)
def my_caplog(caplog):
    caplog.set_level(logging.DEBUG)
