import pytest

from app import create_server
from config import Config
from recording_logger import RecordingLogger


@pytest.fixture
def config():
    return Config()


@pytest.fixture
def recording_logger():
    return RecordingLogger()


@pytest.fixture
def server(recording_logger):
    """Create the harness app backed by a fresh RecordingLogger."""
    application = create_server({"logger": recording_logger})
    yield application
    application.config["components"]["log_bridge"].close()


@pytest.fixture
def client(server):
    """Create a Flask test client."""
    return server.test_client()


@pytest.fixture
def make_server():
    """Factory for harness apps with custom options; closes them afterwards."""
    created = []

    def _make(options=None, config=None):
        application = create_server(options, config=config)
        created.append(application)
        return application

    yield _make
    for application in created:
        application.config["components"]["log_bridge"].close()
