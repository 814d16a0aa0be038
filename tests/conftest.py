import pytest
from click.testing import CliRunner
from unittest.mock import MagicMock

from container_lifecycle.core.runtime_client import RuntimeClient
from container_lifecycle.models.config import Configuration
from container_lifecycle.models.runtime import ContainerInfo, ContainerState


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def mock_docker_client():
    """Provides a mocked Docker SDK client."""
    mock_client = MagicMock()
    mock_client.ping.return_value = True
    mock_client.containers.list.return_value = []
    return mock_client


@pytest.fixture
def mock_runtime():
    """Provides a mocked RuntimeClient for an absent container."""
    runtime = MagicMock(spec=RuntimeClient)
    runtime.status.return_value = ContainerState.ABSENT
    runtime.exists.return_value = False
    runtime.volume_exists.return_value = True
    runtime.exec_interactive.return_value = 0
    runtime.describe.return_value = ContainerInfo(
        id="abc123",
        name="oracle-free",
        image="gvenzl/oracle-free:23",
        status="running",
        ports="0.0.0.0:1521->1521/tcp",
    )
    return runtime


@pytest.fixture
def make_config():
    """Factory for Configuration objects with sensible defaults."""
    def _make(**overrides):
        values = {
            "container_name": "oracle-free",
            "image": "gvenzl/oracle-free:23",
            "host_port": 1521,
        }
        values.update(overrides)
        return Configuration(**values)
    return _make


class EchoRecorder:
    """Collects everything the controller echoes."""

    def __init__(self):
        self.lines = []

    def __call__(self, message="", **kwargs):
        self.lines.append(str(message))

    @property
    def output(self):
        return "\n".join(self.lines)


@pytest.fixture
def echo():
    """Provides an echo callback that records output."""
    return EchoRecorder()


@pytest.fixture
def env_file(tmp_path):
    """Writes a .env file and returns its path."""
    def _write(content):
        path = tmp_path / ".env"
        path.write_text(content)
        return path
    return _write
