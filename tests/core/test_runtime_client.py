"""Tests for RuntimeClient."""

from pathlib import Path
from unittest.mock import MagicMock, Mock, patch

import docker.errors
import pytest

from container_lifecycle.core.runtime_client import RuntimeClient
from container_lifecycle.models.runtime import (
    ContainerState,
    CreateSpec,
    NamedVolume,
    PortMapping,
    ResourceLimits,
)
from container_lifecycle.services.exceptions import (
    ContainerNotFoundError,
    CreateFailedError,
    PullFailedError,
    RuntimeCommandError,
    RuntimeServiceError,
)


def make_container(status="running", name="oracle-free"):
    container = MagicMock()
    container.status = status
    container.name = name
    container.short_id = "abc123"
    container.attrs = {"Config": {"Image": "gvenzl/oracle-free:23"}}
    container.ports = {"1521/tcp": [{"HostIp": "0.0.0.0", "HostPort": "1521"}]}
    return container


class TestRuntimeClient:
    """Test cases for RuntimeClient."""

    @patch('docker.from_env')
    def test_init_success(self, mock_from_env, mock_docker_client):
        mock_from_env.return_value = mock_docker_client

        runtime = RuntimeClient()

        assert runtime.client == mock_docker_client
        mock_docker_client.ping.assert_called_once()

    @patch('docker.from_env')
    def test_init_docker_not_running(self, mock_from_env):
        mock_from_env.side_effect = docker.errors.DockerException("connection refused")

        with pytest.raises(RuntimeServiceError, match="Docker daemon is not running"):
            RuntimeClient()

    @patch('docker.from_env')
    def test_init_other_error(self, mock_from_env):
        mock_from_env.side_effect = docker.errors.DockerException("Other error")

        with pytest.raises(RuntimeServiceError, match="Failed to connect to Docker"):
            RuntimeClient()

    @pytest.mark.parametrize("docker_status,expected", [
        ("running", ContainerState.RUNNING),
        ("created", ContainerState.CREATED),
        ("exited", ContainerState.STOPPED),
        ("paused", ContainerState.STOPPED),
    ])
    @patch('docker.from_env')
    def test_status_maps_runtime_state(self, mock_from_env, docker_status, expected, mock_docker_client):
        mock_from_env.return_value = mock_docker_client
        mock_docker_client.containers.get.return_value = make_container(docker_status)

        runtime = RuntimeClient()

        assert runtime.status("oracle-free") is expected
        mock_docker_client.containers.get.assert_called_with("oracle-free")

    @patch('docker.from_env')
    def test_status_absent(self, mock_from_env, mock_docker_client):
        mock_from_env.return_value = mock_docker_client
        mock_docker_client.containers.get.side_effect = docker.errors.NotFound("Not found")

        runtime = RuntimeClient()

        assert runtime.status("oracle-free") is ContainerState.ABSENT
        assert runtime.exists("oracle-free") is False

    @patch('docker.from_env')
    def test_exists_true(self, mock_from_env, mock_docker_client):
        mock_from_env.return_value = mock_docker_client
        mock_docker_client.containers.get.return_value = make_container()

        assert RuntimeClient().exists("oracle-free") is True

    @patch('docker.from_env')
    def test_inspect_api_error(self, mock_from_env, mock_docker_client):
        mock_from_env.return_value = mock_docker_client
        mock_docker_client.containers.get.side_effect = docker.errors.APIError("server error")

        with pytest.raises(RuntimeCommandError) as excinfo:
            RuntimeClient().exists("oracle-free")
        assert excinfo.value.verb == "inspect"

    @patch('docker.from_env')
    def test_describe(self, mock_from_env, mock_docker_client):
        mock_from_env.return_value = mock_docker_client
        mock_docker_client.containers.get.return_value = make_container()

        info = RuntimeClient().describe("oracle-free")

        assert info.id == "abc123"
        assert info.image == "gvenzl/oracle-free:23"
        assert info.status == "running"
        assert info.ports == "0.0.0.0:1521->1521/tcp"

    @patch('docker.from_env')
    def test_describe_absent(self, mock_from_env, mock_docker_client):
        mock_from_env.return_value = mock_docker_client
        mock_docker_client.containers.get.side_effect = docker.errors.NotFound("Not found")

        with pytest.raises(ContainerNotFoundError):
            RuntimeClient().describe("oracle-free")

    @patch('docker.from_env')
    def test_pull_image(self, mock_from_env, mock_docker_client):
        mock_from_env.return_value = mock_docker_client

        RuntimeClient().pull_image("gvenzl/oracle-free:23")

        mock_docker_client.images.pull.assert_called_once_with("gvenzl/oracle-free:23")

    @patch('docker.from_env')
    def test_pull_image_failure(self, mock_from_env, mock_docker_client):
        mock_from_env.return_value = mock_docker_client
        mock_docker_client.images.pull.side_effect = docker.errors.APIError("pull access denied")

        with pytest.raises(PullFailedError) as excinfo:
            RuntimeClient().pull_image("nope:latest")
        assert excinfo.value.verb == "pull"

    @patch('docker.from_env')
    def test_create(self, mock_from_env, mock_docker_client):
        mock_from_env.return_value = mock_docker_client
        spec = CreateSpec(
            name="oracle-free",
            image="gvenzl/oracle-free:23",
            ports=PortMapping(1522, 1521),
            resources=ResourceLimits("4g", 2.0),
            volume=NamedVolume("oracle-free-data"),
            mount_target="/opt/oracle/oradata",
            environment={"ORACLE_PWD": "secret"},
        )

        RuntimeClient().create(spec)

        mock_docker_client.containers.create.assert_called_once_with(
            image="gvenzl/oracle-free:23",
            name="oracle-free",
            detach=True,
            ports={"1521/tcp": 1522},
            environment={"ORACLE_PWD": "secret"},
            volumes={"oracle-free-data": {"bind": "/opt/oracle/oradata", "mode": "rw"}},
            mem_limit="4g",
            nano_cpus=2_000_000_000,
        )

    @patch('docker.from_env')
    def test_create_failure(self, mock_from_env, mock_docker_client):
        mock_from_env.return_value = mock_docker_client
        mock_docker_client.containers.create.side_effect = docker.errors.APIError("Conflict")
        spec = CreateSpec(
            name="oracle-free",
            image="gvenzl/oracle-free:23",
            ports=PortMapping(1521, 1521),
            resources=ResourceLimits("4g", 2.0),
            volume=NamedVolume("oracle-free-data"),
            mount_target="/opt/oracle/oradata",
        )

        with pytest.raises(CreateFailedError):
            RuntimeClient().create(spec)

    @pytest.mark.parametrize("verb", ["start", "stop", "remove"])
    @patch('docker.from_env')
    def test_verbs_call_container(self, mock_from_env, verb, mock_docker_client):
        mock_from_env.return_value = mock_docker_client
        container = make_container()
        mock_docker_client.containers.get.return_value = container

        getattr(RuntimeClient(), verb)("oracle-free")

        getattr(container, verb).assert_called_once()

    @pytest.mark.parametrize("verb", ["start", "stop", "remove"])
    @patch('docker.from_env')
    def test_verb_failure_reports_verb(self, mock_from_env, verb, mock_docker_client):
        mock_from_env.return_value = mock_docker_client
        container = make_container()
        getattr(container, verb).side_effect = docker.errors.APIError("boom")
        mock_docker_client.containers.get.return_value = container

        with pytest.raises(RuntimeCommandError) as excinfo:
            getattr(RuntimeClient(), verb)("oracle-free")
        assert excinfo.value.verb == verb

    @patch('docker.from_env')
    def test_stream_logs(self, mock_from_env, mock_docker_client):
        mock_from_env.return_value = mock_docker_client
        container = make_container()
        container.logs.return_value = iter([b"Starting\n", b"DATABASE IS READY\n"])
        mock_docker_client.containers.get.return_value = container
        written = []

        RuntimeClient().stream_logs("oracle-free", written.append)

        container.logs.assert_called_once_with(stream=True, follow=True)
        assert written == ["Starting\n", "DATABASE IS READY\n"]

    @patch('container_lifecycle.core.runtime_client.subprocess.run')
    @patch('docker.from_env')
    def test_exec_interactive(self, mock_from_env, mock_subprocess_run, mock_docker_client):
        mock_from_env.return_value = mock_docker_client
        mock_subprocess_run.return_value = Mock(returncode=0)

        code = RuntimeClient().exec_interactive("oracle-free", ["bash"])

        assert code == 0
        docker_cmd = mock_subprocess_run.call_args[0][0]
        assert docker_cmd == ['docker', 'exec', '-it', 'oracle-free', 'bash']

    @patch('container_lifecycle.core.runtime_client.subprocess.run')
    @patch('docker.from_env')
    def test_exec_interactive_without_cli(self, mock_from_env, mock_subprocess_run, mock_docker_client):
        mock_from_env.return_value = mock_docker_client
        mock_subprocess_run.side_effect = FileNotFoundError("docker")

        with pytest.raises(RuntimeServiceError):
            RuntimeClient().exec_interactive("oracle-free", ["bash"])

    @patch('docker.from_env')
    def test_volume_exists(self, mock_from_env, mock_docker_client):
        mock_from_env.return_value = mock_docker_client
        runtime = RuntimeClient()

        assert runtime.volume_exists("oracle-free-data") is True

        mock_docker_client.volumes.get.side_effect = docker.errors.NotFound("Not found")
        assert runtime.volume_exists("oracle-free-data") is False

    @patch('docker.from_env')
    def test_remove_volume(self, mock_from_env, mock_docker_client):
        mock_from_env.return_value = mock_docker_client
        volume = Mock()
        mock_docker_client.volumes.get.return_value = volume

        RuntimeClient().remove_volume("oracle-free-data")

        mock_docker_client.volumes.get.assert_called_once_with("oracle-free-data")
        volume.remove.assert_called_once()

    @patch('docker.from_env')
    def test_remove_volume_in_use(self, mock_from_env, mock_docker_client):
        mock_from_env.return_value = mock_docker_client
        volume = Mock()
        volume.remove.side_effect = docker.errors.APIError("volume is in use")
        mock_docker_client.volumes.get.return_value = volume

        with pytest.raises(RuntimeCommandError) as excinfo:
            RuntimeClient().remove_volume("oracle-free-data")
        assert excinfo.value.verb == "volume-rm"

    @patch('docker.from_env')
    def test_remove_host_dir(self, mock_from_env, mock_docker_client, tmp_path):
        mock_from_env.return_value = mock_docker_client
        data_dir = tmp_path / "oradata"
        (data_dir / "FREE").mkdir(parents=True)
        (data_dir / "FREE" / "system01.dbf").write_text("x")

        RuntimeClient().remove_host_dir(data_dir)

        assert not data_dir.exists()

    @patch('docker.from_env')
    def test_remove_host_dir_failure(self, mock_from_env, mock_docker_client, tmp_path):
        mock_from_env.return_value = mock_docker_client

        with pytest.raises(RuntimeCommandError) as excinfo:
            RuntimeClient().remove_host_dir(Path(tmp_path / "missing"))
        assert excinfo.value.verb == "rm-dir"
