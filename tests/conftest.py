"""
Shared fixtures for n8nctl tests.
"""

from pathlib import Path
from unittest.mock import Mock, patch

import pytest
from click.testing import CliRunner

from n8nctl.constants import REQUIRED_CERTIFICATES
from n8nctl.core.config_loader import StackConfig
from n8nctl.models.results import ExecutionResult

COMPOSE_METHODS = (
    "version",
    "up",
    "down",
    "restart",
    "pull",
    "prune_images",
    "scale",
    "ps",
    "logs",
    "exec_to_file",
)


def ok(**kwargs) -> ExecutionResult:
    return ExecutionResult(returncode=0, **kwargs)


def failed(stderr: str = "boom", returncode: int = 1) -> ExecutionResult:
    return ExecutionResult(returncode=returncode, stderr=stderr)


def write_descriptor(root: Path) -> Path:
    path = root / "docker-compose.yml"
    path.write_text("services:\n  n8n:\n    image: n8nio/n8n\n")
    return path


def write_env(root: Path, content: str = "N8N_HOST=localhost\n") -> Path:
    path = root / ".env"
    path.write_text(content)
    return path


def write_template(root: Path, content: str = "N8N_HOST=\n") -> Path:
    path = root / ".env.example"
    path.write_text(content)
    return path


def write_certificates(root: Path, names=REQUIRED_CERTIFICATES) -> Path:
    cert_dir = root / "files"
    cert_dir.mkdir(exist_ok=True)
    for name in names:
        (cert_dir / name).write_text("-----BEGIN CERTIFICATE-----\n")
    return cert_dir


def make_compose_mock(docker_available: bool = True) -> Mock:
    """A ComposeService stand-in where every engine call succeeds."""
    compose = Mock()
    compose.is_docker_available.return_value = docker_available
    for method in COMPOSE_METHODS:
        getattr(compose, method).return_value = ok()
    return compose


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def deployment(tmp_path):
    """A fully prepared deployment directory."""
    write_descriptor(tmp_path)
    write_env(tmp_path)
    write_certificates(tmp_path)
    return tmp_path


@pytest.fixture
def stack_config(deployment):
    return StackConfig.defaults(deployment)


@pytest.fixture
def compose():
    return make_compose_mock()


@pytest.fixture
def patched_compose(compose):
    """Route every StackCommand's engine calls to the compose mock."""
    with patch("n8nctl.base.stack_command.ComposeService", return_value=compose):
        yield compose
