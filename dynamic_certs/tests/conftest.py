"""Test fixtures for dynamic_certs tests."""

import logging
from collections.abc import Generator
from unittest.mock import MagicMock

import pytest

from dynamic_certs.lib.commands import CommandBuilder
from dynamic_certs.lib.config import CertStoreLocations
from dynamic_certs.lib.logging_config import LOGGER, LOGGER_NAME
from dynamic_certs.lib.models import Invocation, InvocationResult
from dynamic_certs.lib.process_runner import ProcessRunner


@pytest.fixture(autouse=True)
def restore_logger() -> Generator[None]:
    """Reset logger level and propagation changed by a test."""
    level = LOGGER.level
    propagate = LOGGER.propagate
    yield
    LOGGER.setLevel(level)
    LOGGER.propagate = propagate


@pytest.fixture
def propagating_logger() -> logging.Logger:
    """Let caplog see provisioning log records."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.propagate = True
    return logger


@pytest.fixture
def three_name_env() -> dict[str, str]:
    """Environment with three node names and no client username."""
    return {"NODE_ALTERNATIVE_NAMES": "node1 node2.example.com 10.0.0.5"}


@pytest.fixture
def app_user_env() -> dict[str, str]:
    """Environment with a single node name and an application user."""
    return {"NODE_ALTERNATIVE_NAMES": "db", "CLIENT_USERNAME": "app"}


@pytest.fixture
def locations() -> CertStoreLocations:
    """Return test certificate store locations."""
    return CertStoreLocations(certs_dir="/tmp/test-certs", ca_key="/tmp/test-key/ca.key")


@pytest.fixture
def command_builder(locations: CertStoreLocations) -> CommandBuilder:
    """Return command builder using a test binary path and test locations."""
    return CommandBuilder(executable="/test/cockroach", locations=locations)


def _succeed(invocation: Invocation) -> InvocationResult:
    return InvocationResult(exit_code=0, command=invocation.description)


@pytest.fixture
def mock_runner() -> MagicMock:
    """Return mocked process runner where every command succeeds."""
    runner = MagicMock(spec=ProcessRunner)
    runner.run.side_effect = _succeed
    return runner
