"""Deployment configuration and certificate store locations."""

from collections.abc import Mapping
from dataclasses import dataclass

from .errors import MissingConfigurationError
from .logging_config import LOGGER

NODE_ALTERNATIVE_NAMES = "NODE_ALTERNATIVE_NAMES"
CLIENT_USERNAME = "CLIENT_USERNAME"

DEFAULT_USERNAME = "root"
COCKROACH_BINARY = "/cockroach"
COCKROACH_CERTS_DIR = "/.cockroach-certs"
COCKROACH_CA_KEY = "/.cockroach-key/ca.key"


@dataclass(frozen=True)
class CertStoreLocations:
    """Filesystem paths handed to every cockroach cert invocation."""

    certs_dir: str = COCKROACH_CERTS_DIR
    ca_key: str = COCKROACH_CA_KEY


@dataclass(frozen=True)
class DeploymentConfig:
    """Resolved deployment parameters for a single provisioning run."""

    node_alternative_names: tuple[str, ...]
    client_username: str = DEFAULT_USERNAME

    def __post_init__(self) -> None:
        if not self.node_alternative_names:
            raise ValueError("node_alternative_names must not be empty")


def read_config(source: Mapping[str, str]) -> DeploymentConfig:
    """Resolve deployment parameters from a key/value source.

    Alternative names are split on runs of whitespace and passed through
    as-is: no deduplication, reordering or validation.

    Args:
        source: Configuration lookup, usually os.environ

    Returns:
        DeploymentConfig with the node alternative names and client username

    Raises:
        MissingConfigurationError: If NODE_ALTERNATIVE_NAMES is unset or blank
    """
    raw_names = source.get(NODE_ALTERNATIVE_NAMES)
    if raw_names is None or not raw_names.strip():
        raise MissingConfigurationError(NODE_ALTERNATIVE_NAMES)

    node_alternative_names = tuple(raw_names.split())
    client_username = source.get(CLIENT_USERNAME) or DEFAULT_USERNAME

    LOGGER.info("%s is [%s]", NODE_ALTERNATIVE_NAMES, ", ".join(node_alternative_names))
    LOGGER.info("%s is [%s]", CLIENT_USERNAME, client_username)

    return DeploymentConfig(
        node_alternative_names=node_alternative_names,
        client_username=client_username,
    )
