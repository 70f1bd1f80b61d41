"""Value objects and result models for certificate provisioning."""

import shlex
from dataclasses import dataclass, field
from enum import Enum

from .config import DeploymentConfig


@dataclass(frozen=True)
class Invocation:
    """A single external tool command: executable plus ordered arguments."""

    executable: str
    args: tuple[str, ...]

    @property
    def argv(self) -> list[str]:
        """Full argument vector, executable first."""
        return [self.executable, *self.args]

    @property
    def description(self) -> str:
        """Shell-quoted command line for logs and error messages."""
        return shlex.join(self.argv)


@dataclass(frozen=True)
class InvocationResult:
    """Outcome of running one invocation."""

    exit_code: int
    command: str


class ProvisioningStage(Enum):
    """Orchestrator states, in the order a successful run visits them."""

    START = "start"
    CONFIG_LOADED = "config_loaded"
    CA_READY = "ca_ready"
    CLIENTS_READY = "clients_ready"
    NODE_READY = "node_ready"
    DONE = "done"
    FAILED = "failed"


@dataclass
class ProvisioningResult:
    """Result from a completed provisioning run.

    Contains the resolved configuration and every invocation result in the
    order the commands were run.
    """

    config: DeploymentConfig
    results: list[InvocationResult] = field(default_factory=list)
    dry_run: bool = False

    @property
    def command_count(self) -> int:
        return len(self.results)
