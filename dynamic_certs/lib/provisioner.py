"""Certificate provisioning orchestrator."""

from collections.abc import Mapping

from .commands import CommandBuilder
from .config import read_config
from .identities import build_identity_set
from .logging_config import LOGGER
from .models import Invocation, InvocationResult, ProvisioningResult, ProvisioningStage
from .process_runner import ProcessRunner


class CertProvisioner:
    """Provisions the CA, client and node certificates for one deployment."""

    def __init__(
        self,
        config_source: Mapping[str, str],
        command_builder: CommandBuilder | None = None,
        runner: ProcessRunner | None = None,
        dry_run: bool = False,
    ) -> None:
        """Initialize provisioner.

        Args:
            config_source: Key/value lookup holding the deployment parameters
            command_builder: Builder for cockroach cert invocations
            runner: Executes invocations; defaults to inheriting this process's stdio
            dry_run: Log the invocations without starting any process
        """
        self.config_source = config_source
        self.command_builder = command_builder or CommandBuilder()
        self.runner = runner or ProcessRunner()
        self.dry_run = dry_run
        self.stage = ProvisioningStage.START

    def run(self) -> ProvisioningResult:
        """Run every provisioning stage in order, stopping at the first failure.

        1. Read deployment configuration
        2. Create the CA certificate and key
        3. Create a client certificate for each identity
        4. Create the node certificate for all alternative names

        Returns:
            ProvisioningResult with the config and each invocation result

        Raises:
            ProvisioningError: Whatever error stopped the run, unchanged
        """
        if self.stage is not ProvisioningStage.START:
            raise RuntimeError(f"provisioner already ran (stage: {self.stage.value})")

        try:
            return self._provision()
        except (Exception, KeyboardInterrupt):
            self.stage = ProvisioningStage.FAILED
            raise

    def _provision(self) -> ProvisioningResult:
        config = read_config(self.config_source)
        result = ProvisioningResult(config=config, dry_run=self.dry_run)
        self._advance(ProvisioningStage.CONFIG_LOADED)

        result.results.append(self._execute(self.command_builder.build_create_ca_command()))
        self._advance(ProvisioningStage.CA_READY)

        # Order does not matter, sorting keeps logs stable between runs
        for username in sorted(build_identity_set(config.client_username)):
            invocation = self.command_builder.build_create_client_command(username)
            result.results.append(self._execute(invocation))
        self._advance(ProvisioningStage.CLIENTS_READY)

        invocation = self.command_builder.build_create_node_command(config.node_alternative_names)
        result.results.append(self._execute(invocation))
        self._advance(ProvisioningStage.NODE_READY)

        self._advance(ProvisioningStage.DONE)
        return result

    def _execute(self, invocation: Invocation) -> InvocationResult:
        if self.dry_run:
            LOGGER.info("DRY RUN - would run: %s", invocation.description)
            return InvocationResult(exit_code=0, command=invocation.description)
        return self.runner.run(invocation)

    def _advance(self, stage: ProvisioningStage) -> None:
        LOGGER.debug("provisioning stage %s -> %s", self.stage.value, stage.value)
        self.stage = stage
