"""Exceptions raised while provisioning cluster certificates.

Every error aborts the run. None of them are retried: a failure means the
deployment environment needs fixing, and the whole sequence is re-run after.
"""


class ProvisioningError(Exception):
    """Base class for certificate provisioning failures."""


class MissingConfigurationError(ProvisioningError):
    """A required configuration value is absent or empty."""

    def __init__(self, variable: str) -> None:
        self.variable = variable
        super().__init__(f"required configuration '{variable}' is not set")


class ProcessLaunchError(ProvisioningError):
    """The external certificate tool could not be started."""

    def __init__(self, command: str, reason: str) -> None:
        self.command = command
        self.reason = reason
        super().__init__(f"failed to start command ({reason}): {command}")


class ExternalCommandError(ProvisioningError):
    """The external certificate tool ran but exited with a non-zero code."""

    def __init__(self, exit_code: int, command: str) -> None:
        self.exit_code = exit_code
        self.command = command
        super().__init__(
            f"the following command exited ABNORMALLY with code [{exit_code}]: {command}"
        )


class InterruptedWaitError(ProvisioningError):
    """Waiting for the external certificate tool was interrupted."""

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"interrupted while waiting for command: {command}")
