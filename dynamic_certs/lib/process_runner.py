"""Blocking execution of external tool invocations."""

import subprocess

from .errors import ExternalCommandError, InterruptedWaitError, ProcessLaunchError
from .logging_config import LOGGER
from .models import Invocation, InvocationResult


class ProcessRunner:
    """Runs one invocation at a time and waits for it to finish.

    There is no timeout: a child that never exits blocks the caller forever.
    """

    def __init__(self, inherit_stdio: bool = True) -> None:
        """Initialize process runner.

        Args:
            inherit_stdio: Connect the child to this process's stdin/stdout/stderr.
                When False, stdin is closed and output is captured and logged
                at debug level once the child exits.
        """
        self.inherit_stdio = inherit_stdio

    def run(self, invocation: Invocation) -> InvocationResult:
        """Run an invocation to completion.

        Args:
            invocation: Command to execute

        Returns:
            InvocationResult with exit code 0

        Raises:
            ProcessLaunchError: If the executable cannot be started
            InterruptedWaitError: If the wait for the child is interrupted
            ExternalCommandError: If the child exits with a non-zero code
        """
        command = invocation.description
        LOGGER.debug("starting command... %s", command)

        try:
            if self.inherit_stdio:
                process = subprocess.Popen(invocation.argv)
            else:
                process = subprocess.Popen(
                    invocation.argv,
                    stdin=subprocess.DEVNULL,
                    stdout=subprocess.PIPE,
                    stderr=subprocess.PIPE,
                    text=True,
                )
        except OSError as e:
            raise ProcessLaunchError(command, e.strerror or str(e)) from e

        try:
            if self.inherit_stdio:
                exit_code = process.wait()
            else:
                stdout, stderr = process.communicate()
                exit_code = process.returncode
                if stdout:
                    LOGGER.debug("stdout: %s", stdout.rstrip())
                if stderr:
                    LOGGER.debug("stderr: %s", stderr.rstrip())
        except KeyboardInterrupt as e:
            raise InterruptedWaitError(command) from e

        if exit_code != 0:
            raise ExternalCommandError(exit_code, command)

        LOGGER.debug("command exited SUCCESSFULLY with code [%d]", exit_code)
        return InvocationResult(exit_code=exit_code, command=command)
