#!/usr/bin/env python3
"""Provision CA, client and node certificates for a CockroachDB deployment."""

import argparse
import os
import signal
import sys

from dynamic_certs.lib.commands import CommandBuilder
from dynamic_certs.lib.config import (
    COCKROACH_BINARY,
    COCKROACH_CA_KEY,
    COCKROACH_CERTS_DIR,
    CertStoreLocations,
)
from dynamic_certs.lib.errors import (
    ExternalCommandError,
    MissingConfigurationError,
    ProvisioningError,
)
from dynamic_certs.lib.logging_config import LOGGER, set_log_level
from dynamic_certs.lib.process_runner import ProcessRunner
from dynamic_certs.lib.provisioner import CertProvisioner


def _interrupt_on_sigterm(signum, frame):
    raise KeyboardInterrupt(f"received signal {signum}")


def main(argv: list[str] | None = None) -> int:
    """Provision all cluster certificates from environment configuration.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = argparse.ArgumentParser(
        description="Provision CockroachDB CA, client and node certificates"
    )
    parser.add_argument(
        "--cockroach-bin",
        default=COCKROACH_BINARY,
        help=f"Path to the cockroach binary (default: {COCKROACH_BINARY})",
    )
    parser.add_argument(
        "--certs-dir",
        default=COCKROACH_CERTS_DIR,
        help=f"Certificate output directory (default: {COCKROACH_CERTS_DIR})",
    )
    parser.add_argument(
        "--ca-key",
        default=COCKROACH_CA_KEY,
        help=f"CA private key path (default: {COCKROACH_CA_KEY})",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("LOG_LEVEL", "INFO"),
        help="Log level (default: $LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Log the cockroach commands without running them",
    )
    args = parser.parse_args(argv)

    try:
        set_log_level(args.log_level)
    except ValueError as e:
        parser.error(str(e))

    provisioner = CertProvisioner(
        config_source=os.environ,
        command_builder=CommandBuilder(
            executable=args.cockroach_bin,
            locations=CertStoreLocations(certs_dir=args.certs_dir, ca_key=args.ca_key),
        ),
        runner=ProcessRunner(inherit_stdio=True),
        dry_run=args.dry_run,
    )

    previous_handler = signal.signal(signal.SIGTERM, _interrupt_on_sigterm)
    try:
        if args.dry_run:
            LOGGER.info("DRY RUN - no cockroach commands will be executed")

        result = provisioner.run()

        LOGGER.info("Certificate provisioning complete:")
        LOGGER.info("  Commands: %d", result.command_count)
        LOGGER.info("  Certs dir: %s", args.certs_dir)
        return 0

    except MissingConfigurationError as e:
        LOGGER.error("Configuration error: %s", e)
        return 1
    except ExternalCommandError as e:
        LOGGER.error(
            "Certificate command failed with exit code %d: %s", e.exit_code, e.command
        )
        return 1
    except ProvisioningError as e:
        LOGGER.error("Certificate provisioning failed: %s", e)
        return 1
    except KeyboardInterrupt as e:
        LOGGER.error("Certificate provisioning interrupted: %s", str(e) or "keyboard interrupt")
        return 1
    finally:
        signal.signal(signal.SIGTERM, previous_handler)


if __name__ == "__main__":
    sys.exit(main())
