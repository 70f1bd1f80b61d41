"""Builders for cockroach cert command invocations."""

from collections.abc import Sequence

from .config import COCKROACH_BINARY, CertStoreLocations
from .models import Invocation

PKCS8_KEY_FLAG = "--also-generate-pkcs8-key"


class CommandBuilder:
    """Builds `cockroach cert` invocations pinned to one certificate store."""

    def __init__(
        self,
        executable: str = COCKROACH_BINARY,
        locations: CertStoreLocations | None = None,
    ) -> None:
        """Initialize command builder.

        Args:
            executable: Path to the cockroach binary
            locations: Certificate directory and CA key paths
        """
        self.executable = executable
        self.locations = locations or CertStoreLocations()

    def _store_flags(self) -> tuple[str, ...]:
        return (
            "--certs-dir",
            self.locations.certs_dir,
            "--ca-key",
            self.locations.ca_key,
        )

    def _cert_command(self, subcommand: str, *operands: str) -> tuple[str, ...]:
        return ("cert", subcommand, *operands, *self._store_flags())

    def build_create_ca_command(self) -> Invocation:
        """Build the command creating the CA certificate and key."""
        return Invocation(self.executable, self._cert_command("create-ca"))

    def build_create_client_command(self, username: str) -> Invocation:
        """Build the command creating a client certificate for a user.

        A PKCS#8 copy of the client key is requested as well, since JDBC and
        some other drivers cannot read the default key encoding.

        Args:
            username: SQL user the certificate identifies

        Returns:
            Invocation for `cockroach cert create-client`
        """
        args = self._cert_command("create-client", username) + (PKCS8_KEY_FLAG,)
        return Invocation(self.executable, args)

    def build_create_node_command(self, alternative_names: Sequence[str]) -> Invocation:
        """Build the command creating the node certificate.

        Names are kept in the order given; cockroach records them in that
        order on the certificate.

        Args:
            alternative_names: Hostnames and IP addresses for the node

        Returns:
            Invocation for `cockroach cert create-node`
        """
        return Invocation(
            self.executable,
            self._cert_command("create-node", *alternative_names),
        )
