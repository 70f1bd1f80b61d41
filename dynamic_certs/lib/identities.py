"""Client identity selection."""

from .config import DEFAULT_USERNAME


def build_identity_set(client_username: str) -> frozenset[str]:
    """Return the usernames that need a client certificate.

    The administrative default user is always certified, so the cluster stays
    manageable even when a separate application user is configured.
    """
    return frozenset({client_username, DEFAULT_USERNAME})
