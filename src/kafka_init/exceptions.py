"""Custom exceptions for kafka-init.

This module defines the exception hierarchy used throughout the application.
Every failure raised while producing an output derives from InitError so the
writer can report it and turn it into a failed output.
"""


class InitError(Exception):
    """Base exception for all kafka-init errors.

    All custom exceptions in this package inherit from this class,
    allowing callers to catch all kafka-init errors with a single
    except clause if desired.
    """

    pass


class ConfigError(InitError):
    """Raised when the environment does not describe a valid configuration.

    This can occur when:
    - NODE_NAME is missing or empty
    - A boolean flag holds something other than true/false
    - EXTERNAL_ADDRESS_TYPE names an unknown address type
    """

    pass


class ClusterConnectionError(InitError):
    """Raised when connection to the Kubernetes cluster fails.

    This can occur when:
    - Neither the in-cluster nor the kubeconfig configuration can be loaded
    - The API server is unreachable
    """

    pass


class ClusterApiError(InitError):
    """Raised when the Kubernetes API rejects a request.

    Typical causes are a missing node or a service account without
    permission to read nodes or list secrets.
    """

    pass


class AddressNotFoundError(InitError):
    """Raised when a node has no address usable as the default address."""

    pass


class RackLabelMissingError(InitError):
    """Raised when a node does not carry the configured rack topology label."""

    pass


class CredentialError(InitError):
    """Base exception for credential Secrets that cannot build a JAAS config."""

    pass


class NoCredentialsError(CredentialError):
    """Raised when the namespace holds no Secrets at all."""

    pass


class NoMatchingCredentialsError(CredentialError):
    """Raised when no Secret name starts with the configured prefix."""

    pass


class AdminCredentialMissingError(CredentialError):
    """Raised when no usable admin Secret exists.

    This covers both a missing ``<prefix>-admin`` Secret and an admin
    Secret that carries no entries.
    """

    pass


class AmbiguousAdminCredentialError(CredentialError):
    """Raised when more than one Secret name starts with ``<prefix>-admin``."""

    pass


class CredentialDecodeError(CredentialError):
    """Raised when a Secret entry is not valid base64-encoded UTF-8 text."""

    pass


class WriteError(InitError):
    """Raised when a generated file cannot be written to the init folder."""

    pass
