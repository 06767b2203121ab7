"""kafka-init: init container helper for Kafka brokers.

This package reads the node a broker pod is scheduled on and the credential
Secrets of its namespace, and writes the rack id, the external addresses and
the JAAS configuration into the init folder shared with the broker.

Example usage:
    from kafka_init import Cluster, InitWriter, resolve_config

    config = resolve_config(os.environ)
    with Cluster() as cluster:
        InitWriter(cluster, config).write_rack()
"""

__version__ = "0.1.0"

from kafka_init.cli import cli
from kafka_init.cluster import Cluster
from kafka_init.config import InitConfig, resolve_config
from kafka_init.emitter import FileEmitter, write_artifact
from kafka_init.exceptions import (
    AddressNotFoundError,
    AdminCredentialMissingError,
    AmbiguousAdminCredentialError,
    ClusterApiError,
    ClusterConnectionError,
    ConfigError,
    CredentialDecodeError,
    CredentialError,
    InitError,
    NoCredentialsError,
    NoMatchingCredentialsError,
    RackLabelMissingError,
    WriteError,
)
from kafka_init.writer import InitWriter

__all__ = [
    # Version
    "__version__",
    # Main CLI
    "cli",
    # Classes
    "Cluster",
    "FileEmitter",
    "InitConfig",
    "InitWriter",
    # Functions
    "resolve_config",
    "write_artifact",
    # Exceptions
    "InitError",
    "ConfigError",
    "ClusterConnectionError",
    "ClusterApiError",
    "AddressNotFoundError",
    "RackLabelMissingError",
    "CredentialError",
    "NoCredentialsError",
    "NoMatchingCredentialsError",
    "AdminCredentialMissingError",
    "AmbiguousAdminCredentialError",
    "CredentialDecodeError",
    "WriteError",
]
