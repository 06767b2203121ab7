"""Kubernetes cluster interaction utilities.

This module provides the Cluster class, which reads the node the pod runs on
and the credential Secrets of its namespace, and returns them as plain
snapshots.
"""

from typing import Any

from icecream import ic
from kubernetes import client, config
from kubernetes.client.exceptions import ApiException
from kubernetes.config.config_exception import ConfigException
from urllib3.exceptions import MaxRetryError

from kafka_init import console
from kafka_init.exceptions import ClusterApiError, ClusterConnectionError
from kafka_init.models import CredentialObject, NodeAddress, NodeInfo


class Cluster:
    """Read-only access to the Kubernetes API for the init container.

    Attributes:
        api_client: The underlying Kubernetes API client.
        core_v1_api: The CoreV1Api used for node and secret lookups.

    """

    def __init__(self) -> None:
        """Initialize Cluster by loading the client configuration.

        Raises:
            ClusterConnectionError: If no usable configuration is found.

        """
        self._load_config()
        self.api_client: client.ApiClient = client.ApiClient()
        self.core_v1_api: client.CoreV1Api = client.CoreV1Api(self.api_client)

    @staticmethod
    def _load_config() -> None:
        """Load the in-cluster configuration, falling back to kubeconfig.

        Raises:
            ClusterConnectionError: If neither configuration can be loaded.

        """
        try:
            config.load_incluster_config()
            return
        except ConfigException as e:
            ic(e)

        try:
            config.load_kube_config()
        except ConfigException as e:
            raise ClusterConnectionError(f"Invalid or missing cluster configuration: {e}") from e
        console.info("Not running in a pod, using the local kubeconfig")

    def get_node(self, name: str) -> NodeInfo:
        """Fetch a node's labels and addresses.

        Args:
            name: The node name.

        Returns:
            A NodeInfo snapshot of the node.

        Raises:
            ClusterConnectionError: If the cluster is unreachable.
            ClusterApiError: If the API rejects the request.

        """
        with console.spinner(f"Reading node {name}..."):
            node = self._call(self.core_v1_api.read_node, name, what=f"node {name}")

        labels: dict[str, str] = dict(node.metadata.labels or {})
        status_addresses: list[Any] = (node.status.addresses if node.status else None) or []
        addresses = tuple(NodeAddress(type=a.type, address=a.address) for a in status_addresses)
        ic(labels, addresses)

        return NodeInfo(name=name, labels=labels, addresses=addresses)

    def list_credentials(self, namespace: str) -> list[CredentialObject]:
        """List the Secrets of a namespace.

        Args:
            namespace: The namespace to list.

        Returns:
            One CredentialObject per Secret, in API order.

        Raises:
            ClusterConnectionError: If the cluster is unreachable.
            ClusterApiError: If the API rejects the request.

        """
        with console.spinner(f"Listing secrets in namespace {namespace}..."):
            res = self._call(
                self.core_v1_api.list_namespaced_secret, namespace, what=f"secrets in namespace {namespace}"
            )

        credentials = [
            CredentialObject(name=secret.metadata.name, entries=dict(secret.data or {})) for secret in res.items
        ]
        ic([credential.name for credential in credentials])

        return credentials

    @staticmethod
    def _call(method: Any, *args: Any, what: str) -> Any:
        """Invoke an API method, translating client errors.

        Args:
            method: The bound CoreV1Api method.
            *args: Positional arguments for the method.
            what: Description of the requested object for error messages.

        Raises:
            ClusterConnectionError: If the cluster is unreachable.
            ClusterApiError: If the API rejects the request.

        """
        try:
            return method(*args)
        except MaxRetryError as e:
            raise ClusterConnectionError(f"Failed to connect to the Kubernetes cluster: {e.reason}") from e
        except ApiException as e:
            raise ClusterApiError(f"Failed to read {what}: {e.status} {e.reason}") from e

    def close(self) -> None:
        """Close the underlying API client."""
        self.api_client.close()

    def __enter__(self) -> "Cluster":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
