"""Shared test fixtures for kafka-init tests."""

import base64
from unittest.mock import MagicMock, patch

import pytest
from kubernetes.client import V1Node, V1NodeAddress, V1NodeStatus, V1ObjectMeta, V1Secret, V1SecretList

from kafka_init.config import InitConfig
from kafka_init.models import CredentialObject, NodeAddress, NodeInfo


def b64(text: str) -> str:
    """Encode text the way Kubernetes stores Secret data."""
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


@pytest.fixture
def mock_incluster_config():
    """Mock in-cluster config loading."""
    with patch("kubernetes.config.load_incluster_config") as mock:
        yield mock


@pytest.fixture
def mock_kube_config():
    """Mock kubeconfig loading."""
    with patch("kubernetes.config.load_kube_config") as mock:
        yield mock


@pytest.fixture
def mock_api_client():
    """Mock ApiClient so no connection pool is created."""
    with patch("kubernetes.client.ApiClient") as mock:
        yield mock.return_value


@pytest.fixture
def mock_core_v1_api():
    """Mock CoreV1Api for node and secret lookups."""
    with patch("kubernetes.client.CoreV1Api") as mock:
        api_instance = MagicMock()
        mock.return_value = api_instance
        yield api_instance


@pytest.fixture
def cluster_mocks(mock_incluster_config, mock_kube_config, mock_api_client, mock_core_v1_api):
    """Combined fixture for creating a Cluster instance without cluster access."""
    return {
        "incluster": mock_incluster_config,
        "kubeconfig": mock_kube_config,
        "api_client": mock_api_client,
        "core_api": mock_core_v1_api,
    }


@pytest.fixture
def v1_node():
    """Sample Kubernetes node API object."""
    return V1Node(
        metadata=V1ObjectMeta(name="n1", labels={"topology.kubernetes.io/zone": "us-east-1a"}),
        status=V1NodeStatus(
            addresses=[
                V1NodeAddress(type="InternalIP", address="10.0.0.1"),
                V1NodeAddress(type="ExternalIP", address="1.2.3.4"),
                V1NodeAddress(type="Hostname", address="n1.local"),
            ]
        ),
    )


@pytest.fixture
def v1_secret_list():
    """Sample Kubernetes secret list API object."""
    return V1SecretList(
        items=[
            V1Secret(metadata=V1ObjectMeta(name="fwss-admin"), data={"admin": b64("pass1")}),
            V1Secret(metadata=V1ObjectMeta(name="fwss-user1"), data={"user1": b64("pass2")}),
            V1Secret(metadata=V1ObjectMeta(name="kafka-cluster-ca"), data={"ca.crt": b64("cert")}),
        ]
    )


@pytest.fixture
def node_info():
    """Node snapshot with two address types."""
    return NodeInfo(
        name="n1",
        labels={"zone": "us-east-1a"},
        addresses=(NodeAddress("InternalIP", "10.0.0.1"), NodeAddress("ExternalIP", "1.2.3.4")),
    )


@pytest.fixture
def credentials():
    """Credential Secrets with one admin and one user."""
    return [
        CredentialObject(name="fwss-admin", entries={"admin": "cGFzczE="}),
        CredentialObject(name="fwss-user1", entries={"user1": "cGFzczI="}),
    ]


@pytest.fixture
def init_config(tmp_path):
    """Configuration writing into a temporary init folder."""
    namespace_file = tmp_path / "namespace"
    namespace_file.write_text("kafka\n")
    init_folder = tmp_path / "init"
    init_folder.mkdir()
    return InitConfig(
        node_name="n1",
        init_folder=str(init_folder),
        rack_topology_key="zone",
        external_address=True,
        authentication_is_sasl_scram_and_plain="true",
        namespace_file=str(namespace_file),
    )
