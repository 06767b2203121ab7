"""Tests for writer.py module."""

import dataclasses
from unittest.mock import MagicMock

import pytest

from kafka_init import console
from kafka_init.emitter import FileEmitter
from kafka_init.exceptions import ClusterApiError
from kafka_init.models import AddressType, CredentialObject, NodeAddress, NodeInfo
from kafka_init.writer import InitWriter


@pytest.fixture
def mock_cluster(node_info, credentials):
    """Cluster returning the sample node and secrets."""
    cluster = MagicMock()
    cluster.get_node.return_value = node_info
    cluster.list_credentials.return_value = credentials
    return cluster


class TestWriteRack:
    """Tests for rack.id output."""

    def test_write_rack(self, mock_cluster, init_config, tmp_path):
        """Test that the label value is written."""
        writer = InitWriter(mock_cluster, init_config)

        assert writer.write_rack() is True
        assert (tmp_path / "init" / "rack.id").read_text() == "us-east-1a"
        mock_cluster.get_node.assert_called_once_with("n1")

    def test_write_rack_missing_label(self, mock_cluster, init_config, tmp_path):
        """Test that a missing label fails the output without a file."""
        config = dataclasses.replace(init_config, rack_topology_key="rack")

        assert InitWriter(mock_cluster, config).write_rack() is False
        assert not (tmp_path / "init" / "rack.id").exists()

    def test_write_rack_without_key(self, mock_cluster, init_config):
        """Test that rack output fails without a topology key."""
        config = dataclasses.replace(init_config, rack_topology_key=None)

        assert InitWriter(mock_cluster, config).write_rack() is False
        mock_cluster.get_node.assert_not_called()

    def test_write_rack_api_error(self, mock_cluster, init_config):
        """Test that API errors fail the output."""
        mock_cluster.get_node.side_effect = ClusterApiError("Failed to read node n1: 404 Not Found")

        assert InitWriter(mock_cluster, init_config).write_rack() is False


class TestWriteExternalAddress:
    """Tests for external.address output."""

    def test_write_external_address(self, mock_cluster, init_config, tmp_path):
        """Test that every address line is written."""
        assert InitWriter(mock_cluster, init_config).write_external_address() is True

        content = (tmp_path / "init" / "external.address").read_text()
        assert content.startswith("export STRIMZI_NODEPORT_DEFAULT_ADDRESS=10.0.0.1")
        assert len(content.splitlines()) == 1 + len(AddressType)

    def test_preferred_address_type(self, mock_cluster, init_config, tmp_path):
        """Test that the configured address type selects the default."""
        config = dataclasses.replace(init_config, address_type=AddressType.EXTERNAL_IP)

        InitWriter(mock_cluster, config).write_external_address()

        content = (tmp_path / "init" / "external.address").read_text()
        assert content.startswith("export STRIMZI_NODEPORT_DEFAULT_ADDRESS=1.2.3.4")

    def test_no_address(self, mock_cluster, init_config):
        """Test that a missing default address fails the output."""
        config = dataclasses.replace(init_config, address_type=AddressType.EXTERNAL_DNS)

        assert InitWriter(mock_cluster, config).write_external_address() is False


class TestWriteAuthConfig:
    """Tests for jaas.conf output."""

    def test_write_auth_config(self, mock_cluster, init_config, tmp_path):
        """Test that the JAAS config is written."""
        assert InitWriter(mock_cluster, init_config).write_auth_config("kafka") is True

        content = (tmp_path / "init" / "jaas.conf").read_text()
        assert 'username="admin"' in content
        assert content.endswith('user_user1="pass2";\n};')
        mock_cluster.list_credentials.assert_called_once_with("kafka")

    def test_ambiguous_admin(self, mock_cluster, init_config, credentials, tmp_path):
        """Test that two admin secrets fail the output."""
        credentials.append(CredentialObject(name="fwss-admin-old", entries={"old": "b2xk"}))

        assert InitWriter(mock_cluster, init_config).write_auth_config("kafka") is False
        assert not (tmp_path / "init" / "jaas.conf").exists()

    def test_write_failure(self, mock_cluster, init_config, tmp_path):
        """Test that an unwritable init folder fails the output."""
        writer = InitWriter(mock_cluster, init_config, FileEmitter(tmp_path / "missing"))

        assert writer.write_auth_config("kafka") is False


class TestBracketedValues:
    """Tests for values that look like rich markup."""

    def test_bracketed_rack_value_written(self, mock_cluster, init_config, tmp_path):
        """Test that a rack label value with brackets is logged and written verbatim."""
        mock_cluster.get_node.return_value = NodeInfo(name="n1", labels={"zone": "[/us-east-1a]"})

        with console.console.capture() as capture:
            assert InitWriter(mock_cluster, init_config).write_rack() is True

        assert (tmp_path / "init" / "rack.id").read_text() == "[/us-east-1a]"
        assert "zone = [/us-east-1a]" in capture.get()

    def test_bracketed_error_message_reported(self, mock_cluster, init_config):
        """Test that an error message with brackets is printed, not raised."""
        mock_cluster.get_node.side_effect = ClusterApiError("Failed to read node [/n1]: 404 Not Found")

        with console.console.capture() as capture:
            assert InitWriter(mock_cluster, init_config).write_external_address() is False

        assert "Failed to read node [/n1]" in capture.get()

    def test_bracketed_address_type_listed(self, mock_cluster, init_config, tmp_path):
        """Test that unknown bracketed address types appear in the diagnostic."""
        mock_cluster.get_node.return_value = NodeInfo(
            name="n1", addresses=(NodeAddress("[ExternalIP]", "1.2.3.4"),)
        )
        config = dataclasses.replace(init_config, address_type=AddressType.EXTERNAL_IP)

        with console.console.capture() as capture:
            assert InitWriter(mock_cluster, config).write_external_address() is False

        assert "[ExternalIP]" in capture.get()
