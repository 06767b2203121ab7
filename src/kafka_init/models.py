"""Data models for kafka-init.

This module provides the plain, immutable snapshots the generators work on,
decoupled from the Kubernetes client's API objects.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple


class AddressType(str, Enum):
    """Kubernetes node address types.

    The declared order is significant: it is the order in which the typed
    export lines are written to the external address file.
    """

    EXTERNAL_DNS = "ExternalDNS"
    EXTERNAL_IP = "ExternalIP"
    INTERNAL_DNS = "InternalDNS"
    INTERNAL_IP = "InternalIP"
    HOSTNAME = "Hostname"

    @property
    def canonical(self) -> str:
        """The lowercase form used when matching node addresses."""
        return self.value.lower()

    @property
    def env_name(self) -> str:
        """The upper-case form used in export variable names."""
        return self.value.upper()

    def matches(self, address_type: str | None) -> bool:
        """Check whether a raw node address type denotes this member.

        Args:
            address_type: The type string reported by the node.

        Returns:
            True when the strings are equal ignoring case.

        """
        return address_type is not None and address_type.lower() == self.canonical

    @classmethod
    def parse(cls, text: str) -> "AddressType":
        """Parse an address type name case-insensitively.

        Args:
            text: The address type name, e.g. 'ExternalIP' or 'externalip'.

        Returns:
            The matching AddressType member.

        Raises:
            ValueError: If the text names no known address type.

        """
        for member in cls:
            if member.matches(text):
                return member
        raise ValueError(f"Unknown address type '{text}'")


class NodeAddress(NamedTuple):
    """A single address reported in a node's status.

    Attributes:
        type: The raw address type string (may be unknown to AddressType).
        address: The address value.

    """

    type: str
    address: str


@dataclass(frozen=True, slots=True)
class NodeInfo:
    """Read-only snapshot of a Kubernetes node.

    Attributes:
        name: The node name.
        labels: The node's metadata labels.
        addresses: The node's status addresses in the order the API reports them.

    """

    name: str
    labels: dict[str, str] = field(default_factory=dict)
    addresses: tuple[NodeAddress, ...] = ()


@dataclass(frozen=True, slots=True)
class CredentialObject:
    """A credential Secret reduced to what the JAAS builder needs.

    Attributes:
        name: The Secret name.
        entries: Mapping of entry name to base64-encoded payload.

    """

    name: str
    entries: dict[str, str] = field(default_factory=dict)


class ArtifactName(str, Enum):
    """File names of the artifacts written to the init folder."""

    RACK_ID = "rack.id"
    EXTERNAL_ADDRESS = "external.address"
    JAAS_CONF = "jaas.conf"

    @property
    def sensitive(self) -> bool:
        """Whether the content must stay out of the console output."""
        return self is ArtifactName.JAAS_CONF


@dataclass(frozen=True, slots=True)
class GeneratedArtifact:
    """Generated file content paired with its target file name."""

    name: ArtifactName
    content: str
