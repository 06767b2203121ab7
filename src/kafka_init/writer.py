"""Init folder writer.

This module provides the InitWriter class, which produces each of the init
container outputs: it fetches the cluster snapshot, runs the matching
generator and hands the result to the FileEmitter.
"""

from kafka_init import console
from kafka_init.cluster import Cluster
from kafka_init.config import InitConfig
from kafka_init.emitter import FileEmitter
from kafka_init.exceptions import InitError
from kafka_init.generators import build_auth_config, render_addresses, resolve_rack
from kafka_init.models import ArtifactName, GeneratedArtifact


class InitWriter:
    """Collects and writes the configuration gathered by the init container.

    Each write method returns whether its output was produced. Failures are
    reported on the console rather than raised.

    Attributes:
        cluster: Cluster used to read nodes and secrets.
        config: The resolved configuration.
        emitter: FileEmitter targeting the init folder.

    """

    def __init__(self, cluster: Cluster, config: InitConfig, emitter: FileEmitter | None = None) -> None:
        self.cluster = cluster
        self.config = config
        self.emitter = emitter if emitter is not None else FileEmitter(config.init_folder)

    def write_rack(self) -> bool:
        """Write the rack id of the node to rack.id."""
        key = self.config.rack_topology_key
        if key is None:
            console.error("No rack topology key configured")
            return False

        console.action("Resolving rack id from node label ", console.highlight(key))
        try:
            node = self.cluster.get_node(self.config.node_name)
            rack_id = resolve_rack(node, key)
        except InitError as e:
            console.error(str(e))
            return False

        console.info(f"Rack: {key} = {rack_id}")
        return self.emitter.write(GeneratedArtifact(ArtifactName.RACK_ID, rack_id))

    def write_external_address(self) -> bool:
        """Write the node addresses as shell exports to external.address."""
        console.action("Resolving external addresses")
        try:
            node = self.cluster.get_node(self.config.node_name)
            content = render_addresses(node, self.config.address_type)
        except InitError as e:
            console.error(str(e))
            return False

        return self.emitter.write(GeneratedArtifact(ArtifactName.EXTERNAL_ADDRESS, content))

    def write_auth_config(self, namespace: str) -> bool:
        """Write the FWSS credential Secrets of a namespace to jaas.conf.

        Args:
            namespace: The namespace the Kafka cluster runs in.

        """
        prefix = self.config.fwss_secrets_prefix
        console.action("Processing secrets starting with ", console.highlight(prefix))
        try:
            credentials = self.cluster.list_credentials(namespace)
            content = build_auth_config(namespace, credentials, prefix)
        except InitError as e:
            console.error(str(e))
            return False

        return self.emitter.write(GeneratedArtifact(ArtifactName.JAAS_CONF, content))
