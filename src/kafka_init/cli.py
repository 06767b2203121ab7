#!/usr/bin/env python
"""Command-line interface for kafka-init.

This module provides the entry point of the init container: it resolves the
configuration from the environment, connects to the cluster and writes each
enabled output to the init folder.
"""

import os
import sys

import click
from icecream import ic

from kafka_init import __version__, console
from kafka_init.cluster import Cluster
from kafka_init.config import InitConfig, resolve_config
from kafka_init.emitter import FileEmitter
from kafka_init.exceptions import ClusterConnectionError, ConfigError
from kafka_init.writer import InitWriter


def write_auth_config(writer: InitWriter, config: InitConfig) -> bool:
    """Write jaas.conf for the namespace the pod runs in.

    Args:
        writer: InitWriter to produce the file with.
        config: The resolved configuration.

    Returns:
        False if the namespace is unknown or the file could not be produced.

    """
    namespace = config.get_namespace()
    if not namespace:
        console.error("Cannot determine the namespace, jaas.conf is not written")
        return False
    return writer.write_auth_config(namespace)


def run(config: InitConfig, cluster: Cluster, emitter: FileEmitter | None = None) -> bool:
    """Produce every output enabled by the configuration.

    A failed output does not prevent the following ones from being attempted.

    Args:
        config: The resolved configuration.
        cluster: Cluster to read nodes and secrets from.
        emitter: FileEmitter to write with, defaults to one targeting the init folder.

    Returns:
        True if all enabled outputs were written.

    """
    writer = InitWriter(cluster, config, emitter)
    results: dict[str, bool] = {}

    if config.rack_topology_key is not None:
        results["rack"] = writer.write_rack()

    if config.external_address:
        results["external address"] = writer.write_external_address()

    if config.is_sasl_scram_and_plain:
        results["jaas"] = write_auth_config(writer, config)

    ic(results)
    failed = [name for name, ok in results.items() if not ok]
    if failed:
        console.error(f"Failed outputs: {', '.join(failed)}")
        return False
    return True


@click.command(help="Write rack id, external addresses and JAAS config for a Kafka broker")
@click.option("--version", "-v", required=False, is_flag=True, help="print version")
@click.option("--debug", required=False, is_flag=True, help="print debug information")
def cli(debug: bool, version: bool) -> None:
    """Process CLI arguments and run the init container.

    Args:
        debug: Enable debug output.
        version: Print version and exit.

    """
    if not debug:
        ic.disable()

    if version:
        click.echo(__version__)
        return

    console.action(f"kafka-init {__version__} is starting")

    try:
        config = resolve_config(os.environ)
    except ConfigError as e:
        console.error(f"Invalid configuration: {e}")
        sys.exit(1)

    console.summary_panel("kafka-init configuration", config.summary())

    try:
        with Cluster() as cluster:
            ok = run(config, cluster)
    except ClusterConnectionError as e:
        console.error(f"Cluster connection failed: {e}")
        sys.exit(1)

    if not ok:
        sys.exit(1)

    console.success("kafka-init finished")


if __name__ == "__main__":
    cli()
