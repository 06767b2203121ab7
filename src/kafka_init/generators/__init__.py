"""File content generators.

This package contains the pure functions that derive the content of the
init folder files from cluster snapshots.
"""

from kafka_init.generators.addresses import render_addresses, select_addresses
from kafka_init.generators.jaas import build_auth_config
from kafka_init.generators.rack import resolve_rack

__all__ = [
    # addresses
    "select_addresses",
    "render_addresses",
    # jaas
    "build_auth_config",
    # rack
    "resolve_rack",
]
