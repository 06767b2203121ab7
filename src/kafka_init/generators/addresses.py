"""External address selection.

This module picks the addresses a node-port listener advertises and renders
them as shell export lines. The first line always carries the default
address, followed by one line per AddressType in declaration order, so the
file has the same shape on every node.
"""

import os
from collections.abc import Iterable, Sequence

from icecream import ic

from kafka_init import console
from kafka_init.exceptions import AddressNotFoundError
from kafka_init.models import AddressType, NodeAddress, NodeInfo

DEFAULT_ADDRESS_VARIABLE = "STRIMZI_NODEPORT_DEFAULT_ADDRESS"
_TYPED_ADDRESS_VARIABLE = "STRIMZI_NODEPORT_{type}_ADDRESS"


def find_address(addresses: Iterable[NodeAddress], address_type: AddressType | None = None) -> str | None:
    """Find the first address of a given type.

    Args:
        addresses: Node addresses in source order.
        address_type: The type to look for, or None for any type.

    Returns:
        The first matching address, or None if nothing matches.

    """
    for address in addresses:
        if address_type is None or address_type.matches(address.type):
            return address.address
    return None


def address_variable(address_type: AddressType | None) -> str:
    """Return the environment variable name for an address type.

    Args:
        address_type: The address type, or None for the default address.

    """
    if address_type is None:
        return DEFAULT_ADDRESS_VARIABLE
    return _TYPED_ADDRESS_VARIABLE.format(type=address_type.env_name)


def export_line(address_type: AddressType | None, address: str | None) -> str:
    """Format a shell export line for one address.

    A missing address is exported as an empty value.

    Args:
        address_type: The address type, or None for the default address.
        address: The address value.

    Returns:
        The export command terminated by the platform line separator.

    """
    return f"export {address_variable(address_type)}={address or ''}{os.linesep}"


def select_addresses(
    node: NodeInfo,
    preferred_type: AddressType | None = None,
    address_types: Sequence[AddressType] = tuple(AddressType),
) -> list[str]:
    """Select the default and per-type addresses of a node.

    Args:
        node: The node the pod is scheduled on.
        preferred_type: Address type to use for the default address. When None,
            the first address the node reports is used.
        address_types: Address types to emit a line for, in output order.

    Returns:
        The export lines, default address first.

    Raises:
        AddressNotFoundError: If no address qualifies as the default address.

    """
    ic(node.addresses)
    default_address = find_address(node.addresses, preferred_type)
    if default_address is None:
        wanted = f"of type {preferred_type.value}" if preferred_type else "of any type"
        found = ", ".join(address.type for address in node.addresses) or "none"
        raise AddressNotFoundError(
            f"No address {wanted} found on node {node.name} (address types found: {found})"
        )

    console.info("Default external address found ", console.highlight(default_address))
    lines = [export_line(None, default_address)]

    for address_type in address_types:
        address = find_address(node.addresses, address_type)
        if address is None:
            console.warning(f"No {address_type.value} address found on node {node.name}")
        else:
            console.step(f"External {address_type.value} address found {address}")
        lines.append(export_line(address_type, address))

    return lines


def render_addresses(
    node: NodeInfo,
    preferred_type: AddressType | None = None,
    address_types: Sequence[AddressType] = tuple(AddressType),
) -> str:
    """Render the content of the external address file.

    Args:
        node: The node the pod is scheduled on.
        preferred_type: Address type to use for the default address.
        address_types: Address types to emit a line for, in output order.

    Returns:
        The concatenated export lines.

    Raises:
        AddressNotFoundError: If no address qualifies as the default address.

    """
    return "".join(select_addresses(node, preferred_type, address_types))
