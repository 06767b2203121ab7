"""Rack id resolution from node labels."""

from icecream import ic

from kafka_init.exceptions import RackLabelMissingError
from kafka_init.models import NodeInfo


def resolve_rack(node: NodeInfo, label_key: str) -> str:
    """Return the rack id stored in a node label.

    The label value is returned verbatim.

    Args:
        node: The node the pod is scheduled on.
        label_key: The topology label holding the rack id.

    Returns:
        The raw label value.

    Raises:
        RackLabelMissingError: If the node does not carry the label.

    """
    ic(node.labels)
    rack_id = node.labels.get(label_key)
    if rack_id is None:
        found = ", ".join(sorted(node.labels)) or "none"
        raise RackLabelMissingError(
            f"Node {node.name} doesn't have the label {label_key} for getting the rack id (labels found: {found})"
        )
    return rack_id
