"""
Nodes - Safe accessors for component tree nodes.

Component nodes arrive from the generation engine as plain JSON-like
dicts ({"id", "type", "props", "children"}). Nothing about their shape
is guaranteed, so every read goes through these helpers, which degrade
to "nothing here" instead of raising.
"""

from typing import Any, Dict, List, Optional

ComponentNode = Dict[str, Any]
"""A single node of the declarative UI tree."""

Page = Dict[str, Any]
"""A page: its ``components`` key holds the ordered root nodes."""


def is_node(value: Any) -> bool:
    """Check if a value can be treated as a component node."""
    return isinstance(value, dict)


def node_id(node: Any) -> str:
    """Lower-cased node id, or "" when missing or not a string."""
    if not is_node(node):
        return ""
    value = node.get("id")
    return value.lower() if isinstance(value, str) else ""


def raw_node_id(node: Any) -> str:
    """Node id as authored (for logging and synthesized ids)."""
    if not is_node(node):
        return ""
    value = node.get("id")
    return value if isinstance(value, str) else ""


def node_type(node: Any) -> str:
    """Node type tag, or "" when missing or not a string."""
    if not is_node(node):
        return ""
    value = node.get("type")
    return value if isinstance(value, str) else ""


def read_props(node: Any) -> Dict[str, Any]:
    """
    Read-only view of a node's props.

    Returns an empty dict (not attached to the node) when props are
    missing or malformed.
    """
    if not is_node(node):
        return {}
    props = node.get("props")
    return props if isinstance(props, dict) else {}


def get_props(node: Any) -> Optional[Dict[str, Any]]:
    """
    Writable props mapping of a node.

    Creates and attaches an empty mapping when props are absent or None.
    Returns None when props hold something that is not a mapping; such
    a node must be left unchanged.
    """
    if not is_node(node):
        return None
    props = node.get("props")
    if props is None:
        props = {}
        node["props"] = props
    if not isinstance(props, dict):
        return None
    return props


def has_writable_props(node: Any) -> bool:
    """True if a node's props are absent, None, or a mapping."""
    if not is_node(node):
        return False
    props = node.get("props")
    return props is None or isinstance(props, dict)


def get_children(node: Any) -> List[ComponentNode]:
    """
    Child nodes in order.

    Anything that is not a list counts as a leaf; entries that are not
    dicts are skipped.
    """
    if not is_node(node):
        return []
    children = node.get("children")
    if not isinstance(children, list):
        return []
    return [child for child in children if is_node(child)]


def page_components(page: Any) -> List[ComponentNode]:
    """Root component list of a page, or [] when the page is malformed."""
    if not isinstance(page, dict):
        return []
    components = page.get("components")
    if not isinstance(components, list):
        return []
    return [component for component in components if is_node(component)]


def icon_name(node: Any) -> str:
    """Lower-cased icon name from props.iconName, falling back to props.icon."""
    props = read_props(node)
    for key in ("iconName", "icon"):
        value = props.get(key)
        if isinstance(value, str) and value:
            return value.lower()
    return ""
