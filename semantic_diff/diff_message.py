"""
Diff Message Module
Formats a raw diff entry and its located nodes as a readable sentence.
"""

from typing import Dict, Optional

from .structure_diff import ADDED, DELETED, EDITED, DiffEntry


def describe_node(node: Optional[Dict]) -> str:
    if node is None:
        return 'nothing'
    if 'name' in node and 'value' in node and 'type' not in node:
        return f'attribute [{node["name"]}="{node["value"]}"]'

    node_type = node.get('type')
    if node_type == 'element':
        return f'tag <{node["tag"]}>'
    if node_type == 'text':
        return f'text "{node["content"]}"'
    if node_type == 'comment':
        return f'comment "{node["content"]}"'
    if node_type == 'fragment':
        return 'document fragment'
    return f'node {node!r}'


def get_diff_message(diff: DiffEntry, lhs: Dict, rhs: Dict) -> str:
    """
    Build the message for a diff entry.

    lhs and rhs are the objects located on each side by find_diffed_object.
    An edit always lands on a scalar field (node type, tag, text content or an
    attribute name/value), so describing the owning objects on both sides
    shows the old and the new value.
    """
    kind = diff.change_kind

    if kind == DELETED:
        return f'{describe_node(lhs)} has been removed'
    if kind == ADDED:
        return f'{describe_node(rhs)} has been added'
    if kind == EDITED:
        return f'{describe_node(lhs)} has changed to {describe_node(rhs)}'

    raise ValueError(f"Unknown diff kind: {diff.kind}")
