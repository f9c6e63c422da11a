"""
AST Normalizer Module
Canonicalizes fragment ASTs in place so that equivalent markup yields identical trees.
"""

import logging
import re
from typing import Dict, Iterable, List, Optional

from .config import ALWAYS_IGNORED_TAGS, normalize_tag_names

logger = logging.getLogger(__name__)

# HTML whitespace only; non-breaking spaces are content
WHITESPACE_ONLY = re.compile(r'[ \t\n\r\f]*')


def _is_pruned(node: Dict, ignored_tags: frozenset) -> bool:
    if node['type'] == 'comment':
        return True
    return node['type'] == 'element' and node['tag'].lower() in ignored_tags


def _merge_text_nodes(children: List[Dict]) -> List[Dict]:
    """Join runs of adjacent text siblings into a single text node."""
    merged = []
    for child in children:
        if child['type'] == 'text' and merged and merged[-1]['type'] == 'text':
            merged[-1]['content'] += child['content']
        else:
            merged.append(child)
    return merged


def sort_attributes(attrs: List[Dict]) -> List[Dict]:
    """Sort attributes by name; class tokens are sorted as well."""
    result = []
    for attr in sorted(attrs, key=lambda a: a['name']):
        if attr['name'] == 'class':
            attr['value'] = ' '.join(sorted(attr['value'].split()))
        result.append(attr)
    return result


def normalize_ast(node: Dict, ignored_tags: Optional[Iterable[str]] = None) -> None:
    """
    Normalize a parsed tree in place.

    Drops script/style, comments and any element whose tag is in ignored_tags,
    merges adjacent text, removes whitespace-only text nodes and sorts attributes.
    Running it again on a normalized tree is a no-op.
    """
    pruned_tags = ALWAYS_IGNORED_TAGS | normalize_tag_names(ignored_tags)
    _normalize_node(node, pruned_tags)


def _normalize_node(node: Dict, pruned_tags: frozenset) -> None:
    if node['type'] == 'element':
        node['attrs'] = sort_attributes(node['attrs'])

    if 'children' not in node:
        return

    kept = [child for child in node['children'] if not _is_pruned(child, pruned_tags)]
    removed = len(node['children']) - len(kept)
    if removed:
        logger.debug(f"Pruned {removed} child node(s) of {node.get('tag', node['type'])}")

    kept = _merge_text_nodes(kept)
    node['children'] = [
        child for child in kept
        if child['type'] != 'text' or not WHITESPACE_ONLY.fullmatch(child['content'])
    ]

    for child in node['children']:
        child['parent'] = node
        _normalize_node(child, pruned_tags)
