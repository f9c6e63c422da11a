"""
Diff Locator Module
Resolves raw diff paths back to nodes and human-readable locations.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

# Location reported for differences directly under the fragment root
ROOT_LABEL = '#document-fragment'


@dataclass
class PathWalk:
    target: Dict
    resolved: bool


def _step(container: Any, step: Any):
    """Return (found, value) for one path step."""
    if isinstance(container, dict):
        if step in container:
            return True, container[step]
        return False, None
    if isinstance(container, list) and isinstance(step, int):
        if 0 <= step < len(container):
            return True, container[step]
    return False, None


def walk_path(root: Dict, path: Sequence[Any]) -> PathWalk:
    """
    Follow path from root and return the deepest dict reached.

    Lists are stepped through and scalars end the walk at their owning dict.
    When a step does not exist, e.g. a child present on only one side, the
    walk stops there with resolved=False.
    """
    target = root
    current: Any = root
    for step in path:
        found, current = _step(current, step)
        if not found:
            return PathWalk(target, False)
        if isinstance(current, dict):
            target = current
        elif not isinstance(current, list):
            break
    return PathWalk(target, True)


def find_diffed_object(root: Dict, path: Sequence[Any]) -> Dict:
    return walk_path(root, path).target


def _attr(element: Dict, name: str):
    for attr in element.get('attrs', []):
        if attr['name'] == name:
            return attr['value']
    return None


def _path_fragment(element: Dict) -> str:
    fragment = element['tag']
    element_id = _attr(element, 'id')
    if element_id:
        fragment += f'#{element_id}'
    classes = _attr(element, 'class')
    if classes:
        fragment += ''.join(f'.{cls}' for cls in classes.split())

    parent = element.get('parent')
    if parent is not None:
        same_tag = [
            child for child in parent.get('children', [])
            if child['type'] == 'element' and child['tag'] == element['tag']
        ]
        if len(same_tag) > 1:
            position = next(i for i, child in enumerate(same_tag) if child is element)
            fragment += f':nth-of-type({position + 1})'
    return fragment


def get_diff_path(root: Dict, path: Sequence[Any]) -> str:
    """Describe where a diff path points as a chain of element selectors, e.g. 'div > p'."""
    fragments: List[str] = []
    current: Any = root
    for step in path:
        found, current = _step(current, step)
        if not found:
            break
        if isinstance(current, dict) and current.get('type') == 'element':
            fragments.append(_path_fragment(current))
        elif not isinstance(current, (dict, list)):
            break
    if not fragments:
        return ROOT_LABEL
    return ' > '.join(fragments)
