"""
Semantic DOM Diff Interface
Compares two HTML fragments semantically and reports the first difference.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from .config import DiffConfig, resolve_config
from .diff_locator import find_diffed_object, get_diff_path
from .diff_message import get_diff_message
from .html_parser import get_ast
from .normalizer import normalize_ast
from .structure_diff import DiffEntry, ignore_parent_key, structural_diff

logger = logging.getLogger(__name__)

ConfigLike = Union[DiffConfig, Dict[str, Any], None]

__all__ = [
    'DiffResult',
    'DOMDiffError',
    'assert_dom_equals',
    'expect_dom_equals',
    'get_ast',
    'get_dom_diff',
]


@dataclass(frozen=True)
class DiffResult:
    message: str
    path: str


class DOMDiffError(AssertionError):
    """Raised when two fragments are not semantically equal."""

    def __init__(self, result: DiffResult):
        super().__init__(f"{result.message}, at path: {result.path}")
        self.result = result


def create_diff_result(left_tree: Dict, right_tree: Dict, diff: DiffEntry) -> DiffResult:
    left_object = find_diffed_object(left_tree, diff.full_path)
    right_object = find_diffed_object(right_tree, diff.full_path)

    return DiffResult(
        message=get_diff_message(diff, left_object, right_object),
        path=get_diff_path(left_tree, diff.path),
    )


def get_dom_diff(left_html: Any, right_html: Any, config: ConfigLike = None) -> Optional[DiffResult]:
    """
    Parse two HTML trees and return their first semantic difference.

    Attribute and class order, whitespace-only text, comments and script/style
    tags are ignored. Returns None when the trees are equivalent.
    """
    config = resolve_config(config)
    left_tree = get_ast(left_html, config)
    right_tree = get_ast(right_html, config)

    normalize_ast(left_tree, config.ignored_tags)
    normalize_ast(right_tree, config.ignored_tags)

    diffs = structural_diff(left_tree, right_tree, ignore_parent_key)
    if not diffs:
        logger.debug("No semantic differences found")
        return None

    logger.debug(f"Found {len(diffs)} raw difference(s), reporting the first: {diffs[0].kind} at {diffs[0].path}")
    return create_diff_result(left_tree, right_tree, diffs[0])


def assert_dom_equals(left_html: Any, right_html: Any, config: ConfigLike = None) -> None:
    """Assert that two HTML trees are semantically equal. See get_dom_diff()."""
    result = get_dom_diff(left_html, right_html, config)

    if result:
        raise DOMDiffError(result)


def expect_dom_equals(left_html: Any, right_html: Any, config: ConfigLike = None) -> None:
    """See assert_dom_equals()."""
    assert_dom_equals(left_html, right_html, config)
