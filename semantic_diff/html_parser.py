"""
HTML Parser Module
Turns HTML fragments into plain-dict ASTs for semantic comparison.
"""

import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from bs4 import BeautifulSoup, Comment, NavigableString
from bs4.element import PreformattedString

from .config import DiffConfig, resolve_config
from .normalizer import normalize_ast
from .renderer import render_value

logger = logging.getLogger(__name__)

# Empty comments left behind by template engines as part markers
MARKER_COMMENT = re.compile(r'<!---->')


def sanitize_html_string(html_string: str) -> str:
    """Strip template marker comments and surrounding whitespace."""
    sanitized = html_string
    while True:
        cleaned = MARKER_COMMENT.sub('', sanitized)
        if cleaned == sanitized:
            break
        sanitized = cleaned
    return sanitized.strip()


def as_html_string(value: Any) -> str:
    """
    Turn a value into an HTML string.

    Strings are sanitized and returned; anything else is rendered with Jinja2
    into an empty container first.
    """
    if isinstance(value, str):
        return sanitize_html_string(value)
    return sanitize_html_string(render_value(value))


class HTMLParser:
    """Parser for HTML fragments."""

    def parse_file(self, file_path: Union[str, Path]) -> Dict:
        """Parse an HTML fragment file into a fragment AST."""
        try:
            logger.info(f"Starting to parse file: {file_path}")
            path = Path(file_path)

            with open(path, 'r', encoding='utf-8') as f:
                content = f.read()
                logger.debug(f"Successfully read file, content length: {len(content)}")

            return self.parse(content)

        except Exception as e:
            logger.error(f"Error parsing file {file_path}: {str(e)}", exc_info=True)
            raise

    def parse(self, html_content: str) -> Dict:
        """Parse HTML content into a fragment AST."""
        try:
            logger.debug(f"Input HTML content length: {len(html_content)}")

            # html.parser does not wrap fragments in html/body
            soup = BeautifulSoup(html_content, 'html.parser', multi_valued_attributes=None)

            fragment = {
                'type': 'fragment',
                'children': self._parse_children(soup),
                'parent': None,
            }
            self._link_children(fragment)
            return fragment

        except Exception as e:
            logger.error(f"Error parsing HTML: {str(e)}", exc_info=True)
            raise

    def _parse_children(self, node) -> List[Dict]:
        children = []
        for child in node.children:
            child_node = self._parse_node(child)
            if child_node is not None:
                children.append(child_node)
        return children

    def _parse_node(self, node) -> Optional[Dict]:
        """Parse a single bs4 node and its children."""
        if isinstance(node, Comment):
            return {'type': 'comment', 'content': str(node), 'parent': None}
        if isinstance(node, PreformattedString):
            logger.debug(f"Skipping {type(node).__name__} node")
            return None
        if isinstance(node, NavigableString):
            return {'type': 'text', 'content': str(node), 'parent': None}

        element = {
            'type': 'element',
            'tag': node.name.lower(),
            'attrs': self._parse_attributes(node),
            'children': self._parse_children(node),
            'parent': None,
        }
        self._link_children(element)
        return element

    def _parse_attributes(self, node) -> List[Dict]:
        """Keep attributes as name/value pairs in source order."""
        attrs = []
        for key, value in node.attrs.items():
            if isinstance(value, list):
                value = ' '.join(value)
            attrs.append({'name': key.lower(), 'value': '' if value is None else str(value)})
        return attrs

    def _link_children(self, node: Dict) -> None:
        for child in node['children']:
            child['parent'] = node


def parse_fragment(markup: str) -> Dict:
    return HTMLParser().parse(markup)


def get_ast(value: Any, config: Union[DiffConfig, Dict, None] = None) -> Dict:
    """Stringify, parse and normalize a value into a fragment AST."""
    config = resolve_config(config)
    ast = parse_fragment(as_html_string(value))
    normalize_ast(ast, config.ignored_tags)
    return ast
