"""
Renderer Module
Renders non-string values into HTML markup using Jinja2 templates.
"""

import logging
from typing import Any

from bs4 import BeautifulSoup
from jinja2 import Environment, Template
from markupsafe import Markup

logger = logging.getLogger(__name__)

env = Environment(autoescape=True)

ITEMS_TEMPLATE = env.from_string('{% for item in items %}{{ item }}{% endfor %}')


def _as_items(value: Any) -> list:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        items = []
        for item in value:
            items.extend(_as_items(item))
        return items
    if isinstance(value, Template):
        return [Markup(value.render())]
    return [value]


def render_value(value: Any) -> str:
    """Render a value into a detached container element and return the container's inner HTML."""
    try:
        logger.debug(f"Rendering value of type {type(value).__name__}")
        rendered = ITEMS_TEMPLATE.render(items=_as_items(value))

        soup = BeautifulSoup('', 'html.parser')
        container = soup.new_tag('div')
        # Stray end tags in the rendered markup cannot close a node that is never parsed
        parsed = BeautifulSoup(rendered, 'html.parser')
        for node in list(parsed.contents):
            container.append(node.extract())
        return container.decode_contents()
    except Exception as e:
        logger.error(f"Error rendering value: {str(e)}", exc_info=True)
        raise
