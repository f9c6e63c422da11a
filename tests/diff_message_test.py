import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from semantic_diff.diff_message import describe_node, get_diff_message
from semantic_diff.structure_diff import ADDED, ARRAY, DELETED, EDITED, DiffEntry

ELEMENT = {'type': 'element', 'tag': 'span', 'attrs': [], 'children': [], 'parent': None}
TEXT = {'type': 'text', 'content': 'hello', 'parent': None}

def test_describe_nodes():
    assert describe_node(ELEMENT) == 'tag <span>'
    assert describe_node(TEXT) == 'text "hello"'
    assert describe_node({'type': 'comment', 'content': 'c', 'parent': None}) == 'comment "c"'
    assert describe_node({'name': 'href', 'value': '/x'}) == 'attribute [href="/x"]'
    assert describe_node({'type': 'fragment', 'children': [], 'parent': None}) == 'document fragment'

def test_removed_message():
    diff = DiffEntry(ARRAY, ('children',), index=0, item=DiffEntry(DELETED, ('children',), lhs=ELEMENT))
    assert get_diff_message(diff, ELEMENT, {'type': 'fragment'}) == 'tag <span> has been removed'

def test_added_message():
    diff = DiffEntry(ARRAY, ('children',), index=0, item=DiffEntry(ADDED, ('children',), rhs=TEXT))
    assert get_diff_message(diff, {'type': 'fragment'}, TEXT) == 'text "hello" has been added'

def test_attribute_change_names_old_and_new():
    diff = DiffEntry(EDITED, ('attrs', 0, 'value'), lhs='/x', rhs='/y')
    message = get_diff_message(diff, {'name': 'href', 'value': '/x'}, {'name': 'href', 'value': '/y'})
    assert message == 'attribute [href="/x"] has changed to attribute [href="/y"]'

def test_text_change_shows_both_values():
    diff = DiffEntry(EDITED, ('content',), lhs='hello', rhs='goodbye')
    message = get_diff_message(diff, TEXT, {'type': 'text', 'content': 'goodbye', 'parent': None})
    assert message == 'text "hello" has changed to text "goodbye"'

def test_node_kind_mismatch():
    diff = DiffEntry(EDITED, ('type',), lhs='element', rhs='text')
    assert get_diff_message(diff, ELEMENT, TEXT) == 'tag <span> has changed to text "hello"'

def test_unknown_kind_raises():
    with pytest.raises(ValueError):
        get_diff_message(DiffEntry('moved', ()), ELEMENT, ELEMENT)
