import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from semantic_diff.html_parser import parse_fragment
from semantic_diff.normalizer import normalize_ast, sort_attributes
from semantic_diff.structure_diff import ignore_parent_key, structural_diff

def normalized(html, ignored_tags=None):
    tree = parse_fragment(html)
    normalize_ast(tree, ignored_tags)
    return tree

def test_sort_attributes_by_name():
    attrs = [{'name': 'z', 'value': '1'}, {'name': 'a', 'value': '2'}, {'name': 'm', 'value': '3'}]
    assert [attr['name'] for attr in sort_attributes(attrs)] == ['a', 'm', 'z']

def test_sort_attributes_sorts_class_tokens():
    attrs = [{'name': 'class', 'value': '  zeta alpha\tbeta '}]
    assert sort_attributes(attrs) == [{'name': 'class', 'value': 'alpha beta zeta'}]

def test_always_ignored_tags_are_pruned():
    tree = normalized('<div><script>a()</script><style>.a{}</style><p>x</p></div>')
    div = tree['children'][0]
    assert [child['tag'] for child in div['children']] == ['p']

def test_ignored_tags_are_case_insensitive():
    tree = normalized('<div><foo><b>x</b></foo></div>', ['FOO'])
    assert tree['children'][0]['children'] == []

def test_whitespace_only_text_is_removed():
    tree = normalized('<div>\n  <span>x</span>\n\t</div>')
    div = tree['children'][0]
    assert [child['type'] for child in div['children']] == ['element']

def test_meaningful_text_is_kept_verbatim():
    tree = normalized('<p>  hello  world </p>')
    assert tree['children'][0]['children'][0]['content'] == '  hello  world '

def test_non_breaking_space_is_content():
    tree = normalized('<p>&nbsp;</p>')
    assert tree['children'][0]['children'][0]['content'] == '\xa0'

def test_adjacent_text_is_merged_after_pruning():
    tree = normalized('<p>a<!-- x -->b<script>c()</script>c</p>')
    p = tree['children'][0]
    assert len(p['children']) == 1
    assert p['children'][0]['content'] == 'abc'

def test_fully_pruned_element_becomes_childless():
    tree = normalized('<section><script></script><style></style></section>')
    section = tree['children'][0]
    assert section['type'] == 'element'
    assert section['children'] == []

def test_parent_references_survive_pruning():
    tree = normalized('<ul><script></script><li>1</li><li>2</li></ul>')
    ul = tree['children'][0]
    assert all(li['parent'] is ul for li in ul['children'])
    assert ul['children'][1]['children'][0]['content'] == '2'

@pytest.mark.parametrize('html', [
    '<div b="1" a="2" class="y x">\n <p>t<!--c-->u</p>\n <script></script></div>',
    '<ul>\n<li>1</li>\n<li> 2 </li>\n</ul>',
    '',
])
def test_normalization_is_idempotent(html):
    once = normalized(html, ['li'])
    twice = normalized(html, ['li'])
    normalize_ast(twice, ['li'])
    assert structural_diff(once, twice, ignore_parent_key) == []

def test_string_ignored_tags_are_rejected():
    tree = parse_fragment('<div><foo>x</foo><o>y</o></div>')
    with pytest.raises(TypeError):
        normalize_ast(tree, 'foo')
