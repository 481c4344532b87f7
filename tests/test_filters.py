import pytest
from werkzeug.datastructures import MultiDict

from utils.errors import ValidationError
from utils.filters import (
    filter_items, matches, split_featured, toggle_tag, build_filter_state
)

POSTS = [
    {'title': 'Digital Journalism in East Africa', 'excerpt': 'Mobile-first newsrooms',
     'category': 'journalism', 'featured': True, 'tags': ['Digital Media']},
    {'title': 'Data Journalism', 'excerpt': 'Making numbers tell stories',
     'category': 'journalism', 'featured': False, 'tags': ['Data Viz', 'Storytelling']},
    {'title': 'Full-Stack Applications', 'excerpt': 'React and TypeScript in practice',
     'category': 'technology', 'featured': True, 'tags': ['React', 'TypeScript']},
    {'title': 'Teaching Media Studies', 'excerpt': 'Engaging students with data',
     'category': 'education', 'featured': False, 'tags': []},
]

PROJECTS = [
    {'title': 'Election Desk', 'description': 'Interactive results tracker',
     'category': 'journalism', 'tags': ['Data Viz']},
    {'title': 'Newsroom CMS', 'description': 'Content management for students',
     'category': 'development', 'tags': ['React']},
]


def test_default_state_returns_everything_in_order():
    assert filter_items(POSTS) == POSTS
    assert filter_items(POSTS, 'all', '', set()) == POSTS


def test_category_filter():
    result = filter_items(POSTS, category='journalism')
    assert [p['title'] for p in result] == ['Digital Journalism in East Africa', 'Data Journalism']


def test_search_is_case_insensitive_over_title_and_excerpt():
    assert [p['title'] for p in filter_items(POSTS, search_text='JOURNALISM')] == [
        'Digital Journalism in East Africa', 'Data Journalism']
    # matches the excerpt only
    assert [p['title'] for p in filter_items(POSTS, search_text='typescript')] == [
        'Full-Stack Applications']


def test_search_uses_description_for_projects():
    assert [p['title'] for p in filter_items(PROJECTS, search_text='tracker')] == ['Election Desk']


def test_tags_match_on_any_intersection():
    result = filter_items(POSTS, selected_tags={'React', 'Data Viz'})
    assert [p['title'] for p in result] == ['Data Journalism', 'Full-Stack Applications']


def test_conditions_are_combined():
    result = filter_items(POSTS, category='journalism', search_text='data',
                          selected_tags=['Storytelling'])
    assert [p['title'] for p in result] == ['Data Journalism']

    assert filter_items(POSTS, category='technology', selected_tags=['Storytelling']) == []


@pytest.mark.parametrize('category', ['all', 'journalism', 'technology', 'education', 'marketing'])
@pytest.mark.parametrize('search_text', ['', 'data', 'zzz'])
@pytest.mark.parametrize('tags', [set(), {'React'}, {'Data Viz', 'Digital Media'}])
def test_output_is_exactly_the_matching_subset(category, search_text, tags):
    result = filter_items(POSTS, category, search_text, tags)
    assert result == [p for p in POSTS if matches(p, category, search_text, tags)]
    for item in result:
        assert item in POSTS


def test_empty_result_is_a_list():
    assert filter_items(POSTS, search_text='no such thing') == []


def test_filtering_does_not_mutate_input():
    items = list(POSTS)
    filter_items(items, category='education')
    assert items == POSTS


def test_split_featured_preserves_order():
    featured, regular = split_featured(POSTS)
    assert [p['title'] for p in featured] == ['Digital Journalism in East Africa', 'Full-Stack Applications']
    assert [p['title'] for p in regular] == ['Data Journalism', 'Teaching Media Studies']


def test_toggle_tag():
    assert toggle_tag([], 'React') == ['React']
    assert toggle_tag(['React', 'Data Viz'], 'React') == ['Data Viz']


def test_build_filter_state_from_query_args():
    args = MultiDict([('category', 'Technology'), ('q', ' react '), ('tag', 'React'),
                      ('tag', 'TypeScript'), ('tag', 'React'), ('view', 'list')])
    state = build_filter_state(args, 'post')
    assert state == {
        'category': 'technology',
        'search_text': 'react',
        'selected_tags': ['React', 'TypeScript'],
        'view_mode': 'list'
    }


def test_build_filter_state_defaults():
    state = build_filter_state(MultiDict(), 'project')
    assert state['category'] == 'all'
    assert state['view_mode'] == 'grid'
    assert state['selected_tags'] == []


def test_build_filter_state_rejects_unknown_values():
    with pytest.raises(ValidationError):
        build_filter_state(MultiDict({'category': 'design'}), 'post')
    with pytest.raises(ValidationError):
        build_filter_state(MultiDict({'view': 'carousel'}), 'project')
