"""
Categories Module - Closed category enumerations for posts and projects
Handles category values, labels, icons and boundary checks
"""

from .errors import ValidationError

ALL_CATEGORIES = 'all'

POST_CATEGORIES = {
    'journalism': {
        'label': 'Journalism',
        'icon': 'fa-newspaper'
    },
    'technology': {
        'label': 'Technology',
        'icon': 'fa-code'
    },
    'education': {
        'label': 'Education',
        'icon': 'fa-graduation-cap'
    },
    'marketing': {
        'label': 'Marketing',
        'icon': 'fa-chart-line'
    }
}

PROJECT_CATEGORIES = {
    'journalism': {
        'label': 'Journalism',
        'icon': 'fa-newspaper'
    },
    'design': {
        'label': 'Design',
        'icon': 'fa-palette'
    },
    'development': {
        'label': 'Development',
        'icon': 'fa-code'
    },
    'marketing': {
        'label': 'Marketing',
        'icon': 'fa-chart-line'
    }
}

CATEGORIES_BY_KIND = {
    'post': POST_CATEGORIES,
    'project': PROJECT_CATEGORIES
}

DEFAULT_CATEGORY = 'journalism'


def get_categories(kind):
    """
    Get the category table for an entity kind

    Args:
        kind (str): 'post' or 'project'

    Returns:
        dict: Category value -> display info
    """
    try:
        return CATEGORIES_BY_KIND[kind]
    except KeyError:
        raise ValueError(f"Unknown content kind: {kind}")


def parse_category(value, kind, allow_all=False):
    """
    Normalize and check a category value coming from a form or query string

    Args:
        value (str): Raw category value
        kind (str): 'post' or 'project'
        allow_all (bool): Whether the 'all' pseudo-category is accepted

    Returns:
        str: The category value

    Raises:
        ValidationError: If the value is not part of the enumeration
    """
    category = (value or '').strip().lower()
    if allow_all and category in ('', ALL_CATEGORIES):
        return ALL_CATEGORIES
    if category not in get_categories(kind):
        raise ValidationError('category', f"Unknown category: {value}")
    return category


def get_category_label(value, kind):
    """Display label for a category, 'All' for the pseudo-category"""
    if value == ALL_CATEGORIES:
        return 'All Posts' if kind == 'post' else 'All Projects'
    return get_categories(kind)[value]['label']


def category_choices(kind, include_all=False):
    """(value, label) pairs in display order"""
    choices = [(value, info['label']) for value, info in get_categories(kind).items()]
    if include_all:
        choices.insert(0, (ALL_CATEGORIES, get_category_label(ALL_CATEGORIES, kind)))
    return choices


__all__ = [
    'ALL_CATEGORIES',
    'POST_CATEGORIES',
    'PROJECT_CATEGORIES',
    'DEFAULT_CATEGORY',
    'get_categories',
    'parse_category',
    'get_category_label',
    'category_choices'
]
