"""
Filters Module - Narrow post and project listings for display
Pure functions over serialized records; nothing here touches the database.
"""

from .categories import ALL_CATEGORIES, parse_category
from .errors import ValidationError

VIEW_MODES = ('grid', 'list')
DEFAULT_VIEW_MODE = 'grid'


def _summary(item):
    # Posts carry an excerpt, projects a description
    return item.get('excerpt') or item.get('description') or ''


def matches(item, category=ALL_CATEGORIES, search_text='', selected_tags=None):
    """Whether a single record passes the category, search and tag conditions"""
    if category != ALL_CATEGORIES and item.get('category') != category:
        return False

    query = (search_text or '').lower()
    if query and query not in (item.get('title') or '').lower() \
            and query not in _summary(item).lower():
        return False

    if selected_tags:
        if not set(selected_tags).intersection(item.get('tags') or []):
            return False

    return True


def filter_items(items, category=ALL_CATEGORIES, search_text='', selected_tags=None):
    """
    Compute the visible subset of posts or projects

    Args:
        items (list): Serialized records with title, excerpt/description, category, tags
        category (str): Category value or 'all'
        search_text (str): Case-insensitive substring of title or excerpt/description
        selected_tags (iterable): Tag names; empty means no tag condition

    Returns:
        list: Matching records in their original order
    """
    selected = set(selected_tags or [])
    return [item for item in items if matches(item, category, search_text, selected)]


def split_featured(items):
    """Split records into (featured, regular), preserving order"""
    featured = [item for item in items if item.get('featured')]
    regular = [item for item in items if not item.get('featured')]
    return featured, regular


def toggle_tag(selected_tags, tag):
    """Add the tag if absent, remove it if present"""
    selected = list(selected_tags or [])
    if tag in selected:
        return [t for t in selected if t != tag]
    return selected + [tag]


def build_filter_state(args, kind):
    """
    Read filter state from request query args

    Args:
        args (MultiDict): category, q, repeated tag, view
        kind (str): 'post' or 'project'

    Returns:
        dict: category, search_text, selected_tags, view_mode

    Raises:
        ValidationError: Unknown category or view mode
    """
    view_mode = (args.get('view') or DEFAULT_VIEW_MODE).strip().lower()
    if view_mode not in VIEW_MODES:
        raise ValidationError('view', f"Unknown view mode: {args.get('view')}")

    tags = [t.strip() for t in args.getlist('tag') if t.strip()]

    return {
        'category': parse_category(args.get('category'), kind, allow_all=True),
        'search_text': (args.get('q') or '').strip(),
        'selected_tags': list(dict.fromkeys(tags)),
        'view_mode': view_mode
    }


def apply_filter_state(items, state):
    return filter_items(items,
                        category=state['category'],
                        search_text=state['search_text'],
                        selected_tags=state['selected_tags'])


__all__ = [
    'VIEW_MODES',
    'matches',
    'filter_items',
    'split_featured',
    'toggle_tag',
    'build_filter_state',
    'apply_filter_state'
]
