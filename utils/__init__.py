"""
Utils Package - Centralized utility modules initialization
"""

from .errors import (
    PortfolioError,
    ValidationError,
    AuthorizationError,
    RemoteError,
    NotFoundError
)
from .decorators import login_required, admin_required
from .categories import (
    POST_CATEGORIES,
    PROJECT_CATEGORIES,
    parse_category,
    get_category_label,
    category_choices
)
from .filters import filter_items, split_featured, toggle_tag, build_filter_state
from .validators import (
    validate_contact,
    validate_recipient,
    validate_comment,
    validate_draft,
    slugify
)
from .editor import Editor, EditorState, draft_from_form
from .notifications import send_email, relay_contact
from .security import (
    get_client_ip,
    add_cors_headers,
    hash_password,
    verify_password,
    ensure_admin_user
)
from .helpers import sanitize_content, format_date, initials, build_sitemap
from .ui_helpers import (
    get_blueprint_styles,
    get_blueprint_scripts,
    inject_blueprint_assets,
    get_page_specific_class
)

__all__ = [
    # Errors
    'PortfolioError',
    'ValidationError',
    'AuthorizationError',
    'RemoteError',
    'NotFoundError',

    # Decorators
    'login_required',
    'admin_required',

    # Categories
    'POST_CATEGORIES',
    'PROJECT_CATEGORIES',
    'parse_category',
    'get_category_label',
    'category_choices',

    # Filters
    'filter_items',
    'split_featured',
    'toggle_tag',
    'build_filter_state',

    # Validators
    'validate_contact',
    'validate_recipient',
    'validate_comment',
    'validate_draft',
    'slugify',

    # Editor
    'Editor',
    'EditorState',
    'draft_from_form',

    # Notifications
    'send_email',
    'relay_contact',

    # Security
    'get_client_ip',
    'add_cors_headers',
    'hash_password',
    'verify_password',
    'ensure_admin_user',

    # Helpers
    'sanitize_content',
    'format_date',
    'initials',
    'build_sitemap',

    # UI Helpers
    'get_blueprint_styles',
    'get_blueprint_scripts',
    'inject_blueprint_assets',
    'get_page_specific_class'
]
