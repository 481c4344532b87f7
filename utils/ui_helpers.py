"""
UI Helper Functions for Blueprint-Specific Assets
=================================================

Each blueprint may ship its own CSS/JS files; they are looked up from the
maps below and injected into the templates by the context processor.
"""

from flask import request
from typing import List, Dict, Optional


def get_blueprint_styles(blueprint_name: Optional[str]) -> List[str]:
    """
    CSS files for a blueprint

    Example:
        >>> get_blueprint_styles('admin')
        ['css/admin.css']
    """
    if not blueprint_name:
        return []

    blueprint_css_map = {
        'admin': [
            'css/admin.css',
        ],
        'auth': [
            'css/admin.css',
        ],
    }

    return blueprint_css_map.get(blueprint_name, [])


def get_blueprint_scripts(blueprint_name: Optional[str]) -> List[str]:
    """
    JavaScript files for a blueprint

    Example:
        >>> get_blueprint_scripts('admin')
        ['js/admin.js']
    """
    if not blueprint_name:
        return []

    blueprint_js_map = {
        'admin': [
            'js/admin.js',
        ],
    }

    return blueprint_js_map.get(blueprint_name, [])


def inject_blueprint_assets() -> Dict[str, List[str]]:
    """Assets for the blueprint handling the current request"""
    blueprint_name = request.blueprint if request.blueprint else None

    return {
        'blueprint_styles': get_blueprint_styles(blueprint_name),
        'blueprint_scripts': get_blueprint_scripts(blueprint_name),
        'current_blueprint': blueprint_name,
    }


def get_page_specific_class(blueprint_name: Optional[str], route_name: Optional[str] = None) -> str:
    """
    CSS classes for the <body> of a page

    Example:
        >>> get_page_specific_class('blog', 'post_detail')
        'page-blog page-blog-post_detail'
    """
    if not blueprint_name:
        return 'page-default'

    classes = [f'page-{blueprint_name}']

    if route_name:
        classes.append(f'page-{blueprint_name}-{route_name}')

    return ' '.join(classes)


__all__ = [
    'get_blueprint_styles',
    'get_blueprint_scripts',
    'inject_blueprint_assets',
    'get_page_specific_class'
]
