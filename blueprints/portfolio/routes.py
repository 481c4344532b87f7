"""
Portfolio Routes - Public project listing
"""

from flask import render_template, request
from utils.data import list_published, list_tag_names
from utils.categories import category_choices
from utils.filters import build_filter_state, apply_filter_state
from . import portfolio_bp


@portfolio_bp.route('/')
def list_projects():
    """Published projects narrowed by category, search text and tags"""
    state = build_filter_state(request.args, 'project')
    projects = [p.to_dict() for p in list_published('project')]

    return render_template('portfolio/list.html',
                           projects=apply_filter_state(projects, state),
                           state=state,
                           tags=list_tag_names(),
                           categories=category_choices('project', include_all=True))
