"""
API Routes - JSON listings of published content
"""

from flask import jsonify, request
from utils.data import list_published, get_published_by_slug, list_comments, list_tag_names
from utils.filters import build_filter_state, apply_filter_state
from . import api_bp


@api_bp.route('/posts')
def posts():
    """Published posts, filtered by the same query args as /blog"""
    state = build_filter_state(request.args, 'post')
    items = [p.to_dict() for p in list_published('post')]
    return jsonify({'posts': apply_filter_state(items, state)})


@api_bp.route('/posts/<slug>')
def post(slug):
    record = get_published_by_slug('post', slug)
    data = record.to_dict()
    data['comments'] = [c.to_dict() for c in list_comments(record.id)]
    return jsonify(data)


@api_bp.route('/projects')
def projects():
    """Published projects, filtered by the same query args as /portfolio"""
    state = build_filter_state(request.args, 'project')
    items = [p.to_dict() for p in list_published('project')]
    return jsonify({'projects': apply_filter_state(items, state)})


@api_bp.route('/tags')
def tags():
    return jsonify({'tags': list_tag_names()})
