"""
Blog Routes - Public post listing, post detail and comments
"""

from flask import render_template, redirect, url_for, request, flash, current_app
from flask_login import current_user
from utils.data import (
    list_published, get_published_by_slug, list_related_posts,
    list_comments, add_comment, list_tag_names
)
from utils.decorators import login_required
from utils.categories import category_choices
from utils.errors import ValidationError, RemoteError
from utils.filters import build_filter_state, apply_filter_state, split_featured
from utils.validators import validate_comment, COMMENT_MAX_LENGTH
from . import blog_bp


@blog_bp.route('/')
def list_posts():
    """Published posts narrowed by category, search text and tags"""
    state = build_filter_state(request.args, 'post')
    posts = [p.to_dict() for p in list_published('post')]
    visible = apply_filter_state(posts, state)
    featured_posts, regular_posts = split_featured(visible)

    return render_template('blog/list.html',
                           featured_posts=featured_posts,
                           regular_posts=regular_posts,
                           result_count=len(visible),
                           state=state,
                           tags=list_tag_names(),
                           categories=category_choices('post', include_all=True))


@blog_bp.route('/<slug>')
def post_detail(slug):
    """Single published post with related posts and comments"""
    post = get_published_by_slug('post', slug)
    related = list_related_posts(post)
    comments = list_comments(post.id)

    return render_template('blog/detail.html',
                           post=post.to_dict(),
                           related_posts=[p.to_dict() for p in related],
                           comments=[c.to_dict() for c in comments],
                           comment_max_length=COMMENT_MAX_LENGTH)


@blog_bp.route('/<slug>/comments', methods=['POST'])
@login_required
def post_comment(slug):
    """Add a comment to a published post"""
    post = get_published_by_slug('post', slug)

    try:
        content = validate_comment(request.form.get('content'))
        add_comment(post, current_user, content)
        flash('Comment posted successfully!', 'success')
    except ValidationError as e:
        flash(e.message, 'error')
    except RemoteError as e:
        current_app.logger.error(f"Comment on {slug} failed: {e.message}")
        flash('Failed to post comment. Please try again.', 'error')

    return redirect(url_for('blog.post_detail', slug=slug, _anchor='comments'))
