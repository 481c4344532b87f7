"""
Data Access Module - Queries and writes against the content database
Public reads always filter on published; admin reads are unfiltered.
Database failures are logged, rolled back and re-raised as RemoteError.
"""

from datetime import datetime
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from extensions import db
from models import Post, Project, Tag, Comment, User
from .errors import RemoteError, NotFoundError

MODELS = {
    'post': Post,
    'project': Project
}

# Fields an admin draft may write on each model
EDITABLE_FIELDS = {
    'post': ('slug', 'title', 'excerpt', 'content', 'category', 'featured',
             'published', 'read_time', 'cover_image'),
    'project': ('slug', 'title', 'description', 'category', 'image_url',
                'project_url', 'featured', 'published')
}


def _model(kind):
    try:
        return MODELS[kind]
    except KeyError:
        raise ValueError(f"Unknown content kind: {kind}")


def _remote_error(action, error):
    """Roll back, log the raw error and return a user-safe RemoteError"""
    db.session.rollback()
    current_app.logger.error(f"Database error while {action}: {str(error)}")
    return RemoteError(f"Error {action}. Please try again.")


# ---------------------------------------------------------------------------
# Public reads
# ---------------------------------------------------------------------------

def list_published(kind, category=None):
    """Published posts or projects, newest first"""
    model = _model(kind)
    try:
        query = model.query.filter_by(published=True)
        if category:
            query = query.filter_by(category=category)
        return query.order_by(model.created_at.desc()).all()
    except SQLAlchemyError as e:
        raise _remote_error(f"loading {kind}s", e)


def get_published_by_slug(kind, slug):
    """
    Get a single published record by slug

    Raises:
        NotFoundError: No published record carries this slug
    """
    model = _model(kind)
    try:
        record = model.query.filter_by(slug=slug, published=True).first()
    except SQLAlchemyError as e:
        raise _remote_error(f"loading {kind}", e)
    if not record:
        raise NotFoundError(f"No published {kind} found for '{slug}'")
    return record


def list_related_posts(post, limit=3):
    """Other published posts in the same category"""
    try:
        return Post.query.filter(
            Post.published == True,  # noqa: E712
            Post.category == post.category,
            Post.slug != post.slug
        ).order_by(Post.created_at.desc()).limit(limit).all()
    except SQLAlchemyError as e:
        raise _remote_error("loading related posts", e)


def list_tag_names():
    """All tag names, alphabetically"""
    try:
        return [tag.name for tag in Tag.query.order_by(Tag.name).all()]
    except SQLAlchemyError as e:
        raise _remote_error("loading tags", e)


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------

def list_comments(post_id):
    """Comments for a post, newest first"""
    try:
        return Comment.query.filter_by(blog_post_id=post_id) \
            .order_by(Comment.created_at.desc()).all()
    except SQLAlchemyError as e:
        raise _remote_error("loading comments", e)


def add_comment(post, user, content):
    """Insert a comment; content must already be validated"""
    comment = Comment(blog_post_id=post.id, user_id=user.id, content=content)
    try:
        db.session.add(comment)
        db.session.commit()
    except SQLAlchemyError as e:
        raise _remote_error("posting comment", e)
    current_app.logger.info(f"Comment {comment.id} added to post {post.slug} by {user.email}")
    return comment


# ---------------------------------------------------------------------------
# Admin reads and writes
# ---------------------------------------------------------------------------

def list_all(kind):
    """Every post or project regardless of published state, newest first"""
    model = _model(kind)
    try:
        return model.query.order_by(model.created_at.desc()).all()
    except SQLAlchemyError as e:
        raise _remote_error(f"loading {kind}s", e)


def get_by_id(kind, record_id):
    model = _model(kind)
    try:
        record = db.session.get(model, record_id)
    except SQLAlchemyError as e:
        raise _remote_error(f"loading {kind}", e)
    if not record:
        raise NotFoundError(f"{kind.capitalize()} not found")
    return record


def slug_taken(kind, slug, exclude_id=None):
    """Whether another record of this kind already uses the slug"""
    model = _model(kind)
    try:
        query = model.query.filter_by(slug=slug)
        if exclude_id:
            query = query.filter(model.id != exclude_id)
        return query.first() is not None
    except SQLAlchemyError as e:
        raise _remote_error(f"checking {kind} slug", e)


def get_or_create_tags(names):
    """Resolve tag names to Tag rows, creating the missing ones"""
    tags = []
    for name in dict.fromkeys(n.strip() for n in names if n and n.strip()):
        tag = Tag.query.filter_by(name=name).first()
        if not tag:
            tag = Tag(name=name)
            db.session.add(tag)
        tags.append(tag)
    return tags


def _apply_draft(record, kind, draft):
    for field in EDITABLE_FIELDS[kind]:
        if field in draft:
            setattr(record, field, draft[field])
    if 'tags' in draft:
        record.tags = get_or_create_tags(draft['tags'])
    if kind == 'post':
        # published_at follows the published flag on every save
        record.published_at = datetime.utcnow() if record.published else None


def create_record(kind, draft, author=None):
    """Insert a new post or project from a validated draft"""
    record = _model(kind)()
    try:
        _apply_draft(record, kind, draft)
        if kind == 'post' and author is not None:
            record.author_id = author.id
        db.session.add(record)
        db.session.commit()
    except SQLAlchemyError as e:
        raise _remote_error(f"creating {kind}", e)
    current_app.logger.info(f"Created {kind} {record.id} ({record.slug})")
    return record


def update_record(kind, record_id, draft, author=None):
    """Update an existing post or project from a validated draft"""
    record = get_by_id(kind, record_id)
    try:
        _apply_draft(record, kind, draft)
        if kind == 'post' and author is not None:
            record.author_id = author.id
        record.updated_at = datetime.utcnow()
        db.session.commit()
    except SQLAlchemyError as e:
        raise _remote_error(f"updating {kind}", e)
    current_app.logger.info(f"Updated {kind} {record.id} ({record.slug})")
    return record


def delete_record(kind, record_id):
    """Delete a post or project; join rows go with it"""
    record = get_by_id(kind, record_id)
    try:
        db.session.delete(record)
        db.session.commit()
    except SQLAlchemyError as e:
        raise _remote_error(f"deleting {kind}", e)
    current_app.logger.info(f"Deleted {kind} {record_id}")


class ContentRepository:
    """Data access bound to one content kind, used by the admin editor"""

    def __init__(self, kind):
        _model(kind)
        self.kind = kind

    def list(self):
        return [record.to_dict() for record in list_all(self.kind)]

    def get(self, record_id):
        return get_by_id(self.kind, record_id).to_dict()

    def create(self, draft, author=None):
        return create_record(self.kind, draft, author=author).to_dict()

    def update(self, record_id, draft, author=None):
        return update_record(self.kind, record_id, draft, author=author).to_dict()

    def delete(self, record_id):
        delete_record(self.kind, record_id)

    def slug_taken(self, slug, exclude_id=None):
        return slug_taken(self.kind, slug, exclude_id=exclude_id)


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------

def get_user_by_email(email):
    try:
        return User.query.filter_by(email=(email or '').strip().lower()).first()
    except SQLAlchemyError as e:
        raise _remote_error("loading user", e)


def create_user(email, password_hash, full_name=None, role='user'):
    user = User(email=email.strip().lower(), password_hash=password_hash,
                full_name=full_name, role=role)
    try:
        db.session.add(user)
        db.session.commit()
    except SQLAlchemyError as e:
        raise _remote_error("creating account", e)
    current_app.logger.info(f"Created {role} account {user.email}")
    return user


__all__ = [
    'list_published',
    'get_published_by_slug',
    'list_related_posts',
    'list_tag_names',
    'list_comments',
    'add_comment',
    'list_all',
    'get_by_id',
    'slug_taken',
    'get_or_create_tags',
    'create_record',
    'update_record',
    'delete_record',
    'ContentRepository',
    'get_user_by_email',
    'create_user'
]
