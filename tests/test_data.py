from datetime import datetime

import pytest

from extensions import db
from models import Post, Tag, User
from utils.data import (
    list_published, get_published_by_slug, list_related_posts, list_all,
    create_record, update_record, delete_record, slug_taken, add_comment,
    list_comments, list_tag_names, get_user_by_email
)
from utils.errors import NotFoundError


def test_public_reads_skip_unpublished(ctx, make_post):
    make_post('live', published=True)
    make_post('draft', published=False, featured=True)

    assert [p.slug for p in list_published('post')] == ['live']
    assert {p.slug for p in list_all('post')} == {'live', 'draft'}


def test_published_newest_first_and_category(ctx, make_post):
    make_post('older', category='education', created_at=datetime(2024, 1, 1))
    make_post('newer', category='technology', created_at=datetime(2024, 6, 1))

    assert [p.slug for p in list_published('post')] == ['newer', 'older']
    assert [p.slug for p in list_published('post', category='education')] == ['older']


def test_get_by_slug_requires_published(ctx, make_post):
    make_post('hidden', published=False)
    with pytest.raises(NotFoundError):
        get_published_by_slug('post', 'hidden')
    with pytest.raises(NotFoundError):
        get_published_by_slug('post', 'missing')


def test_related_posts(ctx, make_post):
    make_post('main', category='technology')
    make_post('sibling', category='technology')
    make_post('hidden-sibling', category='technology', published=False)
    make_post('other', category='education')

    post = get_published_by_slug('post', 'main')
    assert [p.slug for p in list_related_posts(post)] == ['sibling']


def test_create_record_resolves_tags(ctx, make_post):
    make_post('existing', tags=['React'])
    draft = {'title': 'New', 'slug': 'new', 'content': 'Body', 'category': 'technology',
             'published': True, 'tags': ['React', 'Flask']}

    post = create_record('post', draft)

    assert [t.name for t in post.tags] == ['Flask', 'React']
    assert Tag.query.count() == 2
    assert post.published_at is not None
    assert list_tag_names() == ['Flask', 'React']


def test_update_unpublish_clears_published_at(ctx, make_post):
    post = make_post('toggle')
    record = update_record('post', post['id'], {'published': False})
    assert record.published_at is None
    assert list_published('post') == []


def test_delete_record(ctx, make_project):
    project = make_project('gone', tags=['Design'])
    delete_record('project', project['id'])

    assert list_all('project') == []
    # shared tags survive
    assert Tag.query.filter_by(name='Design').count() == 1
    with pytest.raises(NotFoundError):
        delete_record('project', project['id'])


def test_slug_taken(ctx, make_post):
    post = make_post('taken')
    assert slug_taken('post', 'taken')
    assert not slug_taken('post', 'taken', exclude_id=post['id'])
    assert not slug_taken('project', 'taken')


def test_comments_newest_first(ctx, make_post, visitor_user):
    make_post('discussed')
    post = get_published_by_slug('post', 'discussed')
    user = db.session.get(User, visitor_user)

    first = add_comment(post, user, 'First!')
    first.created_at = datetime(2024, 1, 1)
    db.session.commit()
    add_comment(post, user, 'Second')

    assert [c.content for c in list_comments(post.id)] == ['Second', 'First!']
    assert list_comments(post.id)[0].author.email == 'reader@example.com'


def test_deleting_post_removes_comments(ctx, make_post, visitor_user):
    make_post('short-lived')
    post = get_published_by_slug('post', 'short-lived')
    add_comment(post, db.session.get(User, visitor_user), 'Bye')
    post_id = post.id

    delete_record('post', post_id)
    assert Post.query.count() == 0
    assert list_comments(post_id) == []


def test_user_lookup_is_case_insensitive(ctx, visitor_user):
    assert get_user_by_email(' Reader@Example.com ').id == visitor_user
    assert get_user_by_email('nobody@example.com') is None
