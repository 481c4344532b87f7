import pytest

from utils.categories import parse_category, get_category_label, category_choices
from utils.errors import ValidationError
from utils.validators import (
    validate_contact, validate_comment, validate_recipient, validate_draft,
    is_valid_email, slugify
)


def contact(**overrides):
    payload = {
        'name': 'Jane Doe',
        'email': 'jane@example.com',
        'subject': 'Hello',
        'message': 'I would like to talk about a project.'
    }
    payload.update(overrides)
    return payload


def test_valid_contact_is_trimmed():
    cleaned = validate_contact(contact(name='  Jane Doe  ', message='\nHi there\n'))
    assert cleaned['name'] == 'Jane Doe'
    assert cleaned['message'] == 'Hi there'


def test_name_length_boundary():
    assert validate_contact(contact(name='a' * 100))['name'] == 'a' * 100
    with pytest.raises(ValidationError) as exc:
        validate_contact(contact(name='a' * 101))
    assert exc.value.field == 'name'


def test_email_shape():
    assert is_valid_email('user@example.com')
    assert not is_valid_email('not-an-email')
    assert validate_contact(contact(email='user@example.com'))['email'] == 'user@example.com'
    with pytest.raises(ValidationError) as exc:
        validate_contact(contact(email='not-an-email'))
    assert exc.value.field == 'email'


def test_email_length_limit():
    long_email = 'a' * 244 + '@example.com'
    assert len(long_email) == 256
    with pytest.raises(ValidationError):
        validate_contact(contact(email=long_email))


@pytest.mark.parametrize('field,limit', [('subject', 200), ('message', 2000)])
def test_text_length_limits(field, limit):
    validate_contact(contact(**{field: 'x' * limit}))
    with pytest.raises(ValidationError) as exc:
        validate_contact(contact(**{field: 'x' * (limit + 1)}))
    assert exc.value.field == field


def test_whitespace_only_is_missing():
    with pytest.raises(ValidationError) as exc:
        validate_contact(contact(subject='   '))
    assert exc.value.message == 'Subject is required'


def test_first_violation_wins():
    with pytest.raises(ValidationError) as exc:
        validate_contact(contact(name='', email='bad', message=''))
    assert exc.value.field == 'name'


def test_missing_field():
    payload = contact()
    del payload['message']
    with pytest.raises(ValidationError) as exc:
        validate_contact(payload)
    assert exc.value.field == 'message'


def test_recipient():
    assert validate_recipient(' owner@example.com ') == 'owner@example.com'
    with pytest.raises(ValidationError):
        validate_recipient('owner')
    with pytest.raises(ValidationError):
        validate_recipient(None)


def test_comment_bounds():
    assert validate_comment('  Great post!  ') == 'Great post!'
    assert validate_comment('c' * 1000) == 'c' * 1000
    with pytest.raises(ValidationError):
        validate_comment('c' * 1001)
    with pytest.raises(ValidationError):
        validate_comment('   ')


def test_slugify():
    assert slugify('  My First   Post ') == 'my-first-post'


def test_draft_requires_title_slug_and_body():
    draft = {'title': 'Hello', 'slug': 'hello', 'content': 'Body', 'category': 'journalism'}
    assert validate_draft(draft, 'post')['slug'] == 'hello'

    with pytest.raises(ValidationError) as exc:
        validate_draft(dict(draft, title=''), 'post')
    assert exc.value.field == 'title'

    project = {'title': 'P', 'slug': 'p', 'description': '', 'category': 'design'}
    with pytest.raises(ValidationError) as exc:
        validate_draft(project, 'project')
    assert exc.value.field == 'description'


def test_draft_rejects_bad_slug_and_category():
    draft = {'title': 'Hello', 'slug': 'Hello World!', 'content': 'Body', 'category': 'journalism'}
    with pytest.raises(ValidationError) as exc:
        validate_draft(draft, 'post')
    assert exc.value.field == 'slug'

    draft = {'title': 'Hello', 'slug': 'hello', 'content': 'Body', 'category': 'design'}
    with pytest.raises(ValidationError) as exc:
        validate_draft(draft, 'post')
    assert exc.value.field == 'category'


def test_categories_are_closed():
    assert parse_category('Design', 'project') == 'design'
    assert parse_category('', 'project', allow_all=True) == 'all'
    with pytest.raises(ValidationError):
        parse_category('all', 'project')
    with pytest.raises(ValidationError):
        parse_category('technology', 'project')
    assert get_category_label('education', 'post') == 'Education'
    assert category_choices('post', include_all=True)[0] == ('all', 'All Posts')
