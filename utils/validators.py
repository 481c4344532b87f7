"""
Validators Module - Field rules for contact, comment and admin forms
Every check is fail-fast: the first violated field raises ValidationError.
"""

import re
from .errors import ValidationError
from .categories import parse_category

EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')
SLUG_PATTERN = re.compile(r'^[a-z0-9]+(?:-[a-z0-9]+)*$')

NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 255
SUBJECT_MAX_LENGTH = 200
MESSAGE_MAX_LENGTH = 2000
COMMENT_MAX_LENGTH = 1000

# (field, label, max length) in the order they are checked
CONTACT_FIELDS = [
    ('name', 'Name', NAME_MAX_LENGTH),
    ('email', 'Email', EMAIL_MAX_LENGTH),
    ('subject', 'Subject', SUBJECT_MAX_LENGTH),
    ('message', 'Message', MESSAGE_MAX_LENGTH),
]

# Required draft fields per content kind
DRAFT_REQUIRED_FIELDS = {
    'post': ('title', 'slug', 'content'),
    'project': ('title', 'slug', 'description')
}


def _clean(value):
    if value is None:
        return ''
    if not isinstance(value, str):
        value = str(value)
    return value.strip()


def is_valid_email(value):
    """Check the local@domain.tld shape of an email address"""
    return bool(EMAIL_PATTERN.match(_clean(value)))


def require_text(value, field, label, max_length):
    """Trim a text value and check presence and length"""
    text = _clean(value)
    if not text:
        raise ValidationError(field, f"{label} is required")
    if len(text) > max_length:
        raise ValidationError(field, f"{label} must be less than {max_length} characters")
    return text


def validate_email(value, field='email', max_length=EMAIL_MAX_LENGTH):
    email = _clean(value)
    if not email:
        raise ValidationError(field, "Valid email is required")
    if len(email) > max_length:
        raise ValidationError(field, f"Email must be less than {max_length} characters")
    if not is_valid_email(email):
        raise ValidationError(field, "Invalid email address")
    return email


def validate_contact(payload):
    """
    Validate a contact form submission

    Args:
        payload (dict): name, email, subject, message

    Returns:
        dict: Trimmed field values

    Raises:
        ValidationError: On the first violated field
    """
    payload = payload or {}
    cleaned = {}
    for field, label, max_length in CONTACT_FIELDS:
        if field == 'email':
            cleaned[field] = validate_email(payload.get(field))
        else:
            cleaned[field] = require_text(payload.get(field), field, label, max_length)
    return cleaned


def validate_recipient(value):
    """Recipient of the owner notification must look like an email address"""
    recipient = _clean(value)
    if not recipient or not is_valid_email(recipient):
        raise ValidationError('recipientEmail', "Recipient email is invalid")
    return recipient


def validate_comment(content):
    """Validate comment text, returns the trimmed content"""
    text = _clean(content)
    if not text:
        raise ValidationError('content', "Comment cannot be empty")
    if len(text) > COMMENT_MAX_LENGTH:
        raise ValidationError('content', f"Comment must be less than {COMMENT_MAX_LENGTH} characters")
    return text


def slugify(text):
    """Lower-case and join whitespace runs with '-'"""
    return re.sub(r'\s+', '-', _clean(text).lower())


def validate_draft(draft, kind):
    """
    Validate an admin draft before it is persisted

    Args:
        draft (dict): Editable record fields
        kind (str): 'post' or 'project'

    Returns:
        dict: The draft with trimmed required fields

    Raises:
        ValidationError: Required field empty, malformed slug or unknown category
    """
    cleaned = dict(draft)
    for field in DRAFT_REQUIRED_FIELDS[kind]:
        value = _clean(draft.get(field))
        if not value:
            raise ValidationError(field, "Please fill all required fields")
        cleaned[field] = value
    if not SLUG_PATTERN.match(cleaned['slug']):
        raise ValidationError('slug', "Slug may only contain lowercase letters, numbers and hyphens")
    cleaned['category'] = parse_category(draft.get('category'), kind)
    return cleaned


__all__ = [
    'require_text',
    'is_valid_email',
    'validate_email',
    'validate_contact',
    'validate_recipient',
    'validate_comment',
    'validate_draft',
    'slugify',
    'NAME_MAX_LENGTH',
    'EMAIL_MAX_LENGTH',
    'SUBJECT_MAX_LENGTH',
    'MESSAGE_MAX_LENGTH',
    'COMMENT_MAX_LENGTH'
]
