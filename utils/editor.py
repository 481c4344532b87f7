"""
Editor Module - Create/edit/delete flow for posts and projects

One Editor drives one content kind through three states:

    LISTING  --start_create()-->  CREATING
    LISTING  --start_edit(id)-->  EDITING
    CREATING/EDITING --save() ok / cancel()--> LISTING

A failed save keeps the current state and records the validation message.
Deletion only happens from LISTING and only when confirmed.
"""

import enum
from flask import current_app
from .categories import DEFAULT_CATEGORY
from .errors import ValidationError
from .validators import validate_draft, slugify


class EditorState(enum.Enum):
    LISTING = 'listing'
    CREATING = 'creating'
    EDITING = 'editing'


BLANK_DRAFTS = {
    'post': {
        'title': '',
        'slug': '',
        'excerpt': '',
        'content': '',
        'category': DEFAULT_CATEGORY,
        'featured': False,
        'published': False,
        'read_time': '5 min read',
        'cover_image': None,
        'tags': []
    },
    'project': {
        'title': '',
        'slug': '',
        'description': '',
        'category': DEFAULT_CATEGORY,
        'image_url': None,
        'project_url': None,
        'featured': False,
        'published': False,
        'tags': []
    }
}

BOOLEAN_FIELDS = ('featured', 'published')
OPTIONAL_URL_FIELDS = ('cover_image', 'image_url', 'project_url')


def draft_from_form(form, kind):
    """
    Convert submitted admin form fields into draft values

    Checkboxes become booleans, the comma-separated tag field becomes a list,
    blank optional URLs become None and the slug is normalized.
    """
    draft = {}
    for field in BLANK_DRAFTS[kind]:
        if field in BOOLEAN_FIELDS:
            draft[field] = form.get(field) in ('on', 'true', '1', 'yes')
        elif field == 'tags':
            draft['tags'] = [t.strip() for t in form.get('tags', '').split(',') if t.strip()]
        elif field == 'slug':
            draft['slug'] = slugify(form.get('slug', ''))
        elif field in OPTIONAL_URL_FIELDS:
            draft[field] = form.get(field, '').strip() or None
        elif field in form:
            draft[field] = form.get(field, '')
    return draft


class Editor:
    """Stateful admin editor for one content kind"""

    def __init__(self, kind, repository):
        if kind not in BLANK_DRAFTS:
            raise ValueError(f"Unknown content kind: {kind}")
        self.kind = kind
        self.repository = repository
        self.state = EditorState.LISTING
        self.draft = None
        self.editing_id = None
        self.error = None
        self.items = []

    def refresh(self):
        self.items = self.repository.list()
        return self.items

    def start_create(self):
        self._require_state(EditorState.LISTING)
        self.draft = dict(BLANK_DRAFTS[self.kind], tags=[])
        self.editing_id = None
        self.error = None
        self.state = EditorState.CREATING
        return self.draft

    def start_edit(self, record_id):
        self._require_state(EditorState.LISTING)
        record = self.repository.get(record_id)
        self.draft = {field: record.get(field) for field in BLANK_DRAFTS[self.kind]}
        self.draft['tags'] = list(record.get('tags') or [])
        self.editing_id = record_id
        self.error = None
        self.state = EditorState.EDITING
        return self.draft

    def update(self, fields):
        self._require_editing()
        self.draft.update(fields)
        return self.draft

    def save(self, author=None):
        """
        Persist the draft

        Returns:
            bool: True when saved and back in LISTING, False when validation
            failed (state and draft are kept, self.error holds the message)
        """
        self._require_editing()
        try:
            draft = validate_draft(self.draft, self.kind)
            if self.repository.slug_taken(draft['slug'], exclude_id=self.editing_id):
                raise ValidationError('slug', "Slug is already in use")
        except ValidationError as e:
            self.error = e.message
            current_app.logger.info(f"Rejected {self.kind} draft: {e.field}: {e.message}")
            return False

        if self.state is EditorState.CREATING:
            self.repository.create(draft, author=author)
        else:
            self.repository.update(self.editing_id, draft, author=author)

        self._reset()
        self.refresh()
        return True

    def cancel(self):
        self._require_editing()
        self._reset()

    def delete(self, record_id, confirmed=False):
        """Delete from the listing; unconfirmed requests change nothing"""
        self._require_state(EditorState.LISTING)
        if not confirmed:
            return False
        self.repository.delete(record_id)
        self.refresh()
        return True

    def _reset(self):
        self.draft = None
        self.editing_id = None
        self.error = None
        self.state = EditorState.LISTING

    def _require_state(self, state):
        if self.state is not state:
            raise RuntimeError(f"Editor is {self.state.value}, expected {state.value}")

    def _require_editing(self):
        if self.state not in (EditorState.CREATING, EditorState.EDITING):
            raise RuntimeError(f"Editor is {self.state.value}, no draft open")


__all__ = ['EditorState', 'Editor', 'draft_from_form', 'BLANK_DRAFTS']
