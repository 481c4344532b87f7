"""
Admin Routes - Listing, creating, editing and deleting posts and projects

URL            Editor state
/<section>     LISTING
/<section>/new CREATING
/<section>/<id>/edit EDITING
"""

from flask import render_template, redirect, url_for, request, flash, current_app
from flask_login import current_user
from utils.categories import category_choices
from utils.data import ContentRepository
from utils.decorators import admin_required
from utils.editor import Editor, EditorState, draft_from_form
from utils.errors import RemoteError
from . import admin_bp

SECTIONS = {
    'posts': 'post',
    'projects': 'project'
}

SECTION_LABELS = {
    'posts': ('Post', 'Blog Posts'),
    'projects': ('Project', 'Portfolio Projects')
}


def _editor(section):
    kind = SECTIONS[section]
    return Editor(kind, ContentRepository(kind))


def _render_form(section, editor):
    singular, plural = SECTION_LABELS[section]
    return render_template('admin/form.html',
                           section=section,
                           singular=singular,
                           plural=plural,
                           editor=editor,
                           creating=editor.state is EditorState.CREATING,
                           draft=editor.draft,
                           categories=category_choices(editor.kind))


def _save(section, editor):
    """Apply the submitted form and save; re-render the form on failure"""
    editor.update(draft_from_form(request.form, editor.kind))
    creating = editor.editing_id is None
    try:
        saved = editor.save(author=current_user)
    except RemoteError as e:
        flash(e.message, 'error')
        return _render_form(section, editor)

    if not saved:
        flash(editor.error, 'error')
        return _render_form(section, editor)

    singular = SECTION_LABELS[section][0]
    flash(f"{singular} {'created' if creating else 'updated'} successfully!", 'success')
    return redirect(url_for('admin.list_records', section=section))


@admin_bp.route('/')
@admin_required
def index():
    """Admin dashboard entry point"""
    return redirect(url_for('admin.list_records', section='posts'))


@admin_bp.route('/<any(posts, projects):section>')
@admin_required
def list_records(section):
    """List every post or project, published or not"""
    editor = _editor(section)
    editor.refresh()
    singular, plural = SECTION_LABELS[section]
    return render_template('admin/list.html',
                           section=section,
                           singular=singular,
                           plural=plural,
                           records=editor.items)


@admin_bp.route('/<any(posts, projects):section>/new', methods=['GET', 'POST'])
@admin_required
def create_record(section):
    """Blank draft; POST saves it"""
    editor = _editor(section)
    editor.start_create()
    if request.method == 'POST':
        return _save(section, editor)
    return _render_form(section, editor)


@admin_bp.route('/<any(posts, projects):section>/<record_id>/edit', methods=['GET', 'POST'])
@admin_required
def edit_record(section, record_id):
    """Existing record loaded into a draft; POST saves it"""
    editor = _editor(section)
    editor.start_edit(record_id)
    if request.method == 'POST':
        return _save(section, editor)
    return _render_form(section, editor)


@admin_bp.route('/<any(posts, projects):section>/<record_id>/delete', methods=['POST'])
@admin_required
def delete_record(section, record_id):
    """Delete after explicit confirmation; no undo"""
    editor = _editor(section)
    confirmed = request.form.get('confirm') == 'yes'
    singular = SECTION_LABELS[section][0]

    try:
        deleted = editor.delete(record_id, confirmed=confirmed)
    except RemoteError as e:
        flash(e.message, 'error')
        return redirect(url_for('admin.list_records', section=section))

    if deleted:
        current_app.logger.info(f"{current_user.email} deleted {editor.kind} {record_id}")
        flash(f'{singular} deleted successfully', 'success')
    else:
        flash('Deletion cancelled.', 'info')
    return redirect(url_for('admin.list_records', section=section))
