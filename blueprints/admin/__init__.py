"""
Admin Blueprint - Post and project management
Every route requires the admin capability.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__, url_prefix='/admin')

from . import routes
