"""
Auth Blueprint - Authentication
Handles: Login, Logout, Registration
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__, url_prefix='')

from . import routes
