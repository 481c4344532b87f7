"""
Decorators Module - Authentication and authorization decorators
"""

from functools import wraps
from flask import redirect, url_for, flash, current_app, request
from flask_login import current_user
from .errors import AuthorizationError


def login_required(f):
    """Decorator to require a signed-in user"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_user.is_authenticated:
            flash('Please sign in to continue.', 'error')
            return redirect(url_for('auth.login', next=request.path))
        return f(*args, **kwargs)
    return decorated_function


def admin_required(f):
    """Decorator to require the admin capability; the error handler sends others home"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_user.is_authenticated or not current_user.is_admin:
            who = current_user.email if current_user.is_authenticated else 'anonymous'
            current_app.logger.warning(f"Access denied to {request.path} for {who}")
            raise AuthorizationError("You do not have admin privileges.")
        return f(*args, **kwargs)
    return decorated_function
