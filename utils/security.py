"""
Security Module - Client IP lookup, CORS headers and admin bootstrap
"""

from flask import request, current_app
from werkzeug.security import generate_password_hash, check_password_hash

CORS_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Headers': 'authorization, x-client-info, apikey, content-type',
    'Access-Control-Allow-Methods': 'POST, OPTIONS'
}


def get_client_ip():
    """Get real client IP address"""
    return request.environ.get('HTTP_X_FORWARDED_FOR',
                              request.environ.get('REMOTE_ADDR', 'unknown'))


def add_cors_headers(response):
    """Attach the permissive CORS headers used by the public API"""
    for header, value in CORS_HEADERS.items():
        response.headers[header] = value
    return response


def hash_password(password):
    return generate_password_hash(password)


def verify_password(password, password_hash):
    """Verify password against hash"""
    return check_password_hash(password_hash, password)


def ensure_admin_user():
    """Create the admin account from ADMIN_EMAIL/ADMIN_PASSWORD if it is missing"""
    from .data import get_user_by_email, create_user

    email = current_app.config.get('ADMIN_EMAIL')
    password = current_app.config.get('ADMIN_PASSWORD')
    if not email or not password:
        current_app.logger.debug("Admin credentials not configured, skipping bootstrap")
        return None

    user = get_user_by_email(email)
    if user:
        if not user.is_admin:
            current_app.logger.warning(f"Account {email} exists without admin role")
        return user

    return create_user(email, hash_password(password),
                       full_name=current_app.config.get('ADMIN_NAME'), role='admin')


__all__ = [
    'CORS_HEADERS',
    'get_client_ip',
    'add_cors_headers',
    'hash_password',
    'verify_password',
    'ensure_admin_user'
]
