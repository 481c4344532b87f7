"""
Auth Routes - Sign in, sign out and visitor registration
"""

from flask import render_template, redirect, url_for, request, flash, current_app
from flask_login import login_user, logout_user, current_user
from utils.data import get_user_by_email, create_user
from utils.errors import ValidationError, RemoteError
from utils.security import get_client_ip, hash_password, verify_password
from utils.validators import validate_email, require_text, NAME_MAX_LENGTH
from . import auth_bp

PASSWORD_MIN_LENGTH = 8


def _safe_next(target):
    """Only follow relative redirect targets"""
    if target and target.startswith('/') and not target.startswith('//'):
        return target
    return url_for('pages.index')


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """Email and password sign in"""
    if current_user.is_authenticated:
        return redirect(url_for('pages.index'))

    if request.method == 'POST':
        email = request.form.get('email', '').strip()
        password = request.form.get('password', '')

        user = get_user_by_email(email)
        if user and verify_password(password, user.password_hash):
            login_user(user, remember=bool(request.form.get('remember')))
            current_app.logger.info(f"User {user.email} signed in from {get_client_ip()}")
            flash(f'Welcome back, {user.full_name or user.email}!', 'success')
            if user.is_admin and not request.args.get('next'):
                return redirect(url_for('admin.index'))
            return redirect(_safe_next(request.args.get('next')))

        current_app.logger.warning(f"Failed sign in for {email} from {get_client_ip()}")
        flash('Invalid credentials. Please try again.', 'error')

    return render_template('auth/login.html')


@auth_bp.route('/logout')
def logout():
    """Sign out current user"""
    if current_user.is_authenticated:
        current_app.logger.info(f"User {current_user.email} signed out")
        logout_user()
        flash('Signed out successfully', 'success')
    return redirect(url_for('pages.index'))


@auth_bp.route('/register', methods=['GET', 'POST'])
def register():
    """Visitor accounts, used for commenting"""
    if current_user.is_authenticated:
        return redirect(url_for('pages.index'))

    if request.method == 'POST':
        try:
            full_name = require_text(request.form.get('full_name'), 'full_name', 'Name', NAME_MAX_LENGTH)
            email = validate_email(request.form.get('email'))
            password = request.form.get('password', '')
            if len(password) < PASSWORD_MIN_LENGTH:
                raise ValidationError('password', f"Password must be at least {PASSWORD_MIN_LENGTH} characters")
            if get_user_by_email(email):
                raise ValidationError('email', "An account with this email already exists")

            user = create_user(email, hash_password(password), full_name=full_name)
            login_user(user)
            flash('Account created. Welcome!', 'success')
            return redirect(_safe_next(request.args.get('next')))
        except ValidationError as e:
            flash(e.message, 'error')
        except RemoteError as e:
            flash(e.message, 'error')

    return render_template('auth/register.html')
