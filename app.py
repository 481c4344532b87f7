"""
Portfolio Site - Main Application Entry Point
Application Factory Pattern for a modular architecture

This module initializes the Flask application with all necessary extensions,
configurations, and hooks. All actual route handling is delegated to blueprints.
"""

import os
from datetime import datetime
from flask import Flask, render_template, redirect, url_for, request, flash, jsonify
from config import get_config
from extensions import db, login_manager
from utils.errors import ValidationError, AuthorizationError, RemoteError, NotFoundError
from utils.categories import get_category_label, category_choices
from utils.content import NAV_ITEMS, SITE

# Import all blueprints
from blueprints.auth import auth_bp
from blueprints.pages import pages_bp
from blueprints.blog import blog_bp
from blueprints.portfolio import portfolio_bp
from blueprints.admin import admin_bp
from blueprints.contact import contact_bp
from blueprints.api import api_bp


def create_app(config_name=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    app.config.from_object(get_config(config_name))
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # Initialize extensions with app
    initialize_extensions(app)

    # Register Jinja filters
    register_template_filters(app)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio application is running'}, 200

    return app


def initialize_extensions(app):
    """Initialize Flask extensions with the app instance"""
    db.init_app(app)
    login_manager.init_app(app)

    # Models register the user loader on import
    import models  # noqa: F401

    # Create tables if they don't exist
    with app.app_context():
        try:
            from sqlalchemy import text
            db.create_all()
            db.session.execute(text('SELECT 1'))
            app.logger.info("✓ Database initialized successfully")
        except Exception as e:
            app.logger.error(f"✗ Database initialization failed: {str(e)}")
            return

        from utils.security import ensure_admin_user
        try:
            ensure_admin_user()
        except RemoteError as e:
            app.logger.error(f"✗ Admin bootstrap failed: {e.message}")


def register_template_filters(app):
    """Register Jinja filters used by the templates"""
    from utils.helpers import sanitize_content, format_date, initials
    from utils.filters import toggle_tag

    app.jinja_env.filters['sanitize_content'] = sanitize_content
    app.jinja_env.filters['format_date'] = format_date
    app.jinja_env.filters['initials'] = initials
    app.jinja_env.filters['category_label'] = get_category_label
    app.jinja_env.filters['toggle_tag'] = toggle_tag
    app.logger.debug('✓ Registered Jinja filters')


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(auth_bp)
    app.register_blueprint(pages_bp)
    app.register_blueprint(blog_bp)
    app.register_blueprint(portfolio_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(contact_bp)
    app.register_blueprint(api_bp)


def _wants_json():
    return request.path.startswith('/api/')


def register_error_handlers(app):
    """Register custom error handlers"""

    @app.errorhandler(ValidationError)
    def validation_error(e):
        app.logger.info(f"Validation error on {request.path}: {e.field}: {e.message}")
        if _wants_json():
            return jsonify({'error': e.message, 'field': e.field}), 400
        return render_template('400.html', message=e.message), 400

    @app.errorhandler(AuthorizationError)
    def authorization_error(e):
        flash('Access denied. You do not have admin privileges.', 'error')
        return redirect(url_for('pages.index'))

    @app.errorhandler(NotFoundError)
    def not_found_error(e):
        if _wants_json():
            return jsonify({'error': e.message}), 404
        return render_template('404.html', message=e.message), 404

    @app.errorhandler(RemoteError)
    def remote_error(e):
        if _wants_json():
            return jsonify({'error': e.message}), 500
        return render_template('500.html', message=e.message), 500

    @app.errorhandler(400)
    def bad_request(e):
        return render_template('400.html'), 400

    @app.errorhandler(403)
    def forbidden(e):
        return render_template('403.html'), 403

    @app.errorhandler(404)
    def page_not_found(e):
        if _wants_json():
            return jsonify({'error': 'Not found'}), 404
        return render_template('404.html'), 404

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        return render_template('500.html'), 500


def register_hooks(app):
    """Register request/response hooks and context processors"""

    @app.context_processor
    def inject_global_vars():
        """Values every template can rely on"""
        from utils.ui_helpers import inject_blueprint_assets, get_page_specific_class

        blueprint_assets = inject_blueprint_assets()
        page_class = get_page_specific_class(
            blueprint_assets.get('current_blueprint'),
            request.endpoint.split('.')[-1] if request.endpoint else None
        )

        default_meta = {
            'title': f"{SITE['name']} | {SITE['tagline']}",
            'description': SITE['intro'],
            'keywords': 'Journalism, Technology, Education, Marketing, Portfolio, Blog'
        }

        return {
            'site': SITE,
            'nav_items': NAV_ITEMS,
            'current_year': datetime.now().year,
            'default_meta': default_meta,
            'post_categories': category_choices('post'),
            'project_categories': category_choices('project'),
            'blueprint_styles': blueprint_assets.get('blueprint_styles', []),
            'blueprint_scripts': blueprint_assets.get('blueprint_scripts', []),
            'current_blueprint': blueprint_assets.get('current_blueprint'),
            'page_class': page_class
        }

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'SAMEORIGIN'
        if not app.debug:
            response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'
        return response


if __name__ == '__main__':
    env = os.environ.get('FLASK_ENV', 'development')

    app = create_app(env)

    app.run(
        host='0.0.0.0',
        port=int(os.environ.get('PORT', 5000)),
        debug=(env == 'development')
    )
