"""
Contact Blueprint - Contact form and the email relay endpoint
"""

from flask import Blueprint

contact_bp = Blueprint('contact', __name__, url_prefix='')

from . import routes
