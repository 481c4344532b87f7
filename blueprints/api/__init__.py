"""
API Blueprint - Read-only JSON listings of published content
"""

from flask import Blueprint

api_bp = Blueprint('api', __name__, url_prefix='/api')

from . import routes
