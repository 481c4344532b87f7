"""
Portfolio Blueprint - Public project listing
"""

from flask import Blueprint

portfolio_bp = Blueprint('portfolio', __name__, url_prefix='/portfolio')

from . import routes
