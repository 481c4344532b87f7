"""
Pages Blueprint - Public landing page and SEO files
Handles: Landing sections, sitemap, robots.txt
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__, url_prefix='')

from . import routes
