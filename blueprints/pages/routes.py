"""
Pages Routes - Landing page and SEO files
"""

from flask import render_template, request, current_app
from utils.content import get_landing_sections
from utils.data import list_published, list_tag_names
from utils.errors import RemoteError
from utils.filters import split_featured
from utils.helpers import build_sitemap
from . import pages_bp

LANDING_PROJECT_LIMIT = 6
LANDING_POST_LIMIT = 6


@pages_bp.route('/')
def index():
    """Landing page - hero, about, experience, skills, portfolio, blog, contact"""
    try:
        projects = [p.to_dict() for p in list_published('project')]
        posts = [p.to_dict() for p in list_published('post')]
        tags = list_tag_names()
    except RemoteError as e:
        # Static sections still render when the database is unreachable
        current_app.logger.warning(f"Landing page rendered without content: {e.message}")
        projects, posts, tags = [], [], []

    featured_posts, regular_posts = split_featured(posts[:LANDING_POST_LIMIT])

    return render_template('index.html',
                           projects=projects[:LANDING_PROJECT_LIMIT],
                           featured_posts=featured_posts,
                           regular_posts=regular_posts,
                           tags=tags,
                           **get_landing_sections())


@pages_bp.route('/sitemap.xml')
def sitemap():
    """Generate dynamic sitemap for SEO"""
    base_url = request.url_root.rstrip('/')
    sitemap_xml = build_sitemap(base_url, list_published('post'))

    response = current_app.make_response(sitemap_xml)
    response.headers['Content-Type'] = 'application/xml; charset=utf-8'
    return response


@pages_bp.route('/robots.txt')
def robots():
    """Generate robots.txt for SEO"""
    robots_txt = """User-agent: *
Allow: /
Allow: /blog/
Allow: /portfolio
Allow: /sitemap.xml
Disallow: /admin/
Disallow: /api/

Sitemap: """ + request.url_root.rstrip('/') + "/sitemap.xml"

    response = current_app.make_response(robots_txt)
    response.headers['Content-Type'] = 'text/plain; charset=utf-8'
    return response
