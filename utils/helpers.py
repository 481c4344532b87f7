"""
Helpers Module - Template filters and small formatting utilities
"""

import re
from datetime import datetime
from flask import current_app
from markupsafe import escape, Markup

ALLOWED_TAGS = ['p', 'br', 'strong', 'em', 'ul', 'ol', 'li', 'span', 'b', 'i', 'u',
                'h2', 'h3', 'blockquote', 'code', 'pre']


def sanitize_content(text: str) -> str:
    """Sanitize post content for safe rendering.

    - Removes <script> and <style> blocks
    - Preserves a small set of formatting tags, stripped of attributes
    - If input contains no HTML, converts double-newlines into paragraphs and single newlines into <br>
    """
    try:
        if not text:
            return Markup('')

        txt = text.replace('\r\n', '\n').replace('\r', '\n')
        txt = re.sub(r'\n\s*\n+', '\n\n', txt)
        txt = txt.strip()

        txt = re.sub(r'<(script|style).*?>.*?</\1>', '', txt, flags=re.I | re.S)

        # Plain text: escape and wrap paragraphs
        if '<' not in txt and '>' not in txt:
            escaped = str(escape(txt)).strip()
            paragraphs = [p.strip() for p in re.split(r'\n\s*\n', escaped) if p.strip()]
            paragraphs = [p.replace('\n', '<br>\n') for p in paragraphs]
            return Markup(''.join(f'<p>{p}</p>' for p in paragraphs))

        # Drop disallowed tags but keep their inner text
        txt = re.sub(r'</?(?!(' + '|'.join(ALLOWED_TAGS) + r')\b)[^>]*>', '', txt, flags=re.I)
        # Allowed tags lose all attributes
        txt = re.sub(r'<(\w+)[^>]*>', lambda m: f'<{m.group(1).lower()}>', txt)
        txt = re.sub(r'(?:(?:<br\s*/?>)\s*){2,}', '<br>\n', txt, flags=re.I)

        return Markup(txt.strip())
    except Exception as e:
        current_app.logger.error(f"Error sanitizing content: {str(e)}")
        return Markup('')


def format_date(value, fmt='%B %d, %Y'):
    """Render an ISO string or datetime as a display date"""
    if not value:
        return ''
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return value
    return value.strftime(fmt)


def initials(name):
    """Avatar fallback letters for a commenter"""
    parts = [p for p in (name or '').split() if p]
    if not parts:
        return '?'
    return ''.join(p[0] for p in parts[:2]).upper()


def build_sitemap(base_url, posts):
    """Sitemap XML for the landing page and every published post"""
    sitemap_entries = [{
        'loc': f'{base_url}/',
        'changefreq': 'weekly',
        'priority': '1.0',
        'lastmod': datetime.now().strftime('%Y-%m-%d')
    }, {
        'loc': f'{base_url}/portfolio/',
        'changefreq': 'weekly',
        'priority': '0.8',
        'lastmod': datetime.now().strftime('%Y-%m-%d')
    }]

    for post in posts:
        stamp = post.updated_at or post.created_at or datetime.now()
        sitemap_entries.append({
            'loc': f"{base_url}/blog/{post.slug}",
            'changefreq': 'monthly',
            'priority': '0.8',
            'lastmod': stamp.strftime('%Y-%m-%d')
        })

    sitemap_xml = ['<?xml version="1.0" encoding="UTF-8"?>']
    sitemap_xml.append('<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">')

    for entry in sitemap_entries:
        sitemap_xml.append('<url>')
        sitemap_xml.append(f'<loc>{escape(entry["loc"])}</loc>')
        sitemap_xml.append(f'<lastmod>{entry["lastmod"]}</lastmod>')
        sitemap_xml.append(f'<changefreq>{entry["changefreq"]}</changefreq>')
        sitemap_xml.append(f'<priority>{entry["priority"]}</priority>')
        sitemap_xml.append('</url>')

    sitemap_xml.append('</urlset>')
    return '\n'.join(sitemap_xml)


__all__ = [
    'sanitize_content',
    'format_date',
    'initials',
    'build_sitemap'
]
