"""
Seed Script: JSON to database
Loads tags, blog posts and portfolio projects from seed_content.json

Usage:
    python migrations/seed_content.py [path/to/content.json]
"""

import os
import sys
import json
from datetime import datetime

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app
from extensions import db
from models import Post, Project, User
from utils.data import get_or_create_tags
from utils.errors import ValidationError
from utils.validators import validate_draft

DEFAULT_SEED_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'seed_content.json')


def parse_date(date_str):
    """Parse date string to datetime object"""
    if not date_str:
        return None
    for fmt in ('%Y-%m-%d %H:%M:%S', '%Y-%m-%d', '%Y-%m-%dT%H:%M:%S'):
        try:
            return datetime.strptime(date_str, fmt)
        except ValueError:
            continue
    return None


def seed_tags(data):
    """Pre-seed tag names"""
    names = data.get('tags', [])
    print(f"Seeding {len(names)} tags...")
    get_or_create_tags(names)
    db.session.commit()


def seed_posts(data, author=None):
    """Seed blog posts, skipping slugs that already exist"""
    posts_data = data.get('posts', [])
    print(f"Seeding {len(posts_data)} posts...")

    for post_json in posts_data:
        try:
            draft = validate_draft(post_json, 'post')
        except ValidationError as e:
            print(f"  [SKIP] {post_json.get('slug') or post_json.get('title')}: {e.message}")
            continue

        if Post.query.filter_by(slug=draft['slug']).first():
            print(f"  Post {draft['slug']} already exists, skipping...")
            continue

        published_on = parse_date(post_json.get('date'))
        post = Post(
            slug=draft['slug'],
            title=draft['title'],
            excerpt=draft.get('excerpt', ''),
            content=draft['content'],
            category=draft['category'],
            featured=bool(draft.get('featured')),
            published=bool(draft.get('published', True)),
            read_time=draft.get('read_time') or '5 min read',
            cover_image=draft.get('cover_image'),
            author_id=author.id if author else None,
            published_at=published_on,
            created_at=published_on or datetime.utcnow()
        )
        post.tags = get_or_create_tags(post_json.get('tags', []))
        db.session.add(post)
        print(f"  [OK] Seeded post: {post.slug}")

    db.session.commit()


def seed_projects(data):
    """Seed portfolio projects, skipping slugs that already exist"""
    projects_data = data.get('projects', [])
    print(f"Seeding {len(projects_data)} projects...")

    for project_json in projects_data:
        try:
            draft = validate_draft(project_json, 'project')
        except ValidationError as e:
            print(f"  [SKIP] {project_json.get('slug') or project_json.get('title')}: {e.message}")
            continue

        if Project.query.filter_by(slug=draft['slug']).first():
            print(f"  Project {draft['slug']} already exists, skipping...")
            continue

        project = Project(
            slug=draft['slug'],
            title=draft['title'],
            description=draft['description'],
            category=draft['category'],
            image_url=draft.get('image_url'),
            project_url=draft.get('project_url'),
            featured=bool(draft.get('featured')),
            published=bool(draft.get('published', True))
        )
        project.tags = get_or_create_tags(project_json.get('tags', []))
        db.session.add(project)
        print(f"  [OK] Seeded project: {project.slug}")

    db.session.commit()


def main(seed_file=DEFAULT_SEED_FILE):
    """Run the seed"""
    print("=" * 60)
    print("Seeding content from JSON")
    print("=" * 60)

    with open(seed_file, 'r', encoding='utf-8') as f:
        data = json.load(f)

    app = create_app()
    with app.app_context():
        author = User.query.filter_by(role='admin').first()
        if not author:
            print("No admin account found; posts will be seeded without an author")
        try:
            seed_tags(data)
            seed_posts(data, author=author)
            seed_projects(data)
        except Exception as e:
            db.session.rollback()
            print(f"[ERROR] Seeding failed: {str(e)}")
            raise

    print("=" * 60)
    print("Seeding completed")
    print("=" * 60)


if __name__ == '__main__':
    main(sys.argv[1] if len(sys.argv) > 1 else DEFAULT_SEED_FILE)
