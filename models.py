from extensions import db, login_manager
from datetime import datetime
from flask_login import UserMixin
import uuid


# Many-to-many join tables
blog_post_tags = db.Table(
    'blog_post_tags',
    db.Column('blog_post_id', db.String(36), db.ForeignKey('blog_posts.id', ondelete='CASCADE'), primary_key=True),
    db.Column('tag_id', db.String(36), db.ForeignKey('tags.id', ondelete='CASCADE'), primary_key=True)
)

portfolio_project_tags = db.Table(
    'portfolio_project_tags',
    db.Column('project_id', db.String(36), db.ForeignKey('portfolio_projects.id', ondelete='CASCADE'), primary_key=True),
    db.Column('tag_id', db.String(36), db.ForeignKey('tags.id', ondelete='CASCADE'), primary_key=True)
)


class User(UserMixin, db.Model):
    __tablename__ = 'users'
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = db.Column(db.String(255), unique=True, nullable=False)
    full_name = db.Column(db.String(255))
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(50), default='user')  # user, admin
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    @property
    def is_admin(self):
        return self.role == 'admin'

    def to_dict(self):
        return {
            'id': self.id,
            'full_name': self.full_name,
            'email': self.email
        }


@login_manager.user_loader
def load_user(user_id):
    return db.session.get(User, user_id)


class Tag(db.Model):
    __tablename__ = 'tags'
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = db.Column(db.String(100), unique=True, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)


class Post(db.Model):
    __tablename__ = 'blog_posts'
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    slug = db.Column(db.String(200), unique=True, nullable=False)
    title = db.Column(db.String(200), nullable=False)
    excerpt = db.Column(db.Text, default='')
    content = db.Column(db.Text, nullable=False)
    category = db.Column(db.String(50), nullable=False, default='journalism')  # journalism, technology, education, marketing
    featured = db.Column(db.Boolean, default=False)
    published = db.Column(db.Boolean, default=False)
    read_time = db.Column(db.String(50), default='5 min read')
    cover_image = db.Column(db.String(500))
    author_id = db.Column(db.String(36), db.ForeignKey('users.id'))
    published_at = db.Column(db.DateTime)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    author = db.relationship('User', backref='posts', lazy=True)
    tags = db.relationship('Tag', secondary=blog_post_tags, lazy='selectin', order_by='Tag.name')
    comments = db.relationship('Comment', backref='post', lazy=True, cascade='all, delete-orphan',
                               order_by='Comment.created_at.desc()')

    def to_dict(self):
        return {
            'id': self.id,
            'slug': self.slug,
            'title': self.title,
            'excerpt': self.excerpt or '',
            'content': self.content,
            'category': self.category,
            'featured': bool(self.featured),
            'published': bool(self.published),
            'read_time': self.read_time,
            'cover_image': self.cover_image,
            'author': self.author.to_dict() if self.author else None,
            'published_at': self.published_at.isoformat() if self.published_at else None,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'tags': [tag.name for tag in self.tags]
        }


class Project(db.Model):
    __tablename__ = 'portfolio_projects'
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    slug = db.Column(db.String(200), unique=True, nullable=False)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False)
    category = db.Column(db.String(50), nullable=False, default='journalism')  # journalism, design, development, marketing
    image_url = db.Column(db.String(500))
    project_url = db.Column(db.String(500))
    featured = db.Column(db.Boolean, default=False)
    published = db.Column(db.Boolean, default=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    tags = db.relationship('Tag', secondary=portfolio_project_tags, lazy='selectin', order_by='Tag.name')

    def to_dict(self):
        return {
            'id': self.id,
            'slug': self.slug,
            'title': self.title,
            'description': self.description,
            'category': self.category,
            'image_url': self.image_url,
            'project_url': self.project_url,
            'featured': bool(self.featured),
            'published': bool(self.published),
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'tags': [tag.name for tag in self.tags]
        }


class Comment(db.Model):
    __tablename__ = 'comments'
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    blog_post_id = db.Column(db.String(36), db.ForeignKey('blog_posts.id', ondelete='CASCADE'), nullable=False)
    user_id = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=False)
    content = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    author = db.relationship('User', lazy='joined')

    __table_args__ = (
        db.Index('idx_comment_post_date', 'blog_post_id', 'created_at'),
    )

    def to_dict(self):
        return {
            'id': self.id,
            'content': self.content,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'author': self.author.to_dict() if self.author else None
        }
