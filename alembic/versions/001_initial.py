"""Initial migration

Revision ID: 001
Revises: 
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Create users table
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('username', sa.String(50), unique=True, nullable=False),
        sa.Column('email', sa.String(255), unique=True, nullable=False),
        sa.Column('hashed_password', sa.String(255), nullable=False),
        sa.Column('role', sa.Enum('admin', 'staff', name='userrole'), default='staff'),
        sa.Column('is_active', sa.Boolean(), default=True),
        sa.Column('last_login', sa.DateTime()),
        sa.Column('created_at', sa.DateTime(), default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), default=sa.func.now(), onupdate=sa.func.now()),
    )

    # Create menu_items table
    op.create_table(
        'menu_items',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('description', sa.String(500), nullable=False),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('category', sa.String(20), nullable=False, server_default='ice-cream'),
        sa.Column('image_url', sa.Text()),
        sa.Column('is_available', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('is_special', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('allergens', sa.JSON(), nullable=False),
        sa.Column('nutrition_info', sa.JSON()),
        sa.Column('created_at', sa.DateTime(), default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), default=sa.func.now(), onupdate=sa.func.now()),
    )

    # Create reviews table (menu_item_id is deliberately not a foreign key)
    op.create_table(
        'reviews',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('customer_name', sa.String(50), nullable=False),
        sa.Column('email', sa.String(255)),
        sa.Column('rating', sa.Integer(), nullable=False),
        sa.Column('comment', sa.String(500), nullable=False),
        sa.Column('is_approved', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('menu_item_id', sa.Uuid()),
        sa.Column('created_at', sa.DateTime(), default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), default=sa.func.now(), onupdate=sa.func.now()),
        sa.CheckConstraint('rating BETWEEN 1 AND 5', name='ck_reviews_rating_range'),
    )

    # Create blog_posts table
    op.create_table(
        'blog_posts',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('excerpt', sa.String(300), nullable=False),
        sa.Column('author', sa.String(50), nullable=False),
        sa.Column('category', sa.String(20), nullable=False, server_default='news'),
        sa.Column('image_url', sa.Text()),
        sa.Column('published', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('tags', sa.JSON(), nullable=False),
        sa.Column('view_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(), default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), default=sa.func.now(), onupdate=sa.func.now()),
    )

    # Create contact_messages table
    op.create_table(
        'contact_messages',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(50), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('subject', sa.String(100), nullable=False),
        sa.Column('message', sa.String(1000), nullable=False),
        sa.Column('phone', sa.String(20)),
        sa.Column('is_read', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), default=sa.func.now(), onupdate=sa.func.now()),
    )

    # Create indexes
    op.create_index('ix_menu_items_category_available', 'menu_items', ['category', 'is_available'])
    op.create_index('ix_menu_items_is_special', 'menu_items', ['is_special'])
    op.create_index('ix_reviews_approved_created', 'reviews', ['is_approved', 'created_at'])
    op.create_index('ix_reviews_rating', 'reviews', ['rating'])
    op.create_index('ix_blog_posts_published_created', 'blog_posts', ['published', 'created_at'])
    op.create_index('ix_blog_posts_category_published', 'blog_posts', ['category', 'published'])
    op.create_index('ix_contact_messages_read_created', 'contact_messages', ['is_read', 'created_at'])
    op.create_index('ix_contact_messages_email', 'contact_messages', ['email'])


def downgrade() -> None:
    op.drop_table('contact_messages')
    op.drop_table('blog_posts')
    op.drop_table('reviews')
    op.drop_table('menu_items')
    op.drop_table('users')
    sa.Enum(name='userrole').drop(op.get_bind(), checkfirst=True)
