"""create image table

Revision ID: 1c5e0b7a9d21
Revises:
Create Date: 2026-10-19 00:00:00
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '1c5e0b7a9d21'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    if 'image' in set(insp.get_table_names()):
        return
    op.create_table(
        'image',
        sa.Column('id', sa.String(length=128), nullable=False),
        sa.Column('file', sa.String(length=256), nullable=False),
        sa.Column('city', sa.String(length=128), nullable=False),
        sa.Column('coast', sa.String(length=8), nullable=False),
        sa.Column('unsplash_id', sa.String(length=64), nullable=True),
        sa.Column('photographer', sa.String(length=128), nullable=True),
        sa.Column('unsplash_link', sa.String(length=512), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('unsplash_id'),
    )
    with op.batch_alter_table('image') as batch_op:
        batch_op.create_index('ix_image_city', ['city'], unique=False)
        batch_op.create_index('ix_image_coast', ['coast'], unique=False)


def downgrade():
    with op.batch_alter_table('image') as batch_op:
        batch_op.drop_index('ix_image_coast')
        batch_op.drop_index('ix_image_city')
    op.drop_table('image')
