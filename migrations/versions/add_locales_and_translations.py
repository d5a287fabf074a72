"""Add locales and translations tables

Revision ID: add_locales_and_translations
Revises:
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = 'add_locales_and_translations'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'locales',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('iso_code', sa.String(20), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('charset', sa.String(50), nullable=True),
        sa.Column('rtl', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_locales_iso_code', 'locales', ['iso_code'], unique=True)

    op.create_table(
        'translations',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('translatable_type', sa.String(100), nullable=False),
        sa.Column('translatable_id', sa.Integer(), nullable=False),
        sa.Column('locale_id', sa.Integer(), nullable=False),
        sa.Column('property', sa.String(100), nullable=False),
        sa.Column('property_value', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['locale_id'], ['locales.id'], ),
        sa.PrimaryKeyConstraint('id'),
        # One row per entity/locale/property
        sa.UniqueConstraint(
            'translatable_type', 'translatable_id', 'locale_id', 'property',
            name='unique_entity_locale_property'
        )
    )

    op.create_index('ix_translations_locale_id', 'translations', ['locale_id'])
    op.create_index('ix_translations_translatable', 'translations', ['translatable_type', 'translatable_id'])


def downgrade():
    op.drop_index('ix_translations_translatable', table_name='translations')
    op.drop_index('ix_translations_locale_id', table_name='translations')
    op.drop_table('translations')
    op.drop_index('ix_locales_iso_code', table_name='locales')
    op.drop_table('locales')
