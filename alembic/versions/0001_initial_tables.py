"""Create applicant, job and bookmark tables

Revision ID: 0001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'applicants',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('public_id', sa.String(length=36), nullable=False),
        sa.Column('first_name', sa.String(length=255), nullable=False),
        sa.Column('last_name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('registration_step', sa.String(length=50), nullable=False, server_default='change-password'),
        sa.Column('phone_number', sa.String(length=50), nullable=True),
        sa.Column('address', sa.String(length=500), nullable=True),
        sa.Column('city', sa.String(length=255), nullable=True),
        sa.Column('state', sa.String(length=255), nullable=True),
        sa.Column('zipcode', sa.String(length=20), nullable=True),
        sa.Column('latitude', sa.Float(), nullable=True),
        sa.Column('longitude', sa.Float(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_applicants_public_id', 'applicants', ['public_id'], unique=True)
    op.create_index('ix_applicants_email', 'applicants', ['email'], unique=True)

    op.create_table(
        'desired_cities',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('applicant_id', sa.Integer(), nullable=False),
        sa.Column('city', sa.String(length=255), nullable=True),
        sa.Column('state', sa.String(length=255), nullable=True),
        sa.Column('country', sa.String(length=255), nullable=True),
        sa.Column('latitude', sa.Float(), nullable=True),
        sa.Column('longitude', sa.Float(), nullable=True),
        sa.Column('text', sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(['applicant_id'], ['applicants.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_desired_cities_applicant_id', 'desired_cities', ['applicant_id'], unique=False)

    op.create_table(
        'companies',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('public_id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('url', sa.String(length=500), nullable=True),
        sa.Column('logo', sa.String(length=500), nullable=True),
        sa.Column('location', sa.String(length=500), nullable=True),
        sa.Column('zipcode', sa.String(length=20), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('public_id')
    )
    op.create_index('ix_companies_zipcode', 'companies', ['zipcode'], unique=False)

    op.create_table(
        'employers',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('public_id', sa.String(length=36), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('company_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['company_id'], ['companies.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('public_id'),
        sa.UniqueConstraint('email')
    )

    op.create_table(
        'jobs',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('public_id', sa.String(length=36), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('job_type', sa.String(length=100), nullable=True),
        sa.Column('category', sa.String(length=100), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('visible_date', sa.DateTime(), nullable=True),
        sa.Column('remote', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('min_salary', sa.Integer(), nullable=True),
        sa.Column('max_salary', sa.Integer(), nullable=True),
        sa.Column('pay_period', sa.String(length=50), nullable=True),
        sa.Column('is_customized', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('employer_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['employer_id'], ['employers.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_jobs_public_id', 'jobs', ['public_id'], unique=True)
    op.create_index('ix_jobs_visible_date', 'jobs', ['visible_date'], unique=False)

    op.create_table(
        'applicant_job_bookmarks',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('public_id', sa.String(length=36), nullable=False),
        sa.Column('applicant_public_id', sa.String(length=36), nullable=False),
        sa.Column('job_public_id', sa.String(length=36), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('public_id'),
        sa.UniqueConstraint('applicant_public_id', 'job_public_id', name='uq_applicant_job_bookmark')
    )
    op.create_index('ix_applicant_job_bookmarks_applicant_public_id', 'applicant_job_bookmarks', ['applicant_public_id'], unique=False)
    op.create_index('ix_applicant_job_bookmarks_job_public_id', 'applicant_job_bookmarks', ['job_public_id'], unique=False)


def downgrade() -> None:
    op.drop_index('ix_applicant_job_bookmarks_job_public_id', table_name='applicant_job_bookmarks')
    op.drop_index('ix_applicant_job_bookmarks_applicant_public_id', table_name='applicant_job_bookmarks')
    op.drop_table('applicant_job_bookmarks')
    op.drop_index('ix_jobs_visible_date', table_name='jobs')
    op.drop_index('ix_jobs_public_id', table_name='jobs')
    op.drop_table('jobs')
    op.drop_table('employers')
    op.drop_index('ix_companies_zipcode', table_name='companies')
    op.drop_table('companies')
    op.drop_index('ix_desired_cities_applicant_id', table_name='desired_cities')
    op.drop_table('desired_cities')
    op.drop_index('ix_applicants_email', table_name='applicants')
    op.drop_index('ix_applicants_public_id', table_name='applicants')
    op.drop_table('applicants')
