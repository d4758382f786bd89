"""Initial schema

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# Enum columns store member names
loan_type = sa.Enum('FIXED', 'ADJUSTABLE', name='loan_type')
loan_purpose = sa.Enum(
    'PURCHASE', 'REFINANCE', 'CASH_OUT_REFINANCE', 'CONSTRUCTION', name='loan_purpose'
)
property_type = sa.Enum(
    'SINGLE_FAMILY', 'CONDO', 'TOWNHOUSE', 'MULTI_FAMILY', 'MANUFACTURED', name='property_type'
)
occupancy_type = sa.Enum('PRIMARY', 'SECONDARY', 'INVESTMENT', name='occupancy_type')
application_status = sa.Enum('SUBMITTED', 'MATCHED', name='application_status')
lender_response = sa.Enum('PENDING', 'INTERESTED', 'DECLINED', name='lender_response')


def audit_columns() -> list:
    return [
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    # Create lenders table
    op.create_table(
        'lenders',
        *audit_columns(),
        sa.Column('principal', sa.String(length=128), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('license_number', sa.String(length=64), nullable=False),
        sa.Column('contact_info', sa.Text(), nullable=True),
        sa.Column('is_approved', sa.Boolean(), nullable=False),
        sa.Column('reputation_score', sa.Integer(), nullable=False),
        sa.Column('total_loans_issued', sa.Integer(), nullable=False),
        sa.Column('average_rate', sa.Integer(), nullable=False),
    )
    op.create_index('ix_lenders_principal', 'lenders', ['principal'], unique=True)

    # Create mortgage_offers table
    op.create_table(
        'mortgage_offers',
        *audit_columns(),
        sa.Column(
            'lender_id', sa.Uuid(),
            sa.ForeignKey('lenders.id', ondelete='CASCADE'), nullable=False,
        ),
        sa.Column('loan_type', loan_type, nullable=False),
        sa.Column('interest_rate', sa.Integer(), nullable=False),
        sa.Column('loan_term', sa.Integer(), nullable=False),
        sa.Column('apr', sa.Integer(), nullable=False),
        sa.Column('min_loan_amount', sa.BigInteger(), nullable=False),
        sa.Column('max_loan_amount', sa.BigInteger(), nullable=False),
        sa.Column('max_ltv_ratio', sa.Integer(), nullable=False),
        sa.Column('min_credit_score', sa.Integer(), nullable=False),
        sa.Column('min_income', sa.BigInteger(), nullable=False),
        sa.Column('points', sa.Integer(), nullable=False),
        sa.Column('origination_fee', sa.Integer(), nullable=False),
        sa.Column('closing_cost_estimate', sa.BigInteger(), nullable=False),
        sa.Column('valid_until', sa.DateTime(timezone=True), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
    )
    op.create_index('ix_mortgage_offers_lender_id', 'mortgage_offers', ['lender_id'])
    op.create_index('ix_mortgage_offers_is_active', 'mortgage_offers', ['is_active'])

    # Create borrowers table
    op.create_table(
        'borrowers',
        *audit_columns(),
        sa.Column('principal', sa.String(length=128), nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('last_name', sa.String(length=100), nullable=False),
        sa.Column('applications_count', sa.Integer(), nullable=False),
        sa.Column('verified', sa.Boolean(), nullable=False),
    )
    op.create_index('ix_borrowers_principal', 'borrowers', ['principal'], unique=True)

    # Create mortgage_applications table
    op.create_table(
        'mortgage_applications',
        *audit_columns(),
        sa.Column(
            'borrower_id', sa.Uuid(),
            sa.ForeignKey('borrowers.id', ondelete='CASCADE'), nullable=False,
        ),
        sa.Column('loan_amount', sa.BigInteger(), nullable=False),
        sa.Column('property_value', sa.BigInteger(), nullable=False),
        sa.Column('down_payment', sa.BigInteger(), nullable=False),
        sa.Column('preferred_term', sa.Integer(), nullable=True),
        sa.Column('credit_score', sa.Integer(), nullable=False),
        sa.Column('annual_income', sa.BigInteger(), nullable=False),
        sa.Column('debt_to_income', sa.Integer(), nullable=False),
        sa.Column('loan_purpose', loan_purpose, nullable=False),
        sa.Column('property_type', property_type, nullable=False),
        sa.Column('occupancy_type', occupancy_type, nullable=False),
        sa.Column('status', application_status, nullable=False),
    )
    op.create_index(
        'ix_mortgage_applications_borrower_id', 'mortgage_applications', ['borrower_id']
    )
    op.create_index('ix_mortgage_applications_status', 'mortgage_applications', ['status'])

    # Create application_matches table
    op.create_table(
        'application_matches',
        *audit_columns(),
        sa.Column(
            'application_id', sa.Uuid(),
            sa.ForeignKey('mortgage_applications.id', ondelete='CASCADE'), nullable=False,
        ),
        sa.Column(
            'offer_id', sa.Uuid(),
            sa.ForeignKey('mortgage_offers.id', ondelete='CASCADE'), nullable=False,
        ),
        sa.Column('match_score', sa.Integer(), nullable=False),
        sa.Column('estimated_payment', sa.BigInteger(), nullable=False),
        sa.Column('total_interest', sa.BigInteger(), nullable=False),
        sa.Column('total_closing_costs', sa.BigInteger(), nullable=False),
        sa.Column('lender_response', lender_response, nullable=False),
        sa.UniqueConstraint('application_id', 'offer_id', name='uq_match_application_offer'),
    )
    op.create_index(
        'ix_application_matches_application_id', 'application_matches', ['application_id']
    )
    op.create_index('ix_application_matches_offer_id', 'application_matches', ['offer_id'])

    # Create platform_stats table; the row itself is seeded on startup
    op.create_table(
        'platform_stats',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('total_lenders', sa.Integer(), nullable=False),
        sa.Column('total_offers', sa.Integer(), nullable=False),
        sa.Column('total_applications', sa.Integer(), nullable=False),
        sa.Column('min_credit_score', sa.Integer(), nullable=False),
        sa.Column('max_loan_to_value', sa.Integer(), nullable=False),
        sa.Column('platform_fee_rate', sa.Integer(), nullable=False),
        sa.Column('is_paused', sa.Boolean(), nullable=False),
    )


def downgrade() -> None:
    # Drop tables in reverse order (respecting foreign key constraints)
    op.drop_table('platform_stats')

    op.drop_index('ix_application_matches_offer_id', table_name='application_matches')
    op.drop_index('ix_application_matches_application_id', table_name='application_matches')
    op.drop_table('application_matches')

    op.drop_index('ix_mortgage_applications_status', table_name='mortgage_applications')
    op.drop_index('ix_mortgage_applications_borrower_id', table_name='mortgage_applications')
    op.drop_table('mortgage_applications')

    op.drop_index('ix_borrowers_principal', table_name='borrowers')
    op.drop_table('borrowers')

    op.drop_index('ix_mortgage_offers_is_active', table_name='mortgage_offers')
    op.drop_index('ix_mortgage_offers_lender_id', table_name='mortgage_offers')
    op.drop_table('mortgage_offers')

    op.drop_index('ix_lenders_principal', table_name='lenders')
    op.drop_table('lenders')

    # Drop ENUM types (no-op on backends without named enums)
    bind = op.get_bind()
    for enum_type in (
        lender_response,
        application_status,
        occupancy_type,
        property_type,
        loan_purpose,
        loan_type,
    ):
        enum_type.drop(bind, checkfirst=True)
