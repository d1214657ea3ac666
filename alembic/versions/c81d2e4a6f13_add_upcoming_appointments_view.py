"""Add upcoming appointments view

Revision ID: c81d2e4a6f13
Revises: a3c1e5f7b902
Create Date: 2025-11-02 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op

# revision identifiers, used by Alembic.
revision: str = 'c81d2e4a6f13'
down_revision: Union[str, None] = 'a3c1e5f7b902'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Same projection as clinic.appointments.upcoming, read against CURRENT_DATE.
    # PostgreSQL only; other backends use the query builder directly.
    if op.get_bind().dialect.name != 'postgresql':
        return
    op.execute("""
        CREATE OR REPLACE VIEW upcoming_appointments AS
        SELECT
            a.id               AS appointment_id,
            a.appointment_date,
            a.appointment_time,
            a.reason,
            p.name             AS patient_name,
            p.phone            AS patient_phone,
            d.name             AS doctor_name,
            d.specialty        AS doctor_specialty,
            (a.appointment_date - CURRENT_DATE) AS days_remaining
        FROM appointments a
        JOIN patients p ON a.patient_id = p.id
        JOIN doctors  d ON a.doctor_id  = d.id
        WHERE a.appointment_date BETWEEN CURRENT_DATE AND CURRENT_DATE + 7
    """)


def downgrade() -> None:
    if op.get_bind().dialect.name != 'postgresql':
        return
    op.execute("DROP VIEW IF EXISTS upcoming_appointments")
