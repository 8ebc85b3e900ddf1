"""crear interconsultas, disponibilidades y aula

Revision ID: 0001
Revises:
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'interconsultas',
        sa.Column('id_interconsulta', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('uuid', sa.String(36), nullable=False, unique=True),
        sa.Column('motivo', sa.String(200), nullable=True),
        sa.Column('estado', sa.String(20), nullable=True),
        sa.Column('fecha_solicitud', sa.DateTime(), nullable=True),
    )
    op.create_table(
        'disponibilidades',
        sa.Column('id_disponibilidad', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('uuid', sa.String(36), nullable=True, unique=True),
        sa.Column('fecha_inicio', sa.DateTime(), nullable=False),
        sa.Column('fecha_fin', sa.DateTime(), nullable=False),
        sa.Column('disponible', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('nota', sa.String(255), nullable=True),
        sa.Column(
            'nid_interconsulta',
            sa.Integer(),
            sa.ForeignKey('interconsultas.id_interconsulta'),
            nullable=True,
        ),
    )
    op.create_table(
        'aula',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column('edificio', sa.String(100), nullable=False),
        sa.Column('no_asignacion', sa.String(50), nullable=False),
        sa.Column('nota', sa.String(255), nullable=True),
    )


def downgrade() -> None:
    op.drop_table('aula')
    op.drop_table('disponibilidades')
    op.drop_table('interconsultas')
